from django.urls import path

from .views import EmployeeDetailAPIView, EmployeeListAPIView


urlpatterns = [
    path("", EmployeeListAPIView.as_view(), name="employees"),
    path("<int:employee_id>/", EmployeeDetailAPIView.as_view(), name="employee-detail"),
]
