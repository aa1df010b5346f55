from django.urls import path

from .views import PayrollProcessAPIView, PayrollRunAPIView


urlpatterns = [
    path("process/", PayrollProcessAPIView.as_view(), name="payroll-process"),
    path("runs/", PayrollRunAPIView.as_view(), name="payroll-runs"),
]
