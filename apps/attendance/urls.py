from django.urls import path

from .views import AttendanceRecordDetailAPIView, AttendanceRecordListAPIView, WorkingCalendarAPIView


urlpatterns = [
    path("calendar/", WorkingCalendarAPIView.as_view(), name="attendance-calendar"),
    path("records/", AttendanceRecordListAPIView.as_view(), name="attendance-records"),
    path("records/<int:record_id>/", AttendanceRecordDetailAPIView.as_view(), name="attendance-record-detail"),
]
