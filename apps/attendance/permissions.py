from rest_framework.permissions import SAFE_METHODS, BasePermission

from .policies import AttendancePolicy


class CanViewWorkingCalendar(BasePermission):
    def has_permission(self, request, view):
        return AttendancePolicy.can_view_calendar(request.user)


class IsAttendanceManager(BasePermission):
    def has_permission(self, request, view):
        return AttendancePolicy.can_manage_records(request.user)


class IsAttendanceManagerOrReadOnly(BasePermission):
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return AttendancePolicy.can_view_records(request.user)
        return AttendancePolicy.can_manage_records(request.user)
