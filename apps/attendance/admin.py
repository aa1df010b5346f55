from django.contrib import admin

from accounts.access_policy import AccessPolicy
from .models import AttendanceRecord, OrganizationHoliday, PublicHoliday
from .policies import AttendancePolicy


class SuperAdminOnlyAdminMixin:
    def _can_access(self, request) -> bool:
        return AccessPolicy.is_super_admin(request.user)

    def has_module_permission(self, request):
        return self._can_access(request)

    def has_view_permission(self, request, obj=None):
        return self._can_access(request)

    def has_add_permission(self, request):
        return self._can_access(request)

    def has_change_permission(self, request, obj=None):
        return self._can_access(request)

    def has_delete_permission(self, request, obj=None):
        return self._can_access(request)


class AttendanceManagerAdminMixin:
    def _can_manage(self, request) -> bool:
        return AttendancePolicy.can_manage_records(request.user)

    def has_module_permission(self, request):
        return self._can_manage(request)

    def has_view_permission(self, request, obj=None):
        return self._can_manage(request)

    def has_add_permission(self, request):
        return self._can_manage(request)

    def has_change_permission(self, request, obj=None):
        return self._can_manage(request)

    def has_delete_permission(self, request, obj=None):
        return self._can_manage(request)


@admin.register(PublicHoliday)
class PublicHolidayAdmin(SuperAdminOnlyAdminMixin, admin.ModelAdmin):
    list_display = ("date", "name")
    search_fields = ("name",)
    ordering = ("date",)


@admin.register(OrganizationHoliday)
class OrganizationHolidayAdmin(AttendanceManagerAdminMixin, admin.ModelAdmin):
    list_display = ("date", "name", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("name",)
    ordering = ("date",)
    readonly_fields = ("created_at",)


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(AttendanceManagerAdminMixin, admin.ModelAdmin):
    list_display = ("employee", "year", "month", "present_days", "total_days", "leaves_taken", "overtime_hours")
    list_filter = ("year", "month")
    search_fields = ("employee__name", "employee__employee_code")
    list_select_related = ("employee",)
    readonly_fields = ("created_at", "updated_at")
