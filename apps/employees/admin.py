from django.contrib import admin

from accounts.access_policy import AccessPolicy

from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ("employee_code", "name", "department", "status", "salary", "pf_opt_in", "esi_applicable")
    list_filter = ("status", "department", "pf_opt_in", "esi_applicable")
    search_fields = ("employee_code", "name", "email")
    readonly_fields = ("created_at", "updated_at")
    fieldsets = (
        (None, {"fields": ("employee_code", "name", "email", "phone", "status")}),
        ("Organization", {"fields": ("department", "designation", "joining_date")}),
        ("Salary structure", {"fields": ("salary", "basic_salary", "hra", "allowances")}),
        ("Statutory", {"fields": ("pf_opt_in", "esi_applicable", "pan", "uan", "esic_number")}),
        ("System", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )

    def has_module_permission(self, request):
        return AccessPolicy.can_access_admin_panel(request.user)

    def has_view_permission(self, request, obj=None):
        return AccessPolicy.can_access_admin_panel(request.user)

    def has_add_permission(self, request):
        return AccessPolicy.can_access_admin_panel(request.user)

    def has_change_permission(self, request, obj=None):
        return AccessPolicy.can_access_admin_panel(request.user)

    def has_delete_permission(self, request, obj=None):
        return AccessPolicy.is_admin_like(request.user)
