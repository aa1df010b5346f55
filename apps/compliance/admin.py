from django.contrib import admin

from apps.payroll.policies import PayrollPolicy

from .models import StatutoryReturn


@admin.register(StatutoryReturn)
class StatutoryReturnAdmin(admin.ModelAdmin):
    list_display = ("title", "return_type", "month", "year", "due_date", "status", "amount", "employees")
    list_filter = ("return_type", "status", "year")
    search_fields = ("title",)
    readonly_fields = ("amount", "employees", "payroll_run", "generated_at")

    def has_module_permission(self, request):
        return PayrollPolicy.can_view_payroll(request.user)

    def has_view_permission(self, request, obj=None):
        return PayrollPolicy.can_view_payroll(request.user)

    def has_add_permission(self, request):
        return False

    # Filing status is tracked by hand.
    def has_change_permission(self, request, obj=None):
        return PayrollPolicy.can_process_payroll(request.user)

    def has_delete_permission(self, request, obj=None):
        return False
