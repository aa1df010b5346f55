from django.contrib import admin

from .models import PayrollCalculation, PayrollRun
from .policies import PayrollPolicy


class PayrollViewAdminMixin:
    def _can_view(self, request) -> bool:
        return PayrollPolicy.can_view_payroll(request.user)

    def has_module_permission(self, request):
        return self._can_view(request)

    def has_view_permission(self, request, obj=None):
        return self._can_view(request)

    # Runs are produced by the processing service only.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


class PayrollCalculationInline(admin.TabularInline):
    model = PayrollCalculation
    extra = 0
    can_delete = False
    fields = (
        "employee",
        "gross_earnings",
        "pf_employee",
        "esi_employee",
        "professional_tax",
        "tds",
        "total_deductions",
        "net_pay",
        "is_valid",
    )
    readonly_fields = fields

    def has_view_permission(self, request, obj=None):
        return PayrollPolicy.can_view_payroll(request.user)

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(PayrollRun)
class PayrollRunAdmin(PayrollViewAdminMixin, admin.ModelAdmin):
    list_display = (
        "period",
        "status",
        "total_employees",
        "total_gross_salary",
        "total_deductions",
        "total_net_salary",
        "processed_at",
    )
    list_filter = ("status", "year", "month")
    ordering = ("-year", "-month")
    inlines = (PayrollCalculationInline,)


@admin.register(PayrollCalculation)
class PayrollCalculationAdmin(PayrollViewAdminMixin, admin.ModelAdmin):
    list_display = ("payroll_run", "employee", "gross_earnings", "total_deductions", "net_pay", "is_valid")
    list_filter = ("is_valid", "payroll_run__year", "payroll_run__month")
    search_fields = ("employee__name", "employee__employee_code")
    list_select_related = ("payroll_run", "employee")
