from rest_framework.permissions import BasePermission

from .policies import PayrollPolicy


class IsPayrollOperator(BasePermission):
    def has_permission(self, request, view):
        return PayrollPolicy.can_process_payroll(request.user)


class IsPayrollViewer(BasePermission):
    def has_permission(self, request, view):
        return PayrollPolicy.can_view_payroll(request.user)
