from rest_framework.permissions import SAFE_METHODS, BasePermission

from .policies import EmployeePolicy


class IsEmployeeManager(BasePermission):
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return EmployeePolicy.can_view_employees(request.user)
        return EmployeePolicy.can_manage_employees(request.user)
