from __future__ import annotations

from accounts.access_policy import AccessPolicy


class EmployeePolicy:
    @staticmethod
    def can_view_employees(user) -> bool:
        return AccessPolicy.can_access_admin_panel(user)

    @staticmethod
    def can_manage_employees(user) -> bool:
        return AccessPolicy.can_access_admin_panel(user)
