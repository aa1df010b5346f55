from __future__ import annotations

from accounts.access_policy import AccessPolicy


class PayrollPolicy:
    @staticmethod
    def can_process_payroll(user) -> bool:
        return bool(
            user
            and user.is_authenticated
            and (
                AccessPolicy.is_super_admin(user)
                or AccessPolicy.is_admin(user)
                or AccessPolicy.is_hr(user)
            )
        )

    @staticmethod
    def can_view_payroll(user) -> bool:
        return PayrollPolicy.can_process_payroll(user)
