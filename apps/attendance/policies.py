from __future__ import annotations

from accounts.access_policy import AccessPolicy


class AttendancePolicy:
    @staticmethod
    def can_view_calendar(user) -> bool:
        return bool(user and user.is_authenticated)

    @staticmethod
    def can_view_records(user) -> bool:
        return bool(user and user.is_authenticated)

    @staticmethod
    def can_manage_records(user) -> bool:
        return bool(
            user
            and user.is_authenticated
            and (AccessPolicy.is_admin_like(user) or AccessPolicy.is_hr(user))
        )
