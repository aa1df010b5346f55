from __future__ import annotations

from .models import Role


class AccessPolicy:
    """Centralized role checks shared by the payroll, attendance and compliance apps."""

    @staticmethod
    def _has_role(user) -> bool:
        return bool(user and user.is_authenticated and getattr(user, "role", None))

    @classmethod
    def is_super_admin(cls, user) -> bool:
        if user and user.is_authenticated and getattr(user, "is_superuser", False):
            return True
        return cls._has_role(user) and user.role.name == Role.Name.SUPER_ADMIN

    @classmethod
    def is_admin(cls, user) -> bool:
        return cls._has_role(user) and user.role.name == Role.Name.ADMIN

    @classmethod
    def is_hr(cls, user) -> bool:
        return cls._has_role(user) and user.role.name == Role.Name.HR

    @classmethod
    def is_admin_like(cls, user) -> bool:
        return cls.is_super_admin(user) or cls.is_admin(user)

    @classmethod
    def can_access_admin_panel(cls, user) -> bool:
        return bool(user and user.is_authenticated and (cls.is_admin_like(user) or cls.is_hr(user)))
