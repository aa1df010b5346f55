from django.apps import apps
from django.contrib.auth.models import UserManager as DjangoUserManager
from django.db import models


class RoleManager(models.Manager):
    def ensure(self, name):
        """Role row for ``name``, created with its matching level on first use."""
        Role = self.model
        role, _ = self.get_or_create(
            name=name,
            defaults={
                "level": Role.Level[Role.Name(name).name],
                "description": f"{Role.Name(name).label} access to payroll administration",
            },
        )
        return role


class UserManager(DjangoUserManager):

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        Role = apps.get_model("accounts", "Role")
        extra_fields["role"] = Role.objects.ensure(Role.Name.SUPER_ADMIN)

        return super().create_superuser(username, email, password, **extra_fields)
