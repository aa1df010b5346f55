from django.contrib.auth.models import AbstractUser
from django.db import models

from .managers import RoleManager, UserManager


# ================= RBAC =================
class Role(models.Model):
    class Name(models.TextChoices):
        SUPER_ADMIN = "SUPER_ADMIN", "SuperAdmin"
        ADMIN = "ADMIN", "Admin"
        HR = "HR", "HR"
        EMPLOYEE = "EMPLOYEE", "Employee"

    class Level(models.IntegerChoices):
        EMPLOYEE = 20, "Employee"
        HR = 25, "HR"
        ADMIN = 30, "Admin"
        SUPER_ADMIN = 40, "SuperAdmin"

    name = models.CharField("Name", max_length=50, choices=Name.choices, unique=True)
    level = models.PositiveSmallIntegerField(
        "Level",
        choices=Level.choices,
        default=Level.EMPLOYEE,
    )
    description = models.TextField("Description", blank=True)

    objects = RoleManager()

    class Meta:
        verbose_name = "Role"
        verbose_name_plural = "Roles"

    def __str__(self):
        return self.name


# ================= User =================
class User(AbstractUser):
    role = models.ForeignKey(
        Role,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        verbose_name="System role",
    )
    phone = models.CharField("Phone", max_length=50, blank=True)

    objects = UserManager()

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    @property
    def role_name(self) -> str | None:
        if not self.role_id:
            return None
        return self.role.name
