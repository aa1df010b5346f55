from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class PublicHoliday(models.Model):
    date = models.DateField(unique=True)
    name = models.CharField(max_length=150)

    class Meta:
        ordering = ["date"]

    def __str__(self):
        return f"{self.date} {self.name}"


class OrganizationHoliday(models.Model):
    date = models.DateField(unique=True)
    name = models.CharField(max_length=150)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["date"]
        indexes = [
            models.Index(fields=["is_active"], name="attendance__is_acti_8d41c2_idx"),
        ]

    def __str__(self):
        return f"{self.date} {self.name}"


class AttendanceRecord(models.Model):
    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.CASCADE,
        related_name="attendance_records",
    )
    month = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])
    year = models.PositiveSmallIntegerField()
    present_days = models.PositiveSmallIntegerField(default=0)
    total_days = models.PositiveSmallIntegerField(default=0)
    overtime_hours = models.DecimalField(max_digits=6, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    leaves_taken = models.PositiveSmallIntegerField(default=0)
    shift_allowance = models.DecimalField(max_digits=12, decimal_places=2, default=0, validators=[MinValueValidator(0)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-year", "-month", "-created_at"]
        indexes = [
            models.Index(fields=["year", "month"], name="attendance__year_6b0e7d_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["employee", "month", "year"], name="attendance_unique_employee_period"),
        ]

    def __str__(self):
        return f"{self.employee_id} {self.year}-{self.month:02d}"
