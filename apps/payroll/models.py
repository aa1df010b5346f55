from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class PayrollRun(models.Model):
    class Status(models.TextChoices):
        PENDING = "PENDING", "Pending"
        PROCESSED = "PROCESSED", "Processed"

    month = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])
    year = models.PositiveSmallIntegerField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    processed_at = models.DateTimeField(null=True, blank=True)
    total_employees = models.PositiveIntegerField(default=0)
    processed_employees = models.PositiveIntegerField(default=0)
    total_gross_salary = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    total_deductions = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    total_net_salary = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-year", "-month"]
        indexes = [
            models.Index(fields=["status"], name="payroll_pay_status_4a7c1e_idx"),
        ]
        constraints = [
            models.UniqueConstraint(fields=["month", "year"], name="payroll_unique_run_period"),
            models.CheckConstraint(
                condition=models.Q(month__gte=1, month__lte=12),
                name="payroll_run_month_range",
            ),
        ]

    @property
    def period(self) -> str:
        return f"{self.year}-{self.month:02d}"

    def __str__(self):
        return f"{self.period}:{self.status}"


class PayrollCalculation(models.Model):
    payroll_run = models.ForeignKey(
        PayrollRun,
        on_delete=models.CASCADE,
        related_name="calculations",
    )
    employee = models.ForeignKey(
        "employees.Employee",
        on_delete=models.PROTECT,
        related_name="payroll_calculations",
    )
    gross_earnings = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    pf_employee = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    esi_employee = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    professional_tax = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    tds = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    other_deductions = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_deductions = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    net_pay = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    is_valid = models.BooleanField(default=True)
    validation_errors = models.JSONField(default=list, blank=True)
    validation_warnings = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["payroll_run_id", "employee_id"]
        constraints = [
            models.UniqueConstraint(fields=["payroll_run", "employee"], name="payroll_unique_calculation_employee"),
        ]

    def __str__(self):
        return f"{self.payroll_run_id}:{self.employee_id}:{self.net_pay}"
