from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class StatutoryReturn(models.Model):
    class ReturnType(models.TextChoices):
        PF = "pf", "Provident Fund"
        ESI = "esi", "Employee State Insurance"
        TDS = "tds", "Tax Deducted at Source"
        PT = "pt", "Professional Tax"

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        GENERATED = "generated", "Generated"
        FILED = "filed", "Filed"
        OVERDUE = "overdue", "Overdue"

    title = models.CharField(max_length=200)
    return_type = models.CharField(max_length=10, choices=ReturnType.choices)
    month = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])
    year = models.PositiveSmallIntegerField()
    due_date = models.DateField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    amount = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    employees = models.PositiveIntegerField(default=0)
    payroll_run = models.ForeignKey(
        "payroll.PayrollRun",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="statutory_returns",
    )
    generated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-generated_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["return_type", "month", "year"], name="compliance_unique_return_period"),
        ]

    def __str__(self):
        return self.title
