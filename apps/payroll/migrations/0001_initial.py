from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("employees", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PayrollRun",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("month", models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])),
                ("year", models.PositiveSmallIntegerField()),
                (
                    "status",
                    models.CharField(
                        choices=[("PENDING", "Pending"), ("PROCESSED", "Processed")],
                        default="PENDING",
                        max_length=20,
                    ),
                ),
                ("processed_at", models.DateTimeField(blank=True, null=True)),
                ("total_employees", models.PositiveIntegerField(default=0)),
                ("processed_employees", models.PositiveIntegerField(default=0)),
                ("total_gross_salary", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("total_deductions", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("total_net_salary", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-year", "-month"],
                "indexes": [models.Index(fields=["status"], name="payroll_pay_status_4a7c1e_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("month", "year"), name="payroll_unique_run_period"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PayrollCalculation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("gross_earnings", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("pf_employee", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("esi_employee", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("professional_tax", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("tds", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("other_deductions", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("total_deductions", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("net_pay", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("is_valid", models.BooleanField(default=True)),
                ("validation_errors", models.JSONField(blank=True, default=list)),
                ("validation_warnings", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="payroll_calculations",
                        to="employees.employee",
                    ),
                ),
                (
                    "payroll_run",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="calculations",
                        to="payroll.payrollrun",
                    ),
                ),
            ],
            options={
                "ordering": ["payroll_run_id", "employee_id"],
                "constraints": [
                    models.UniqueConstraint(fields=("payroll_run", "employee"), name="payroll_unique_calculation_employee"),
                ],
            },
        ),
    ]
