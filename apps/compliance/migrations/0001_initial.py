from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("payroll", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="StatutoryReturn",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                (
                    "return_type",
                    models.CharField(
                        choices=[
                            ("pf", "Provident Fund"),
                            ("esi", "Employee State Insurance"),
                            ("tds", "Tax Deducted at Source"),
                            ("pt", "Professional Tax"),
                        ],
                        max_length=10,
                    ),
                ),
                ("month", models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])),
                ("year", models.PositiveSmallIntegerField()),
                ("due_date", models.DateField()),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("generated", "Generated"),
                            ("filed", "Filed"),
                            ("overdue", "Overdue"),
                        ],
                        default="pending",
                        max_length=20,
                    ),
                ),
                ("amount", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("employees", models.PositiveIntegerField(default=0)),
                (
                    "payroll_run",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="statutory_returns",
                        to="payroll.payrollrun",
                    ),
                ),
                ("generated_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "ordering": ["-generated_at", "-id"],
                "constraints": [
                    models.UniqueConstraint(fields=("return_type", "month", "year"), name="compliance_unique_return_period"),
                ],
            },
        ),
    ]
