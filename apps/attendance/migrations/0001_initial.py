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
            name="PublicHoliday",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(unique=True)),
                ("name", models.CharField(max_length=150)),
            ],
            options={
                "ordering": ["date"],
            },
        ),
        migrations.CreateModel(
            name="OrganizationHoliday",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(unique=True)),
                ("name", models.CharField(max_length=150)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["date"],
                "indexes": [models.Index(fields=["is_active"], name="attendance__is_acti_8d41c2_idx")],
            },
        ),
        migrations.CreateModel(
            name="AttendanceRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("month", models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(12)])),
                ("year", models.PositiveSmallIntegerField()),
                ("present_days", models.PositiveSmallIntegerField(default=0)),
                ("total_days", models.PositiveSmallIntegerField(default=0)),
                ("overtime_hours", models.DecimalField(decimal_places=2, default=0, max_digits=6, validators=[MinValueValidator(0)])),
                ("leaves_taken", models.PositiveSmallIntegerField(default=0)),
                ("shift_allowance", models.DecimalField(decimal_places=2, default=0, max_digits=12, validators=[MinValueValidator(0)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "employee",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attendance_records",
                        to="employees.employee",
                    ),
                ),
            ],
            options={
                "ordering": ["-year", "-month", "-created_at"],
                "indexes": [models.Index(fields=["year", "month"], name="attendance__year_6b0e7d_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("employee", "month", "year"), name="attendance_unique_employee_period"),
                ],
            },
        ),
    ]
