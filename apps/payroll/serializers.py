from rest_framework import serializers

from apps.employees.serializers import EmployeeSummarySerializer

from .models import PayrollCalculation, PayrollRun


class MonthQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    month = serializers.IntegerField(min_value=1, max_value=12)


class PayrollProcessSerializer(MonthQuerySerializer):
    pass


class PayrollCalculationSerializer(serializers.ModelSerializer):
    employee = EmployeeSummarySerializer(read_only=True)

    class Meta:
        model = PayrollCalculation
        fields = (
            "id",
            "employee",
            "gross_earnings",
            "pf_employee",
            "esi_employee",
            "professional_tax",
            "tds",
            "other_deductions",
            "total_deductions",
            "net_pay",
            "is_valid",
            "validation_errors",
            "validation_warnings",
            "created_at",
        )
        read_only_fields = fields


class PayrollRunSerializer(serializers.ModelSerializer):
    calculations = PayrollCalculationSerializer(many=True, read_only=True)

    class Meta:
        model = PayrollRun
        fields = (
            "id",
            "month",
            "year",
            "status",
            "processed_at",
            "total_employees",
            "processed_employees",
            "total_gross_salary",
            "total_deductions",
            "total_net_salary",
            "calculations",
            "created_at",
            "updated_at",
        )
        read_only_fields = fields
