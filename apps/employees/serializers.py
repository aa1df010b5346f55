from rest_framework import serializers

from .models import Employee


class EmployeeSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = (
            "id",
            "employee_code",
            "name",
            "department",
            "designation",
            "status",
            "salary",
            "basic_salary",
            "hra",
            "allowances",
            "pf_opt_in",
            "esi_applicable",
        )
        read_only_fields = fields


class EmployeeFilterSerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=Employee.Status.choices, required=False)
    department = serializers.CharField(required=False, allow_blank=True)


class EmployeeSerializer(serializers.ModelSerializer):
    salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    basic_salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)

    class Meta:
        model = Employee
        fields = (
            "id",
            "employee_code",
            "name",
            "email",
            "phone",
            "department",
            "designation",
            "joining_date",
            "status",
            "salary",
            "basic_salary",
            "hra",
            "allowances",
            "pf_opt_in",
            "esi_applicable",
            "pan",
            "uan",
            "esic_number",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("created_at", "updated_at")
        # Duplicate codes and emails are answered with 409 by the view.
        extra_kwargs = {
            "employee_code": {"validators": []},
            "email": {"validators": []},
        }
