from rest_framework import serializers

from apps.employees.models import Employee

from .models import AttendanceRecord


class MonthQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    month = serializers.IntegerField(min_value=1, max_value=12)


class AttendanceFilterSerializer(serializers.Serializer):
    employee = serializers.IntegerField(required=False, min_value=1)
    year = serializers.IntegerField(required=False, min_value=2000, max_value=2100)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)
    search = serializers.CharField(required=False, allow_blank=True)


class AttendanceRecordSerializer(serializers.ModelSerializer):
    employee = serializers.PrimaryKeyRelatedField(queryset=Employee.objects.all())
    employee_code = serializers.CharField(source="employee.employee_code", read_only=True)
    employee_name = serializers.CharField(source="employee.name", read_only=True)
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    month = serializers.IntegerField(min_value=1, max_value=12)
    total_days = serializers.IntegerField(min_value=0, max_value=31, required=False)

    class Meta:
        model = AttendanceRecord
        fields = (
            "id",
            "employee",
            "employee_code",
            "employee_name",
            "month",
            "year",
            "present_days",
            "total_days",
            "overtime_hours",
            "leaves_taken",
            "shift_allowance",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("created_at", "updated_at")
        # Duplicate periods are answered with 409 by the view, not 400.
        validators = []

    def validate(self, attrs):
        present = attrs.get("present_days", getattr(self.instance, "present_days", 0))
        total = attrs.get("total_days", getattr(self.instance, "total_days", None))
        if total is not None and present > total:
            raise serializers.ValidationError({"present_days": "present_days cannot exceed total_days."})
        return attrs
