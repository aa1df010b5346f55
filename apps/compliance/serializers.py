from rest_framework import serializers

from .models import StatutoryReturn


class GenerateReturnsSerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=2000, max_value=2100)
    month = serializers.IntegerField(min_value=1, max_value=12)


class StatutoryReturnSerializer(serializers.ModelSerializer):
    class Meta:
        model = StatutoryReturn
        fields = (
            "id",
            "title",
            "return_type",
            "month",
            "year",
            "due_date",
            "status",
            "amount",
            "employees",
            "payroll_run",
            "generated_at",
        )
        read_only_fields = fields
