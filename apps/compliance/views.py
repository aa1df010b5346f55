from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.payroll.models import PayrollRun
from apps.payroll.permissions import IsPayrollOperator

from .models import StatutoryReturn
from .serializers import GenerateReturnsSerializer, StatutoryReturnSerializer
from .services import ReturnGenerationError, generate_statutory_returns


class StatutoryReturnListAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        qs = StatutoryReturn.objects.order_by("-generated_at", "-id")
        return Response(StatutoryReturnSerializer(qs, many=True).data, status=status.HTTP_200_OK)


class StatutoryReturnGenerateAPIView(APIView):
    permission_classes = [IsAuthenticated, IsPayrollOperator]

    def post(self, request):
        serializer = GenerateReturnsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        run = PayrollRun.objects.filter(
            month=serializer.validated_data["month"],
            year=serializer.validated_data["year"],
        ).first()
        if run is None:
            return Response({"detail": "Payroll run not found."}, status=status.HTTP_404_NOT_FOUND)

        try:
            returns = generate_statutory_returns(run)
        except ReturnGenerationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(StatutoryReturnSerializer(returns, many=True).data, status=status.HTTP_201_CREATED)
