import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .permissions import IsPayrollOperator, IsPayrollViewer
from .serializers import MonthQuerySerializer, PayrollProcessSerializer, PayrollRunSerializer
from .services import PayrollService


logger = logging.getLogger(__name__)


class PayrollProcessAPIView(APIView):
    permission_classes = [IsAuthenticated, IsPayrollOperator]

    def post(self, request):
        serializer = PayrollProcessSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        month = serializer.validated_data["month"]
        year = serializer.validated_data["year"]

        try:
            run = PayrollService.process_period(actor=request.user, month=month, year=year)
        except DatabaseError:
            logger.exception("Payroll processing failed for %04d-%02d", year, month)
            return Response({"detail": "Payroll processing failed."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(PayrollRunSerializer(run).data, status=status.HTTP_200_OK)


class PayrollRunAPIView(APIView):
    permission_classes = [IsAuthenticated, IsPayrollViewer]

    def get(self, request):
        query = MonthQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        run = PayrollService.get_run(month=query.validated_data["month"], year=query.validated_data["year"])
        if run is None:
            return Response({"detail": "Payroll run not found."}, status=status.HTTP_404_NOT_FOUND)
        return Response(PayrollRunSerializer(run).data, status=status.HTTP_200_OK)
