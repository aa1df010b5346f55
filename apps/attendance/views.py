from django.db import IntegrityError, transaction
from django.db.models import Q
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import AttendanceRecord
from .permissions import CanViewWorkingCalendar, IsAttendanceManager, IsAttendanceManagerOrReadOnly
from .serializers import AttendanceFilterSerializer, AttendanceRecordSerializer, MonthQuerySerializer
from .services import default_total_days, month_details


DUPLICATE_DETAIL = "Attendance record already exists for this employee and period."


def _conflict():
    return Response({"detail": DUPLICATE_DETAIL}, status=status.HTTP_409_CONFLICT)


def _save_or_conflict(serializer, success_status, **extra):
    # The unique constraint still catches a duplicate written after the exists() check.
    try:
        with transaction.atomic():
            record = serializer.save(**extra)
    except IntegrityError:
        return _conflict()
    return Response(AttendanceRecordSerializer(record).data, status=success_status)


class WorkingCalendarAPIView(APIView):
    permission_classes = [IsAuthenticated, CanViewWorkingCalendar]

    def get(self, request):
        query = MonthQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        details = month_details(query.validated_data["year"], query.validated_data["month"])
        return Response(details.as_dict(), status=status.HTTP_200_OK)


class AttendanceRecordListAPIView(APIView):
    permission_classes = [IsAuthenticated, IsAttendanceManagerOrReadOnly]

    def get(self, request):
        query = AttendanceFilterSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        filters = query.validated_data

        qs = AttendanceRecord.objects.select_related("employee")
        if filters.get("employee"):
            qs = qs.filter(employee_id=filters["employee"])
        if filters.get("year"):
            qs = qs.filter(year=filters["year"])
        if filters.get("month"):
            qs = qs.filter(month=filters["month"])
        search = (filters.get("search") or "").strip()
        if search:
            qs = qs.filter(Q(employee__name__icontains=search) | Q(employee__employee_code__icontains=search))

        return Response(AttendanceRecordSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = AttendanceRecordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if AttendanceRecord.objects.filter(employee=data["employee"], month=data["month"], year=data["year"]).exists():
            return _conflict()

        extra = {}
        if "total_days" not in data:
            extra["total_days"] = default_total_days(data["year"], data["month"])
            if data.get("present_days", 0) > extra["total_days"]:
                return Response(
                    {"present_days": ["present_days cannot exceed total_days."]},
                    status=status.HTTP_400_BAD_REQUEST,
                )
        return _save_or_conflict(serializer, status.HTTP_201_CREATED, **extra)


class AttendanceRecordDetailAPIView(APIView):
    permission_classes = [IsAuthenticated, IsAttendanceManager]

    def _get_record(self, record_id: int):
        return AttendanceRecord.objects.select_related("employee").filter(id=record_id).first()

    def get(self, request, record_id: int):
        record = self._get_record(record_id)
        if not record:
            return Response({"detail": "Attendance record not found."}, status=status.HTTP_404_NOT_FOUND)
        return Response(AttendanceRecordSerializer(record).data, status=status.HTTP_200_OK)

    def patch(self, request, record_id: int):
        record = self._get_record(record_id)
        if not record:
            return Response({"detail": "Attendance record not found."}, status=status.HTTP_404_NOT_FOUND)

        serializer = AttendanceRecordSerializer(record, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        clash = AttendanceRecord.objects.filter(
            employee=data.get("employee", record.employee),
            month=data.get("month", record.month),
            year=data.get("year", record.year),
        ).exclude(id=record.id)
        if clash.exists():
            return _conflict()
        return _save_or_conflict(serializer, status.HTTP_200_OK)

    def delete(self, request, record_id: int):
        record = self._get_record(record_id)
        if not record:
            return Response({"detail": "Attendance record not found."}, status=status.HTTP_404_NOT_FOUND)
        record.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
