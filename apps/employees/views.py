from django.db import IntegrityError, transaction
from django.db.models import ProtectedError, Q
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Employee
from .permissions import IsEmployeeManager
from .serializers import EmployeeFilterSerializer, EmployeeSerializer


DUPLICATE_DETAIL = "Employee with this code or email already exists."


def _duplicate_of(data, exclude_id=None):
    lookup = Q()
    if data.get("employee_code"):
        lookup |= Q(employee_code=data["employee_code"])
    if data.get("email"):
        lookup |= Q(email=data["email"])
    if not lookup:
        return False
    qs = Employee.objects.filter(lookup)
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    return qs.exists()


def _save_or_conflict(serializer, success_status):
    try:
        with transaction.atomic():
            employee = serializer.save()
    except IntegrityError:
        return Response({"detail": DUPLICATE_DETAIL}, status=status.HTTP_409_CONFLICT)
    return Response(EmployeeSerializer(employee).data, status=success_status)


class EmployeeListAPIView(APIView):
    permission_classes = [IsAuthenticated, IsEmployeeManager]

    def get(self, request):
        query = EmployeeFilterSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        filters = query.validated_data

        qs = Employee.objects.all()
        if filters.get("status"):
            qs = qs.filter(status=filters["status"])
        if filters.get("department"):
            qs = qs.filter(department__iexact=filters["department"])
        search = (filters.get("search") or "").strip()
        if search:
            qs = qs.filter(Q(name__icontains=search) | Q(employee_code__icontains=search))

        return Response(EmployeeSerializer(qs, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        if _duplicate_of(serializer.validated_data):
            return Response({"detail": DUPLICATE_DETAIL}, status=status.HTTP_409_CONFLICT)
        return _save_or_conflict(serializer, status.HTTP_201_CREATED)


class EmployeeDetailAPIView(APIView):
    permission_classes = [IsAuthenticated, IsEmployeeManager]

    def _get_employee(self, employee_id: int):
        return Employee.objects.filter(id=employee_id).first()

    def get(self, request, employee_id: int):
        employee = self._get_employee(employee_id)
        if not employee:
            return Response({"detail": "Employee not found."}, status=status.HTTP_404_NOT_FOUND)
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    def _update(self, request, employee_id: int, partial: bool):
        employee = self._get_employee(employee_id)
        if not employee:
            return Response({"detail": "Employee not found."}, status=status.HTTP_404_NOT_FOUND)

        serializer = EmployeeSerializer(employee, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        if _duplicate_of(serializer.validated_data, exclude_id=employee.id):
            return Response({"detail": DUPLICATE_DETAIL}, status=status.HTTP_409_CONFLICT)
        return _save_or_conflict(serializer, status.HTTP_200_OK)

    def put(self, request, employee_id: int):
        return self._update(request, employee_id, partial=False)

    def patch(self, request, employee_id: int):
        return self._update(request, employee_id, partial=True)

    def delete(self, request, employee_id: int):
        employee = self._get_employee(employee_id)
        if not employee:
            return Response({"detail": "Employee not found."}, status=status.HTTP_404_NOT_FOUND)
        try:
            employee.delete()
        except ProtectedError:
            return Response(
                {"detail": "Employee has payroll calculations and cannot be deleted. Mark them inactive instead."},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)
