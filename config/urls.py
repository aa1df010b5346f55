from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .health import health_check

admin.site.site_header = "Payroll Administration"
admin.site.site_title = "Payroll Admin"
admin.site.index_title = "System management"

urlpatterns = [
    path("health/", health_check, name="health"),
    path("admin/", admin.site.urls),

    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    path("api/v1/auth/login/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/v1/auth/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    path("api/v1/employees/", include("apps.employees.urls")),
    path("api/v1/attendance/", include("apps.attendance.urls")),
    path("api/v1/payroll/", include("apps.payroll.urls")),
    path("api/v1/compliance/", include("apps.compliance.urls")),
]
