from django.urls import path

from .views import StatutoryReturnGenerateAPIView, StatutoryReturnListAPIView


urlpatterns = [
    path("returns/", StatutoryReturnListAPIView.as_view(), name="compliance-returns"),
    path("returns/generate/", StatutoryReturnGenerateAPIView.as_view(), name="compliance-returns-generate"),
]
