"""
Cases app URL configuration.

Included in the project-level ``urls.py`` under ``api/``.

Endpoint Map
------------
    GET  /cases                 → CaseViewSet.list
    GET  /cases/active          → CaseViewSet.active
    GET  /cases/{id}            → CaseViewSet.retrieve
    PUT  /cases/{id}            → CaseViewSet.update          (edit_case)
    GET  /crime-categories      → CrimeCategoryViewSet.list
    POST /fir                   → FIRRegistrationView         (create_fir)
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import CaseViewSet, CrimeCategoryViewSet, FIRRegistrationView

app_name = "cases"

router = SimpleRouter(trailing_slash=False)
router.register(r"cases", CaseViewSet, basename="case")
router.register(r"crime-categories", CrimeCategoryViewSet, basename="crime-category")

urlpatterns = [
    path("fir", FIRRegistrationView.as_view(), name="fir-register"),
    path("", include(router.urls)),
]
