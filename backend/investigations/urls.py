from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import InvestigationViewSet

app_name = "investigations"

router = SimpleRouter(trailing_slash=False)
router.register(r"investigations", InvestigationViewSet, basename="investigation")

urlpatterns = [
    path("", include(router.urls)),
]
