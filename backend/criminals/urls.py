from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import CriminalViewSet

app_name = "criminals"

router = SimpleRouter(trailing_slash=False)
router.register(r"criminals", CriminalViewSet, basename="criminal")

urlpatterns = [
    path("", include(router.urls)),
]
