"""
URL configuration for the CRMS backend.

Every JSON endpoint lives under ``/api/``; the single-page client is
served from ``/``.
"""
from django.contrib import admin
from django.urls import include, path

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from core.views import ClientAppView

urlpatterns = [
    path('admin/', admin.site.urls),

    # ── App routes ───────────────────────────────────────────────────
    path('api/', include('accounts.urls')),
    path('api/', include('cases.urls')),
    path('api/', include('criminals.urls')),
    path('api/', include('investigations.urls')),
    path('api/', include('core.urls')),

    # ── Swagger / OpenAPI schema ─────────────────────────────────────
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),

    # ── Client application ───────────────────────────────────────────
    path('', ClientAppView.as_view(), name='client-app'),
]
