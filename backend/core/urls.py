"""
Core app URL configuration.

URL prefix (registered in ``backend/urls.py``)::

    path("api/", include("core.urls"))

Endpoint summary
----------------
GET  /api/dashboard/stats   — Four headline counters.
GET  /api/audit-logs        — Latest 500 audit entries (view_audit_logs).
"""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path(
        "dashboard/stats",
        views.DashboardStatsView.as_view(),
        name="dashboard-stats",
    ),
    path(
        "audit-logs",
        views.AuditLogView.as_view(),
        name="audit-logs",
    ),
]
