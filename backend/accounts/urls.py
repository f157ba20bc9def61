"""
Accounts app URL configuration.

Included in the project-level ``urls.py`` as::

    path('api/', include('accounts.urls')),

Endpoint Map
------------
Authentication
    POST   /auth/login                  → LoginView

User Management (manage_users)
    GET    /users                       → UserViewSet.list
    POST   /users                       → UserViewSet.create
    PUT    /users/{id}                  → UserViewSet.update
    DELETE /users/{id}                  → UserViewSet.destroy  (deactivate)

Police Staff
    GET    /staff                       → StaffViewSet.list
    POST   /staff                       → StaffViewSet.create  (Admin / Superintendent)

Roles
    GET    /roles                       → RoleViewSet.list
    GET    /roles/permissions           → RoleViewSet.permission_table
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import LoginView, RoleViewSet, StaffViewSet, UserViewSet

app_name = "accounts"

router = SimpleRouter(trailing_slash=False)
router.register(r"users", UserViewSet, basename="user")
router.register(r"staff", StaffViewSet, basename="staff")
router.register(r"roles", RoleViewSet, basename="role")

urlpatterns = [
    # ── Authentication ───────────────────────────────────────────────
    path("auth/login", LoginView.as_view(), name="login"),

    # ── Router-registered viewsets (users, staff, roles) ─────────────
    path("", include(router.urls)),
]
