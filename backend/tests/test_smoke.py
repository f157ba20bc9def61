"""
Smoke tests — verify that Django boots, URL routing resolves, and
the core domain modules are importable.

These tests do NOT require real data; they just prove the plumbing
works.
"""

from __future__ import annotations

import pytest
from django.urls import resolve, reverse


# ════════════════════════════════════════════════════════════════════
#  URL Routing Smoke Tests
# ════════════════════════════════════════════════════════════════════

class TestURLRouting:
    """Ensure every app's named URLs reverse to the expected paths."""

    EXPECTED_URLS = [
        # (url_name, kwargs, expected_path)
        ("accounts:login",              None,        "/api/auth/login"),
        ("accounts:user-list",          None,        "/api/users"),
        ("accounts:user-detail",        {"pk": 3},   "/api/users/3"),
        ("accounts:staff-list",         None,        "/api/staff"),
        ("accounts:role-list",          None,        "/api/roles"),
        ("accounts:role-permission-table", None,    "/api/roles/permissions"),
        ("cases:case-list",             None,        "/api/cases"),
        ("cases:case-active",           None,        "/api/cases/active"),
        ("cases:case-detail",           {"pk": 7},   "/api/cases/7"),
        ("cases:crime-category-list",   None,        "/api/crime-categories"),
        ("cases:fir-register",          None,        "/api/fir"),
        ("criminals:criminal-list",     None,        "/api/criminals"),
        ("criminals:criminal-detail",   {"pk": 2},   "/api/criminals/2"),
        ("investigations:investigation-list", None,  "/api/investigations"),
        ("core:dashboard-stats",        None,        "/api/dashboard/stats"),
        ("core:audit-logs",             None,        "/api/audit-logs"),
        ("client-app",                  None,        "/"),
    ]

    @pytest.mark.parametrize("url_name,kwargs,expected", EXPECTED_URLS)
    def test_url_reverses(self, url_name: str, kwargs, expected: str):
        assert reverse(url_name, kwargs=kwargs) == expected

    @pytest.mark.parametrize("url_name,kwargs,expected", EXPECTED_URLS)
    def test_path_resolves_back(self, url_name: str, kwargs, expected: str):
        match = resolve(expected)
        assert match.view_name == url_name

    def test_non_numeric_id_does_not_route(self):
        from django.urls import Resolver404

        with pytest.raises(Resolver404):
            resolve("/api/cases/abc")


@pytest.mark.django_db
def test_openapi_schema_is_served(client):
    resp = client.get(reverse("schema"))
    assert resp.status_code == 200


# ════════════════════════════════════════════════════════════════════
#  Core Domain Module Import Tests
# ════════════════════════════════════════════════════════════════════

class TestCoreDomainImports:
    """Verify that shared domain utility modules are importable."""

    def test_exception_hierarchy(self):
        from core.domain.exceptions import (
            AuthenticationFailed,
            Conflict,
            DomainError,
            NotFound,
            PermissionDenied,
        )
        for exc in (AuthenticationFailed, Conflict, NotFound, PermissionDenied):
            assert issubclass(exc, DomainError)

    def test_default_messages(self):
        from core.domain.exceptions import AuthenticationFailed, PermissionDenied

        assert str(AuthenticationFailed()) == "Invalid credentials"
        assert str(PermissionDenied()) == "Access denied. Insufficient permissions."

    def test_import_helpers(self):
        from core.domain.access import get_user_role_name, require_permission, require_role
        from core.domain.inputs import require_fields
        from core.domain.transactions import lock_for_update

        for helper in (get_user_role_name, require_permission, require_role,
                       require_fields, lock_for_update):
            assert callable(helper)


class TestRequireFields:

    def test_falsy_values_are_missing(self):
        from core.domain.exceptions import DomainError
        from core.domain.inputs import require_fields

        for blank in (None, "", 0, False):
            with pytest.raises(DomainError) as excinfo:
                require_fields({"name": blank}, ("name",), "Name is required")
            assert str(excinfo.value) == "Name is required"

    def test_present_values_pass(self):
        from core.domain.inputs import require_fields

        require_fields({"name": "x", "count": 3, "flag": True}, ("name", "count", "flag"), "nope")
