"""
Root conftest.py — shared fixtures for the entire test suite.

Provides:
  - ``api_client``      unauthenticated DRF ``APIClient``.
  - ``roles``           the four fixed roles, keyed by name.
  - ``create_staff``    factory for police staff members.
  - ``create_user``     factory for login accounts (one staff each).
  - ``auth_client``     factory returning an ``APIClient`` carrying a
                        bearer token for a new user of the given role.
  - ``crime_category``  one crime category.
  - ``create_case``     factory for cases (bypasses FIR registration).
"""

from __future__ import annotations

import datetime

import pytest
from rest_framework.test import APIClient

DEFAULT_PASSWORD = "TestPass123!"


@pytest.fixture()
def api_client() -> APIClient:
    """Unauthenticated DRF test client."""
    return APIClient()


@pytest.fixture()
def roles(db):
    """
    The four roles, as ``{"Admin": <Role>, "Superintendent": <Role>, ...}``.
    """
    from accounts.models import Role
    from core.permissions_constants import RoleNames

    return {
        name: Role.objects.get_or_create(name=name)[0]
        for name in RoleNames.ALL
    }


@pytest.fixture()
def create_staff(db):
    """
    Factory fixture that creates a police staff member.

    Usage::

        def test_something(create_staff):
            officer = create_staff(name="A. Verma", is_active=False)
    """
    from accounts.models import Staff

    _counter = 0

    def _factory(**kwargs) -> Staff:
        nonlocal _counter
        _counter += 1
        kwargs.setdefault("name", f"Officer {_counter}")
        kwargs.setdefault("pol_rank", "Sub-Inspector")
        kwargs.setdefault("badge_number", f"TB-{_counter:04d}")
        return Staff.objects.create(**kwargs)

    return _factory


@pytest.fixture()
def create_user(roles, create_staff):
    """
    Factory fixture that creates a user with its own staff record.

    Usage::

        user = create_user(role_name="CID")
        user = create_user(username="bob", password="s3cret", role_name="Admin")
    """
    from accounts.models import User

    _counter = 0

    def _factory(
        *,
        username: str | None = None,
        password: str = DEFAULT_PASSWORD,
        role_name: str = "Admin",
        staff=None,
    ) -> User:
        nonlocal _counter
        _counter += 1
        if username is None:
            username = f"testuser{_counter}"
        if staff is None:
            staff = create_staff()
        return User.objects.create_user(
            username=username,
            password=password,
            role=roles[role_name],
            staff=staff,
        )

    return _factory


@pytest.fixture()
def auth_client(create_user):
    """
    Returns a helper that creates a user of ``role_name`` and an
    ``APIClient`` authenticated with a freshly issued bearer token.

    Usage::

        def test_protected(auth_client):
            client, user = auth_client("NCO")
            resp = client.get("/api/cases")
    """
    from accounts.services import AuthenticationService

    def _make(role_name: str = "Admin", **user_kwargs):
        user = create_user(role_name=role_name, **user_kwargs)
        client = APIClient()
        token = AuthenticationService.issue_token(user)
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client, user

    return _make


@pytest.fixture()
def crime_category(db):
    from cases.models import CrimeCategory, Severity

    return CrimeCategory.objects.create(
        crime_name="Theft", ipc_section="379", severity_level=Severity.MEDIUM,
    )


@pytest.fixture()
def create_case(crime_category):
    """Factory fixture for cases; the FIR row is not created."""
    from cases.models import Case

    _counter = 0

    def _factory(**kwargs) -> Case:
        nonlocal _counter
        _counter += 1
        kwargs.setdefault("fir_number", f"FIR/TEST/{_counter:03d}")
        kwargs.setdefault("crime_type", crime_category)
        kwargs.setdefault("date_reported", datetime.date(2024, 1, _counter % 28 + 1))
        kwargs.setdefault("city", "Pune")
        return Case.objects.create(**kwargs)

    return _factory
