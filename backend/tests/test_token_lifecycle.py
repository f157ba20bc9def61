"""
Integration tests — bearer-token gate shared by every protected endpoint.

    missing token               → 401 "Access denied. No token provided."
    malformed / expired token   → 403 "Invalid or expired token."
    non-Bearer scheme           → 403 "Invalid or expired token."
    valid token within lifetime → request proceeds
"""

from __future__ import annotations

import datetime

import pytest
from django.conf import settings
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

pytestmark = pytest.mark.django_db

PROTECTED_URL = "/api/dashboard/stats"


def _client_with(token: str) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


class TestTokenLifecycle:

    def test_login_token_grants_access(self, api_client, create_user):
        user = create_user(username="nco1", password="pass1234", role_name="NCO")

        login = api_client.post(
            "/api/auth/login", {"username": "nco1", "password": "pass1234"}, format="json",
        )
        token = login.json()["token"]

        assert str(AccessToken(token)["user_id"]) == str(user.pk)
        assert _client_with(token).get(PROTECTED_URL).status_code == 200

    def test_lifetime_is_eight_hours(self):
        assert settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"] == datetime.timedelta(hours=8)

    def test_expired_token_is_403(self, create_user):
        token = AccessToken.for_user(create_user())
        token.set_exp(lifetime=-datetime.timedelta(minutes=1))

        resp = _client_with(str(token)).get(PROTECTED_URL)

        assert resp.status_code == 403
        assert resp.json() == {"error": "Invalid or expired token."}

    def test_garbage_token_is_403(self):
        resp = _client_with("definitely.not.valid").get(PROTECTED_URL)

        assert resp.status_code == 403
        assert resp.json() == {"error": "Invalid or expired token."}

    def test_missing_token_is_401(self, api_client):
        resp = api_client.get(PROTECTED_URL)

        assert resp.status_code == 401
        assert resp.json() == {"error": "Access denied. No token provided."}

    def test_tampered_signature_is_403(self, create_user):
        token = AccessToken.for_user(create_user())
        forged = str(token)[:-4] + ("AAAA" if not str(token).endswith("AAAA") else "BBBB")

        resp = _client_with(forged).get(PROTECTED_URL)

        assert resp.status_code == 403

    def test_other_scheme_is_403(self, create_user):
        token = AccessToken.for_user(create_user())
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Token {token}")

        resp = client.get(PROTECTED_URL)

        assert resp.status_code == 403
        assert resp.json() == {"error": "Invalid or expired token."}
