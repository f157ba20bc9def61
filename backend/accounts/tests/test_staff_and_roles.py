"""
Integration tests — police staff roster and role listing.

Endpoints under test:
    GET  /api/staff
    POST /api/staff              (Admin or Superintendent only)
    GET  /api/roles
    GET  /api/roles/permissions
"""

from __future__ import annotations

import datetime

import pytest

from accounts.models import Staff
from core.models import AuditAction, AuditLogEntry
from core.permissions_constants import ROLE_PERMISSIONS

pytestmark = pytest.mark.django_db


class TestStaffList:

    def test_newest_join_date_first(self, auth_client, create_staff):
        client, _ = auth_client("NCO")
        create_staff(name="Old", join_date=datetime.date(2010, 1, 1))
        create_staff(name="New", join_date=datetime.date(2023, 6, 1))

        resp = client.get("/api/staff")

        assert resp.status_code == 200
        names = [row["name"] for row in resp.json()]
        assert names.index("New") < names.index("Old")
        assert {"staff_id", "badge_number", "pol_rank", "is_active"} <= set(resp.json()[0])


class TestStaffCreate:

    PAYLOAD = {
        "name": "P. Rao",
        "pol_rank": "Inspector",
        "badge_number": "INS-900",
        "department": "Traffic",
        "join_date": "2024-02-01",
    }

    @pytest.mark.parametrize("role_name", ["Admin", "Superintendent"])
    def test_allowed_roles(self, auth_client, role_name):
        client, user = auth_client(role_name)

        resp = client.post("/api/staff", self.PAYLOAD, format="json")

        assert resp.status_code == 201, resp.json()
        assert resp.json()["message"] == "Police staff created successfully"
        staff = Staff.objects.get(pk=resp.json()["staff_id"])
        assert staff.is_active is True
        assert staff.join_date == datetime.date(2024, 2, 1)
        assert AuditLogEntry.objects.filter(
            user=user, action=AuditAction.CREATE, table_name="Police_Staff", record_id=staff.pk,
        ).exists()

    @pytest.mark.parametrize("role_name", ["CID", "NCO"])
    def test_other_roles_denied(self, auth_client, role_name):
        client, _ = auth_client(role_name)

        resp = client.post("/api/staff", self.PAYLOAD, format="json")

        assert resp.status_code == 403
        assert resp.json() == {"error": "Access denied. Insufficient permissions."}
        assert not Staff.objects.filter(badge_number="INS-900").exists()

    def test_missing_fields(self, auth_client):
        client, _ = auth_client("Admin")

        resp = client.post("/api/staff", {"name": "Only Name"}, format="json")

        assert resp.status_code == 400
        assert resp.json() == {"error": "Name, rank, and badge number are required"}

    def test_duplicate_badge_even_if_inactive(self, auth_client, create_staff):
        client, _ = auth_client("Admin")
        create_staff(badge_number="INS-900", is_active=False)

        resp = client.post("/api/staff", self.PAYLOAD, format="json")

        assert resp.status_code == 400
        assert resp.json() == {"error": "Badge number already exists"}

    def test_blank_join_date_is_accepted(self, auth_client):
        client, _ = auth_client("Admin")

        resp = client.post("/api/staff", {**self.PAYLOAD, "join_date": ""}, format="json")

        assert resp.status_code == 201
        assert Staff.objects.get(badge_number="INS-900").join_date is None


class TestRoles:

    def test_roles_ordered_by_name(self, auth_client):
        client, _ = auth_client("CID")

        resp = client.get("/api/roles")

        assert resp.status_code == 200
        names = [row["role_name"] for row in resp.json()]
        assert names == sorted(names)
        assert set(names) == {"Admin", "Superintendent", "CID", "NCO"}

    def test_permission_table(self, auth_client):
        client, _ = auth_client("NCO")

        resp = client.get("/api/roles/permissions")

        assert resp.status_code == 200
        table = resp.json()
        assert table["Admin"]["display_name"] == "Administrator"
        for role_name, permissions in ROLE_PERMISSIONS.items():
            assert table[role_name]["permissions"] == list(permissions)
