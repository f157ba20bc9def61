"""
Integration tests — investigations.

Endpoints under test:
    GET  /api/investigations
    POST /api/investigations          (create_investigation)
    PUT  /api/investigations/{id}     (edit_investigation)
"""

from __future__ import annotations

import datetime

import pytest
from django.utils import timezone

from core.models import AuditAction, AuditLogEntry
from investigations.models import Investigation, InvestigationStatus

pytestmark = pytest.mark.django_db


@pytest.fixture()
def officer(create_staff):
    return create_staff(name="A. Verma", badge_number="CID-321")


class TestInvestigationList:

    def test_joined_fields(self, auth_client, create_case, officer):
        client, _ = auth_client("NCO")
        case = create_case()
        investigation = Investigation.objects.create(
            case=case,
            assigned_to=officer,
            status=InvestigationStatus.IN_PROGRESS,
            progress_notes="Witnesses interviewed",
        )

        resp = client.get("/api/investigations")

        assert resp.status_code == 200
        row = resp.json()[0]
        assert row["investigation_id"] == investigation.pk
        assert row["case_id"] == case.pk
        assert row["assigned_to"] == officer.pk
        assert row["FIR_number"] == case.fir_number
        assert row["crime_name"] == "Theft"
        assert row["officer_name"] == "A. Verma"
        assert row["status"] == "In Progress"
        assert row["investigation_notes"] == "Witnesses interviewed"

    def test_most_recently_updated_first(self, auth_client, create_case, officer):
        client, _ = auth_client("NCO")
        first = Investigation.objects.create(case=create_case(), assigned_to=officer)
        second = Investigation.objects.create(case=create_case(), assigned_to=officer)
        Investigation.objects.filter(pk=second.pk).update(
            last_updated=timezone.now() - datetime.timedelta(hours=1),
        )

        resp = client.get("/api/investigations")

        assert [r["investigation_id"] for r in resp.json()] == [first.pk, second.pk]


class TestInvestigationCreate:

    def test_create(self, auth_client, create_case, officer):
        client, user = auth_client("CID")
        case = create_case()

        resp = client.post(
            "/api/investigations",
            {
                "case_id": case.pk,
                "assigned_to": officer.pk,
                "status": "In Progress",
                "investigation_notes": "CCTV requested",
            },
            format="json",
        )

        assert resp.status_code == 201, resp.json()
        assert resp.json()["message"] == "Investigation created successfully"
        investigation = Investigation.objects.get(pk=resp.json()["investigation_id"])
        assert investigation.case == case
        assert investigation.assigned_to == officer
        assert investigation.status == InvestigationStatus.IN_PROGRESS
        assert investigation.progress_notes == "CCTV requested"
        assert AuditLogEntry.objects.filter(
            user=user, action=AuditAction.CREATE, table_name="Investigations",
            record_id=investigation.pk,
        ).exists()

    def test_defaults_to_open(self, auth_client, create_case, officer):
        client, _ = auth_client("CID")

        resp = client.post(
            "/api/investigations",
            {"case_id": create_case().pk, "assigned_to": officer.pk},
            format="json",
        )

        assert resp.status_code == 201
        investigation = Investigation.objects.get()
        assert investigation.status == InvestigationStatus.OPEN
        assert investigation.progress_notes is None

    def test_legacy_prefix_in_notes_is_split(self, auth_client, create_case, officer):
        client, _ = auth_client("CID")

        resp = client.post(
            "/api/investigations",
            {
                "case_id": create_case().pk,
                "assigned_to": officer.pk,
                "investigation_notes": "[Status: Suspended] awaiting forensics",
            },
            format="json",
        )

        assert resp.status_code == 201
        investigation = Investigation.objects.get()
        assert investigation.status == InvestigationStatus.SUSPENDED
        assert investigation.progress_notes == "awaiting forensics"

    def test_second_investigation_rejected(self, auth_client, create_case, officer):
        client, _ = auth_client("CID")
        case = create_case()
        Investigation.objects.create(case=case, assigned_to=officer)

        resp = client.post(
            "/api/investigations",
            {"case_id": case.pk, "assigned_to": officer.pk},
            format="json",
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Investigation already exists for this case"}
        assert Investigation.objects.filter(case=case).count() == 1

    def test_required_fields(self, auth_client, officer):
        client, _ = auth_client("CID")

        resp = client.post("/api/investigations", {"assigned_to": officer.pk}, format="json")

        assert resp.status_code == 400
        assert resp.json() == {"error": "Case ID and assigned officer are required"}

    def test_unknown_case(self, auth_client, officer):
        client, _ = auth_client("CID")

        resp = client.post(
            "/api/investigations", {"case_id": 9999, "assigned_to": officer.pk}, format="json",
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Case not found"}

    def test_inactive_officer(self, auth_client, create_case, create_staff):
        client, _ = auth_client("CID")
        retired = create_staff(is_active=False)

        resp = client.post(
            "/api/investigations",
            {"case_id": create_case().pk, "assigned_to": retired.pk},
            format="json",
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Officer not found or inactive"}

    def test_invalid_status(self, auth_client, create_case, officer):
        client, _ = auth_client("CID")

        resp = client.post(
            "/api/investigations",
            {"case_id": create_case().pk, "assigned_to": officer.pk, "status": "Solved"},
            format="json",
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid status value"}
        assert not Investigation.objects.exists()

    def test_nco_cannot_create(self, auth_client, create_case, officer):
        client, _ = auth_client("NCO")

        resp = client.post(
            "/api/investigations",
            {"case_id": create_case().pk, "assigned_to": officer.pk},
            format="json",
        )

        assert resp.status_code == 403

    def test_permission_checked_before_body(self, auth_client):
        client, _ = auth_client("Superintendent")

        resp = client.post(
            "/api/investigations",
            {"case_id": "abc", "assigned_to": 1, "status": ["In Progress"]},
            format="json",
        )

        assert resp.status_code == 403
        assert resp.json() == {
            "error": "Access denied. Superintendent role does not have permission: "
                     "create_investigation",
        }
        assert not Investigation.objects.exists()


class TestInvestigationUpdate:

    @pytest.fixture()
    def investigation(self, create_case, officer):
        return Investigation.objects.create(
            case=create_case(), assigned_to=officer, progress_notes="initial",
        )

    def test_update_status_and_notes(self, auth_client, investigation):
        client, user = auth_client("CID")

        resp = client.put(
            f"/api/investigations/{investigation.pk}",
            {"status": "Closed", "investigation_notes": "Chargesheet filed"},
            format="json",
        )

        assert resp.status_code == 200
        assert resp.json() == {"message": "Investigation updated successfully"}
        investigation.refresh_from_db()
        assert investigation.status == InvestigationStatus.CLOSED
        assert investigation.progress_notes == "Chargesheet filed"
        assert AuditLogEntry.objects.filter(
            user=user, action=AuditAction.UPDATE, record_id=investigation.pk,
        ).exists()

    def test_status_alone_keeps_notes(self, auth_client, investigation):
        client, _ = auth_client("CID")

        client.put(f"/api/investigations/{investigation.pk}", {"status": "Suspended"}, format="json")

        investigation.refresh_from_db()
        assert investigation.status == InvestigationStatus.SUSPENDED
        assert investigation.progress_notes == "initial"

    def test_reassign(self, auth_client, investigation, create_staff):
        client, _ = auth_client("CID")
        new_officer = create_staff(name="B. Iyer")

        resp = client.put(
            f"/api/investigations/{investigation.pk}",
            {"assigned_to": new_officer.pk},
            format="json",
        )

        assert resp.status_code == 200
        investigation.refresh_from_db()
        assert investigation.assigned_to == new_officer

    def test_reassign_to_inactive_officer(self, auth_client, investigation, create_staff, officer):
        client, _ = auth_client("CID")
        retired = create_staff(is_active=False)

        resp = client.put(
            f"/api/investigations/{investigation.pk}",
            {"assigned_to": retired.pk},
            format="json",
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Officer not found or inactive"}
        investigation.refresh_from_db()
        assert investigation.assigned_to == officer

    def test_unknown_investigation(self, auth_client):
        client, _ = auth_client("CID")

        resp = client.put("/api/investigations/9999", {"status": "Closed"}, format="json")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Investigation not found"}

    def test_superintendent_lacks_edit_investigation(self, auth_client, investigation):
        client, _ = auth_client("Superintendent")

        resp = client.put(
            f"/api/investigations/{investigation.pk}", {"status": "Closed"}, format="json",
        )

        assert resp.status_code == 403
        assert resp.json() == {
            "error": "Access denied. Superintendent role does not have permission: edit_investigation",
        }
