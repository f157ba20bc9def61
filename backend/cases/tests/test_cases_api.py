"""
Integration tests — case listing, detail and update.

Endpoints under test:
    GET /api/cases?search=&status=
    GET /api/cases/active
    GET /api/cases/{id}
    PUT /api/cases/{id}          (edit_case)
    GET /api/crime-categories
"""

from __future__ import annotations

import datetime

import pytest

from cases.models import Case, CaseStatus, CrimeCategory
from core.models import AuditAction, AuditLogEntry
from criminals.models import Criminal

pytestmark = pytest.mark.django_db


class TestCaseList:

    def test_newest_first_with_joined_fields(self, auth_client, create_case, crime_category):
        client, _ = auth_client("NCO")
        older = create_case(date_reported=datetime.date(2023, 1, 1))
        newer = create_case(date_reported=datetime.date(2024, 5, 1))

        resp = client.get("/api/cases")

        assert resp.status_code == 200
        rows = resp.json()
        assert [r["case_id"] for r in rows] == [newer.pk, older.pk]
        assert rows[0]["FIR_number"] == newer.fir_number
        assert rows[0]["crime_name"] == crime_category.crime_name
        assert rows[0]["ipc_section"] == "379"
        assert rows[0]["primary_accused_name"] is None

    def test_search_matches_fir_city_or_crime(self, auth_client, create_case):
        client, _ = auth_client("CID")
        murder = CrimeCategory.objects.create(crime_name="Murder", ipc_section="302")
        by_city = create_case(city="Nagpur")
        by_fir = create_case(fir_number="FIR/NAGPUR/1", city="Mumbai")
        by_crime = create_case(crime_type=murder, city="Thane")
        create_case(city="Pune")

        resp = client.get("/api/cases", {"search": "nagpur"})
        assert {r["case_id"] for r in resp.json()} == {by_city.pk, by_fir.pk}

        resp = client.get("/api/cases", {"search": "murd"})
        assert [r["case_id"] for r in resp.json()] == [by_crime.pk]

    def test_status_filter(self, auth_client, create_case):
        client, _ = auth_client("CID")
        closed = create_case(status=CaseStatus.CLOSED)
        create_case()

        resp = client.get("/api/cases", {"status": "Closed"})

        assert [r["case_id"] for r in resp.json()] == [closed.pk]

    def test_requires_token(self, api_client):
        resp = api_client.get("/api/cases")
        assert resp.status_code == 401
        assert resp.json() == {"error": "Access denied. No token provided."}


class TestActiveCases:

    def test_only_open_and_under_investigation(self, auth_client, create_case):
        client, _ = auth_client("NCO")
        accused = Criminal.objects.create(name="R. Khan", gender="Male")
        open_case = create_case(primary_accused=accused)
        investigating = create_case(status=CaseStatus.UNDER_INVESTIGATION)
        create_case(status=CaseStatus.CLOSED)
        create_case(status=CaseStatus.CHARGESHEETED)

        resp = client.get("/api/cases/active")

        assert resp.status_code == 200
        rows = {r["case_id"]: r for r in resp.json()}
        assert set(rows) == {open_case.pk, investigating.pk}
        assert rows[open_case.pk]["accused_status"] == "Has Primary Accused"
        assert rows[investigating.pk]["accused_status"] == "No Primary Accused"
        assert set(rows[open_case.pk]) == {
            "case_id", "FIR_number", "crime_name", "city", "district",
            "date_reported", "accused_status",
        }


class TestCaseDetail:

    def test_retrieve(self, auth_client, create_case):
        client, _ = auth_client("NCO")
        case = create_case(description="Bicycle stolen")

        resp = client.get(f"/api/cases/{case.pk}")

        assert resp.status_code == 200
        assert resp.json()["description"] == "Bicycle stolen"

    def test_unknown_case(self, auth_client):
        client, _ = auth_client("NCO")

        resp = client.get("/api/cases/9999")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Case not found"}


class TestCaseUpdate:

    def test_update_status_and_description(self, auth_client, create_case):
        client, user = auth_client("CID")
        case = create_case()

        resp = client.put(
            f"/api/cases/{case.pk}",
            {"status": "Under Investigation", "description": "Suspect identified"},
            format="json",
        )

        assert resp.status_code == 200
        assert resp.json() == {"message": "Case updated successfully"}
        case.refresh_from_db()
        assert case.status == CaseStatus.UNDER_INVESTIGATION
        assert case.description == "Suspect identified"
        assert AuditLogEntry.objects.filter(
            user=user, action=AuditAction.UPDATE, table_name="Cases", record_id=case.pk,
        ).exists()

    def test_any_status_may_follow_any_other(self, auth_client, create_case):
        client, _ = auth_client("Superintendent")
        case = create_case(status=CaseStatus.CLOSED)

        resp = client.put(f"/api/cases/{case.pk}", {"status": "Open"}, format="json")

        assert resp.status_code == 200
        case.refresh_from_db()
        assert case.status == CaseStatus.OPEN

    def test_invalid_status(self, auth_client, create_case):
        client, _ = auth_client("CID")
        case = create_case()

        resp = client.put(f"/api/cases/{case.pk}", {"status": "Solved"}, format="json")

        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid status value"}

    def test_empty_description_is_applied(self, auth_client, create_case):
        client, _ = auth_client("CID")
        case = create_case(description="old")

        resp = client.put(f"/api/cases/{case.pk}", {"description": ""}, format="json")

        assert resp.status_code == 200
        case.refresh_from_db()
        assert case.description == ""

    @pytest.mark.parametrize("body", [{}, {"status": ""}, {"status": None}])
    def test_no_valid_fields_leaves_row_untouched(self, auth_client, create_case, body):
        client, _ = auth_client("CID")
        case = create_case(description="Chain snatching near bus stand")
        before = Case.objects.filter(pk=case.pk).values().get()

        resp = client.put(f"/api/cases/{case.pk}", body, format="json")

        assert resp.status_code == 400
        assert resp.json() == {"error": "No valid fields to update"}
        assert Case.objects.filter(pk=case.pk).values().get() == before
        assert not AuditLogEntry.objects.exists()

    def test_unknown_case(self, auth_client):
        client, _ = auth_client("CID")

        resp = client.put("/api/cases/9999", {"status": "Closed"}, format="json")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Case not found"}

    def test_nco_cannot_edit(self, auth_client, create_case):
        client, _ = auth_client("NCO")
        case = create_case()

        resp = client.put(f"/api/cases/{case.pk}", {"status": "Closed"}, format="json")

        assert resp.status_code == 403
        assert resp.json() == {
            "error": "Access denied. NCO role does not have permission: edit_case",
        }
        assert Case.objects.get(pk=case.pk).status == CaseStatus.OPEN


class TestCrimeCategories:

    def test_ordered_by_name(self, auth_client, crime_category):
        client, _ = auth_client("NCO")
        CrimeCategory.objects.create(crime_name="Arson", ipc_section="435")

        resp = client.get("/api/crime-categories")

        assert resp.status_code == 200
        assert [r["crime_name"] for r in resp.json()] == ["Arson", "Theft"]
        assert set(resp.json()[0]) == {"crime_type_id", "crime_name", "ipc_section", "severity_level"}
