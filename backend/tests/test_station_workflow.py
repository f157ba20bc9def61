"""
End-to-end test — a case from FIR to investigation, driven through the
HTTP API by the roles that do each step in a police station.

    1. NCO registers an FIR            → case Open, FIR row, audit CREATE FIR
    2. NCO books the accused           → criminal linked as primary accused
    3. CID opens the investigation     → status In Progress
    4. CID moves the case on           → Under Investigation
    5. Superintendent flags the accused as wanted
    6. Superintendent reads the audit trail of all of the above
"""

from __future__ import annotations

import pytest

from cases.models import Case, CaseStatus
from criminals.models import Criminal
from investigations.models import Investigation, InvestigationStatus

pytestmark = pytest.mark.django_db


def test_fir_to_investigation(auth_client, crime_category):
    nco, _ = auth_client("NCO")
    cid, cid_user = auth_client("CID")
    supt, _ = auth_client("Superintendent")

    # 1. FIR registration
    resp = nco.post(
        "/api/fir",
        {
            "FIR_number": "FIR/SWG/2024/042",
            "complainant_name": "M. Kulkarni",
            "crime_type_id": crime_category.pk,
            "date_reported": "2024-07-01",
            "city": "Pune",
        },
        format="json",
    )
    assert resp.status_code == 201, resp.json()
    case_id = resp.json()["case_id"]

    active = nco.get("/api/cases/active").json()
    assert [c["accused_status"] for c in active if c["case_id"] == case_id] == ["No Primary Accused"]

    # 2. Accused booked against the case
    resp = nco.post(
        "/api/criminals",
        {"name": "V. Pawar", "gender": "Male", "linked_case_id": case_id},
        format="json",
    )
    assert resp.status_code == 201, resp.json()
    criminal_id = resp.json()["criminal_id"]

    active = nco.get("/api/cases/active").json()
    assert [c["accused_status"] for c in active if c["case_id"] == case_id] == ["Has Primary Accused"]

    # A second record cannot claim the same case
    resp = nco.post(
        "/api/criminals",
        {"name": "Someone Else", "gender": "Male", "linked_case_id": case_id},
        format="json",
    )
    assert resp.status_code == 400

    # 3. Investigation
    resp = cid.post(
        "/api/investigations",
        {"case_id": case_id, "assigned_to": cid_user.staff_id, "status": "In Progress"},
        format="json",
    )
    assert resp.status_code == 201, resp.json()

    resp = cid.post(
        "/api/investigations",
        {"case_id": case_id, "assigned_to": cid_user.staff_id},
        format="json",
    )
    assert resp.status_code == 400

    # 4. Case status
    resp = cid.put(f"/api/cases/{case_id}", {"status": "Under Investigation"}, format="json")
    assert resp.status_code == 200

    # 5. Wanted flag
    resp = supt.put(f"/api/criminals/{criminal_id}", {"is_wanted": True}, format="json")
    assert resp.status_code == 200

    # Final state
    case = Case.objects.get(pk=case_id)
    assert case.status == CaseStatus.UNDER_INVESTIGATION
    assert case.primary_accused_id == criminal_id
    assert Criminal.objects.get(pk=criminal_id).is_wanted is True
    investigation = Investigation.objects.get(case_id=case_id)
    assert investigation.status == InvestigationStatus.IN_PROGRESS
    assert investigation.assigned_to_id == cid_user.staff_id

    stats = supt.get("/api/dashboard/stats").json()
    assert stats["total_cases"] == 1
    assert stats["open_cases"] == 0
    assert stats["wanted_criminals"] == 1

    # 6. Audit trail, newest first
    trail = [(r["action"], r["table_name"]) for r in supt.get("/api/audit-logs").json()]
    assert trail == [
        ("UPDATE", "Criminals"),
        ("UPDATE", "Cases"),
        ("CREATE", "Investigations"),
        ("CREATE", "Criminals"),
        ("LINK", "Cases"),
        ("CREATE", "FIR"),
    ]
