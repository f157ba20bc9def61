"""
Permissions Constants — **Single Source of Truth**

Every permission referenced in code (services, views, the seed command,
and the client application) MUST use one of the constants defined here.

Organisation
------------
- ``RoleNames`` lists the four fixed roles.  Role rows are seeded by the
  ``seed_crms`` management command; their *names* are the join key into
  ``ROLE_PERMISSIONS``.
- ``CRMSPerms`` lists every permission string a role can hold.
  ``ALL`` is the wildcard that satisfies any permission check.
- ``ROLE_PERMISSIONS`` maps each role name to its permission set.  The
  server reads it on every request; the client receives the same table
  through ``GET /api/roles/permissions`` (and embedded in the SPA page)
  and never keeps its own copy.

Some permissions (``assign_cases``, ``view_evidence``, …) gate nothing on
the server today.  They remain in the table because the client uses them
to decide which navigation entries and buttons to render.
"""

from __future__ import annotations


class RoleNames:
    """The fixed set of CRMS roles."""

    ADMIN = "Admin"
    SUPERINTENDENT = "Superintendent"
    CID = "CID"
    NCO = "NCO"

    ALL = (ADMIN, SUPERINTENDENT, CID, NCO)


class CRMSPerms:
    """Permission strings understood by ``core.domain.access``."""

    ALL = "all"
    """Wildcard — satisfies every permission check."""

    # ── Users & roles ───────────────────────────────────────────────
    MANAGE_USERS = "manage_users"
    MANAGE_ROLES = "manage_roles"
    SYSTEM_SETTINGS = "system_settings"
    VIEW_AUDIT_LOGS = "view_audit_logs"

    # ── Cases & FIRs ────────────────────────────────────────────────
    VIEW_CASES = "view_cases"
    CREATE_CASE = "create_case"
    EDIT_CASE = "edit_case"
    DELETE_CASE = "delete_case"
    ASSIGN_CASES = "assign_cases"
    UPDATE_CASE_STATUS = "update_case_status"
    CREATE_FIR = "create_fir"

    # ── Criminals ───────────────────────────────────────────────────
    VIEW_CRIMINALS = "view_criminals"
    CREATE_CRIMINAL = "create_criminal"
    EDIT_CRIMINAL = "edit_criminal"
    DELETE_CRIMINAL = "delete_criminal"

    # ── Investigations ──────────────────────────────────────────────
    VIEW_INVESTIGATIONS = "view_investigations"
    CREATE_INVESTIGATION = "create_investigation"
    EDIT_INVESTIGATION = "edit_investigation"
    ASSIGN_INVESTIGATIONS = "assign_investigations"
    VIEW_EVIDENCE = "view_evidence"
    ADD_EVIDENCE = "add_evidence"

    # ── Staff ───────────────────────────────────────────────────────
    VIEW_STAFF = "view_staff"
    MANAGE_STAFF = "manage_staff"

    # ── Reporting / misc ────────────────────────────────────────────
    VIEW_REPORTS = "view_reports"
    GENERATE_REPORTS = "generate_reports"
    APPROVE_ACTIONS = "approve_actions"
    BASIC_DATA_ENTRY = "basic_data_entry"


# ────────────────────────────────────────────────────────────────────
# Role → Permission mapping
# ────────────────────────────────────────────────────────────────────
# Lists keep the declaration order so the client can show them as-is.

ROLE_PERMISSIONS: dict[str, list[str]] = {

    # ── Administrator ───────────────────────────────────────────────
    RoleNames.ADMIN: [
        CRMSPerms.ALL,
        CRMSPerms.MANAGE_USERS, CRMSPerms.MANAGE_ROLES,
        CRMSPerms.VIEW_CASES, CRMSPerms.CREATE_CASE,
        CRMSPerms.EDIT_CASE, CRMSPerms.DELETE_CASE,
        CRMSPerms.VIEW_CRIMINALS, CRMSPerms.CREATE_CRIMINAL,
        CRMSPerms.EDIT_CRIMINAL, CRMSPerms.DELETE_CRIMINAL,
        CRMSPerms.VIEW_INVESTIGATIONS, CRMSPerms.CREATE_INVESTIGATION,
        CRMSPerms.EDIT_INVESTIGATION,
        CRMSPerms.VIEW_STAFF, CRMSPerms.MANAGE_STAFF,
        CRMSPerms.SYSTEM_SETTINGS,
    ],

    # ── Superintendent ──────────────────────────────────────────────
    RoleNames.SUPERINTENDENT: [
        CRMSPerms.VIEW_AUDIT_LOGS,
        CRMSPerms.VIEW_CASES, CRMSPerms.EDIT_CASE, CRMSPerms.ASSIGN_CASES,
        CRMSPerms.VIEW_CRIMINALS, CRMSPerms.EDIT_CRIMINAL,
        CRMSPerms.VIEW_INVESTIGATIONS, CRMSPerms.ASSIGN_INVESTIGATIONS,
        CRMSPerms.VIEW_STAFF,
        CRMSPerms.VIEW_REPORTS, CRMSPerms.GENERATE_REPORTS,
        CRMSPerms.APPROVE_ACTIONS,
    ],

    # ── CID (investigating officer) ─────────────────────────────────
    RoleNames.CID: [
        CRMSPerms.VIEW_CASES, CRMSPerms.EDIT_CASE,
        CRMSPerms.VIEW_CRIMINALS, CRMSPerms.CREATE_CRIMINAL,
        CRMSPerms.EDIT_CRIMINAL,
        CRMSPerms.VIEW_INVESTIGATIONS, CRMSPerms.CREATE_INVESTIGATION,
        CRMSPerms.EDIT_INVESTIGATION,
        CRMSPerms.VIEW_EVIDENCE, CRMSPerms.ADD_EVIDENCE,
        CRMSPerms.UPDATE_CASE_STATUS,
        CRMSPerms.VIEW_REPORTS,
    ],

    # ── NCO (station writer) ────────────────────────────────────────
    RoleNames.NCO: [
        CRMSPerms.VIEW_CASES, CRMSPerms.CREATE_CASE, CRMSPerms.CREATE_FIR,
        CRMSPerms.VIEW_CRIMINALS, CRMSPerms.CREATE_CRIMINAL,
        CRMSPerms.VIEW_INVESTIGATIONS,
        CRMSPerms.BASIC_DATA_ENTRY,
    ],
}

#: Human-readable labels the client shows next to the role name.
ROLE_DISPLAY_NAMES: dict[str, str] = {
    RoleNames.ADMIN: "Administrator",
    RoleNames.SUPERINTENDENT: "Superintendent",
    RoleNames.CID: "CID (Investigating Officer)",
    RoleNames.NCO: "NCO (Station Writer)",
}


def permissions_for_role(role_name: str | None) -> frozenset[str]:
    """Return the permission set for ``role_name`` (empty if unknown)."""
    if role_name is None:
        return frozenset()
    return frozenset(ROLE_PERMISSIONS.get(role_name, ()))


def role_has_permission(role_name: str | None, permission: str) -> bool:
    """True if the role holds ``permission`` directly or via the wildcard."""
    granted = permissions_for_role(role_name)
    return permission in granted or CRMSPerms.ALL in granted


def permission_table() -> dict[str, dict[str, object]]:
    """
    The role → permission table in the shape the client consumes::

        {"Admin": {"display_name": "Administrator",
                   "permissions": ["all", ...]}, ...}
    """
    return {
        name: {
            "display_name": ROLE_DISPLAY_NAMES.get(name, name),
            "permissions": list(permissions),
        }
        for name, permissions in ROLE_PERMISSIONS.items()
    }
