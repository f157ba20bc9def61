"""
Management command: seed_crms
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Seeds the database with the four fixed **Roles** and the standard
**crime categories**.  With ``--with-demo-users`` it also creates one
staff member and login account per role for local use.

Permissions are not rows: each role's permission set comes from
``core.permissions_constants.ROLE_PERMISSIONS`` at request time, so this
command only has to make sure the role *names* exist.

The command is **idempotent** — safe to run multiple times.  Existing
roles and categories are updated in place; existing demo users keep
their passwords.

Usage::

    python manage.py seed_crms
    python manage.py seed_crms --with-demo-users --demo-password s3cret

Prerequisites::

    python manage.py migrate
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from accounts.models import Role, Staff, User
from cases.models import CrimeCategory, Severity
from core.permissions_constants import ROLE_DISPLAY_NAMES, ROLE_PERMISSIONS, RoleNames

# ────────────────────────────────────────────────────────────────────
# Reference data
# ────────────────────────────────────────────────────────────────────

ROLE_DESCRIPTIONS: dict[str, str] = {
    RoleNames.ADMIN: "Full system access: users, staff and all records.",
    RoleNames.SUPERINTENDENT: "Supervises cases and investigations; reads the audit log.",
    RoleNames.CID: "Investigating officer: criminals and investigations.",
    RoleNames.NCO: "Station writer: registers FIRs and basic records.",
}

# (crime_name, ipc_section, severity_level)
CRIME_CATEGORIES: list[tuple[str, str, str]] = [
    ("Murder", "302", Severity.CRITICAL),
    ("Rape", "376", Severity.CRITICAL),
    ("Kidnapping", "363", Severity.HIGH),
    ("Robbery", "392", Severity.HIGH),
    ("Dacoity", "395", Severity.HIGH),
    ("Rioting", "147", Severity.MEDIUM),
    ("Theft", "379", Severity.MEDIUM),
    ("Burglary", "454", Severity.MEDIUM),
    ("Cheating", "420", Severity.MEDIUM),
    ("Assault", "351", Severity.MEDIUM),
    ("Criminal Intimidation", "506", Severity.LOW),
    ("Public Nuisance", "268", Severity.LOW),
]

# (username, staff name, rank, badge, department, role)
DEMO_USERS: list[tuple[str, str, str, str, str, str]] = [
    ("admin", "System Administrator", "Inspector", "ADM-001", "Headquarters", RoleNames.ADMIN),
    ("supt", "R. Sharma", "Superintendent", "SP-001", "Headquarters", RoleNames.SUPERINTENDENT),
    ("cid", "A. Verma", "Sub-Inspector", "CID-001", "Crime Investigation", RoleNames.CID),
    ("nco", "K. Singh", "Head Constable", "NCO-001", "Station Records", RoleNames.NCO),
]


class Command(BaseCommand):
    help = (
        "Seeds the four CRMS roles and the standard crime categories.  "
        "Safe to run multiple times (idempotent)."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--with-demo-users",
            action="store_true",
            help="Also create one staff member and user per role.",
        )
        parser.add_argument(
            "--demo-password",
            default="crms@1234",
            help="Password for newly created demo users (default: %(default)s).",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.MIGRATE_HEADING(
            "\n══════════════════════════════════════════"
            "\n  CRMS Setup — Roles & Reference Data"
            "\n══════════════════════════════════════════\n"
        ))

        roles = self._seed_roles()
        self._seed_categories()
        if options["with_demo_users"]:
            self._seed_demo_users(roles, options["demo_password"])

        self.stdout.write(self.style.MIGRATE_HEADING(
            "\n──────────────────────────────────────────"
        ))
        self.stdout.write(self.style.SUCCESS("  Done!\n"))

    # ── Steps ────────────────────────────────────────────────────────

    def _seed_roles(self) -> dict[str, Role]:
        roles: dict[str, Role] = {}
        for name in RoleNames.ALL:
            role, created = Role.objects.update_or_create(
                name=name,
                defaults={"description": ROLE_DESCRIPTIONS[name]},
            )
            roles[name] = role
            action = "Created" if created else "Updated"
            self.stdout.write(self.style.SUCCESS(
                f"  ✔  {action} role: {ROLE_DISPLAY_NAMES[name]:<28s} "
                f"(permissions={len(ROLE_PERMISSIONS[name])})"
            ))
        return roles

    def _seed_categories(self) -> None:
        created_count = 0
        for crime_name, ipc_section, severity in CRIME_CATEGORIES:
            _, created = CrimeCategory.objects.update_or_create(
                crime_name=crime_name,
                defaults={"ipc_section": ipc_section, "severity_level": severity},
            )
            created_count += int(created)
        self.stdout.write(self.style.SUCCESS(
            f"  ✔  Crime categories: {created_count} created, "
            f"{len(CRIME_CATEGORIES) - created_count} already present"
        ))

    def _seed_demo_users(self, roles: dict[str, Role], password: str) -> None:
        for username, name, rank, badge, department, role_name in DEMO_USERS:
            staff, _ = Staff.objects.get_or_create(
                badge_number=badge,
                defaults={"name": name, "pol_rank": rank, "department": department},
            )
            if User.objects.filter(username=username).exists():
                self.stdout.write(f"  ·  Demo user '{username}' already exists — skipped")
                continue
            if User.objects.filter(staff=staff).exists():
                self.stdout.write(self.style.WARNING(
                    f"  ⚠  Staff {badge} already has an account — '{username}' skipped"
                ))
                continue
            User.objects.create_user(
                username=username,
                password=password,
                role=roles[role_name],
                staff=staff,
            )
            self.stdout.write(self.style.SUCCESS(
                f"  ✔  Created demo user: {username:<8s} ({role_name})"
            ))
