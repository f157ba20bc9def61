"""
Tests for the ``seed_crms`` management command.
"""

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from accounts.models import Role, Staff, User
from cases.models import CrimeCategory
from core.permissions_constants import RoleNames


class SeedCommandTests(TestCase):

    def _run(self, *args):
        out = StringIO()
        call_command("seed_crms", *args, stdout=out)
        return out.getvalue()

    def test_seeds_roles_and_categories(self):
        self._run()

        self.assertEqual(set(Role.objects.values_list("name", flat=True)), set(RoleNames.ALL))
        self.assertEqual(CrimeCategory.objects.count(), 12)
        self.assertFalse(User.objects.exists())

    def test_is_idempotent(self):
        self._run("--with-demo-users")
        output = self._run("--with-demo-users")

        self.assertEqual(Role.objects.count(), 4)
        self.assertEqual(CrimeCategory.objects.count(), 12)
        self.assertEqual(User.objects.count(), 4)
        self.assertEqual(Staff.objects.count(), 4)
        self.assertIn("already exists", output)

    def test_demo_users_can_log_in(self):
        self._run("--with-demo-users", "--demo-password", "station-pass")

        resp = self.client.post(
            "/api/auth/login",
            {"username": "nco", "password": "station-pass"},
            content_type="application/json",
        )

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["role_name"], RoleNames.NCO)
