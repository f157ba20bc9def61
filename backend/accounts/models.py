"""
Accounts app models.

Defines the fixed Role table, the police ``Staff`` roster, and a custom
``User`` model that extends Django's ``AbstractUser``.

Every login account belongs to exactly one staff member and holds exactly
one role.  A user's ability to log in is governed by the linked staff
row's ``is_active`` flag, not by ``User.is_active``: "deleting" a user
deactivates the staff member so that historical cases, investigations and
audit entries keep their references.
"""

from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models


class Role(models.Model):
    """
    One of the four fixed CRMS roles (Admin, Superintendent, CID, NCO).

    Permissions are **not** stored per role in the database; they come
    from the static table in ``core.permissions_constants`` keyed by
    ``name``.  Role rows are seeded by ``manage.py seed_crms``.
    """

    name = models.CharField(
        max_length=50,
        unique=True,
        verbose_name="Role Name",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )

    class Meta:
        verbose_name = "Role"
        verbose_name_plural = "Roles"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Staff(models.Model):
    """
    A member of the police staff.

    ``badge_number`` is unique across active and inactive staff alike,
    and rows are never deleted, only deactivated.
    """

    name = models.CharField(max_length=100, verbose_name="Name")
    pol_rank = models.CharField(max_length=50, verbose_name="Rank")
    badge_number = models.CharField(
        max_length=30,
        unique=True,
        verbose_name="Badge Number",
    )
    department = models.CharField(
        max_length=100,
        blank=True,
        null=True,
        verbose_name="Department",
    )
    contact = models.CharField(
        max_length=30,
        blank=True,
        null=True,
        verbose_name="Contact",
    )
    is_active = models.BooleanField(default=True, verbose_name="Active")
    join_date = models.DateField(null=True, blank=True, verbose_name="Join Date")

    class Meta:
        verbose_name = "Police Staff"
        verbose_name_plural = "Police Staff"
        ordering = ["-join_date"]

    def __str__(self):
        return f"{self.name} ({self.badge_number})"


class CRMSUserManager(UserManager):
    """
    ``UserManager`` that loads role and staff with every user.

    ``createsuperuser`` passes ``role`` and ``staff`` as primary keys, so
    non-instance values are rewritten to ``role_id`` / ``staff_id``.
    """

    def get_queryset(self):
        return super().get_queryset().select_related("role", "staff")

    @staticmethod
    def _normalize_relations(extra_fields):
        for field in ("role", "staff"):
            value = extra_fields.get(field)
            if value is not None and not isinstance(value, models.Model):
                extra_fields[f"{field}_id"] = extra_fields.pop(field)
        return extra_fields

    def create_user(self, username, email=None, password=None, **extra_fields):
        return super().create_user(
            username, email, password, **self._normalize_relations(extra_fields)
        )

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        return super().create_superuser(
            username, email, password, **self._normalize_relations(extra_fields)
        )


class User(AbstractUser):
    """
    Login account of a staff member.

    The password is stored as a salted hash through Django's hashers.
    ``created_at`` and ``last_login`` (inherited) are surfaced in the
    user-management listing.
    """

    role = models.ForeignKey(
        Role,
        on_delete=models.PROTECT,
        related_name="users",
        verbose_name="Role",
    )
    staff = models.OneToOneField(
        Staff,
        on_delete=models.PROTECT,
        related_name="user",
        verbose_name="Staff Member",
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created At")

    objects = CRMSUserManager()

    # Prompted for (as primary keys) by ``createsuperuser``
    REQUIRED_FIELDS = ["role", "staff"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.username} ({self.role.name})"
