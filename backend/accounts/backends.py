"""
Custom authentication backend for staff logins.

A user may log in only while the linked police staff record is active.
Unknown usernames, wrong passwords and deactivated staff all yield
``None`` so callers cannot tell the three apart.

This backend is registered in ``settings.AUTHENTICATION_BACKENDS``
so that Django's ``authenticate()`` call (including the admin login)
dispatches to it.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend

User = get_user_model()


class ActiveStaffAuthBackend(ModelBackend):
    """
    Authenticate by ``username`` + ``password`` against active staff.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        """
        Resolve the user by *username* and verify *password*.

        Parameters
        ----------
        request : HttpRequest | None
        username : str
        password : str
            The raw password to verify against the salted hash.

        Returns
        -------
        User | None
            The authenticated user, or ``None`` on failure.
        """
        if username is None or password is None:
            return None

        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            # Run the default password hasher to mitigate timing attacks
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None

    def user_can_authenticate(self, user):
        """Reject users whose account or staff record is deactivated."""
        return super().user_can_authenticate(user) and user.staff.is_active
