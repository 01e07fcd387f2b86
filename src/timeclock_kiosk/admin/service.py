from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import ADMIN_SETTINGS_KEY, DEFAULT_ADMIN_PASSWORD
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use case: gate the admin area behind a single shared password.

    Until a password is stored, the configured default is accepted.
    """

    def __init__(self, settings: SettingsRepository, *, default_password: str = DEFAULT_ADMIN_PASSWORD):
        self._settings = settings
        self._default_password = default_password

    def verify(self, password: str) -> None:
        # Storage errors propagate; only a missing hash means the default applies.
        stored = self._settings.get_password_hash(ADMIN_SETTINGS_KEY)

        if stored:
            try:
                ok = check_password_hash(stored, password or "")
            except ValueError:
                # e.g. corrupted hash values
                ok = False
        else:
            ok = (password or "") == self._default_password

        if not ok:
            raise AuthenticationError("Wrong password, please try again")

    def change_password(self, *, new_password: str, confirm_password: str) -> None:
        if not new_password:
            raise ValidationError("Password must not be empty")
        if new_password != confirm_password:
            raise ValidationError("Passwords do not match")

        self._settings.set_password_hash(ADMIN_SETTINGS_KEY, generate_password_hash(new_password))
        logger.info("Admin password updated")
