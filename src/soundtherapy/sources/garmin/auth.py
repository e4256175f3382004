"""Garmin Connect session handling with garth token persistence."""

import logging
from pathlib import Path

import garth

from soundtherapy.config import get_settings

logger = logging.getLogger(__name__)


class GarminAuth:
    """Resumes a saved garth session or logs in with configured credentials."""

    def __init__(self, email: str = "", password: str = "", token_dir: Path | None = None) -> None:
        settings = get_settings()
        self.email = email or settings.garmin_email
        self.password = password or settings.garmin_password
        self.token_dir = token_dir or settings.garmin_token_dir

    @property
    def has_credentials(self) -> bool:
        return bool(self.email and self.password)

    def resume(self) -> bool:
        """Reuse tokens saved by a previous login, if they are still valid."""
        if not self.token_dir.exists():
            return False
        try:
            garth.resume(str(self.token_dir))
            _ = garth.client.username
        except Exception:
            logger.info("Saved Garmin tokens in %s are no longer valid", self.token_dir)
            return False
        logger.info("Resumed Garmin session from saved tokens")
        return True

    def login(self) -> bool:
        """Authenticate, preferring saved tokens over a fresh credential login."""
        if self.resume():
            return True

        if not self.has_credentials:
            logger.error("No Garmin credentials configured")
            return False

        try:
            garth.login(self.email, self.password)
        except Exception:
            logger.exception("Garmin login failed")
            return False

        self.token_dir.mkdir(parents=True, exist_ok=True)
        garth.save(str(self.token_dir))
        logger.info("Garmin login successful; tokens saved to %s", self.token_dir)
        return True
