"""Authentication settings.
"""

import logging

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class AuthSettings(BaseSettings):
    """Defines settings for password hashing and JWT issuance.

    Unlike a missing database URL, an empty ``JWT_SECRET`` does not stop the
    process from starting: the token authority refuses to issue tokens instead,
    so the misconfiguration surfaces as a server error on login.

    Security Note:
        - JWT_SECRET must be a long random string and never be logged or
          committed to version control.
    """

    JWT_SECRET: SecretStr = SecretStr("")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_HOURS: int = Field(ge=1, default=24)

    BCRYPT_ROUNDS: int = Field(ge=4, le=31, default=12)

    def warn_if_secret_missing(self) -> None:
        """Logs a warning when no signing secret is configured."""
        if not self.JWT_SECRET.get_secret_value():
            logger.warning(
                "JWT_SECRET is empty; token issuance will fail until it is configured."
            )
