import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jwt import PyJWTError
from jwt import decode as jwt_decode
from jwt import encode as jwt_encode

from userhub.core.exceptions import InvalidSecretError, InvalidTokenError
from userhub.domain.entities.user import User
from userhub.domain.interfaces.repositories import IUserRepository

DEFAULT_TOKEN_LIFETIME = timedelta(hours=24)


@dataclass(frozen=True)
class TokenConfig:
    """Signing configuration handed to `TokenService` at construction time.

    Attributes:
        secret: HMAC signing key. An empty secret is a misconfiguration.
        lifetime: How long an issued token stays valid.
        algorithm: JWS algorithm; only symmetric HMAC algorithms make sense here.
    """

    secret: str
    lifetime: timedelta = DEFAULT_TOKEN_LIFETIME
    algorithm: str = "HS256"


class TokenService:
    """Issues and validates signed, time-bounded identity tokens.

    Tokens carry `user_id` (hex id), `email`, `iat` and `exp`. Validation
    always reloads the user, so a token only stays useful while its account
    exists, and callers see the account's current data rather than the copy
    embedded at issuance.

    Attributes:
        config (TokenConfig): Secret, lifetime and algorithm.
        user_repository (IUserRepository): Used to reload users on validation.
    """

    def __init__(self, config: TokenConfig, user_repository: IUserRepository):
        self.config = config
        self.user_repository = user_repository

    def create_access_token(self, user: User) -> str:
        """Create a signed access token for ``user``.

        Raises:
            InvalidSecretError: If no signing secret is configured.
        """
        if not self.config.secret:
            raise InvalidSecretError()

        now = datetime.now(timezone.utc)
        payload = {
            "user_id": user.id.hex,
            "email": user.email,
            "exp": now + self.config.lifetime,
            "iat": now,
        }
        return jwt_encode(payload, self.config.secret, algorithm=self.config.algorithm)

    async def validate_token(self, token: str) -> User:
        """Validate a token and return the user it was issued to.

        Raises:
            InvalidTokenError: If the token is malformed, badly signed, expired or
                names an unparseable user id. The cause is not disclosed.
            UserNotFoundError: If the token is sound but its account no longer exists.
        """
        # Without a secret nothing was ever issued; an empty HMAC key must not verify.
        if not self.config.secret:
            raise InvalidTokenError()

        try:
            payload = jwt_decode(
                token,
                self.config.secret,
                algorithms=[self.config.algorithm],
                options={"require": ["exp", "iat", "user_id"]},
            )
            user_id = uuid.UUID(hex=str(payload["user_id"]))
        except (PyJWTError, ValueError) as e:
            raise InvalidTokenError() from e

        # UserNotFoundError propagates as is; storage failures are not masked.
        return await self.user_repository.get_by_id(user_id)
