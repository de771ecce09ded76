"""Password hashing and verification.

Passwords are hashed with bcrypt through passlib. The hash embeds its salt and
work factor (modular crypt format), so verification needs nothing but the
stored string.
"""

from passlib.context import CryptContext

from userhub.core.exceptions import EmptyPasswordError, PasswordMismatchError

DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """One-way password hashing with constant-time verification.

    Args:
        rounds: bcrypt work factor.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt.

        Raises:
            EmptyPasswordError: If the password is empty. bcrypt is never invoked.
        """
        if not password:
            raise EmptyPasswordError()
        return self.pwd_context.hash(password)

    def verify(self, hashed_password: str, password: str) -> None:
        """Verify a password against its hash.

        Raises:
            PasswordMismatchError: If the password does not match, or if the hash
                is malformed. Both cases raise the same error.
        """
        try:
            matches = self.pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError) as e:
            raise PasswordMismatchError() from e
        if not matches:
            raise PasswordMismatchError()
