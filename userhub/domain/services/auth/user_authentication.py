from userhub.core.exceptions import (
    InvalidCredentialsError,
    PasswordMismatchError,
    UserAlreadyExistsError,
)
from userhub.domain.entities.profile import LoginResult, RegisterResult, UserProfile
from userhub.domain.entities.user import User
from userhub.domain.interfaces.repositories import IUserRepository
from userhub.domain.services.auth.password import PasswordHasher
from userhub.domain.services.auth.token import TokenService


class UserAuthenticationService:
    """
    Service for email/password registration, login and token validation.

    The service raises typed errors and leaves logging of failures to the API
    layer. Login failures are uniform: an unknown email, a lookup error and a
    wrong password all raise the same `InvalidCredentialsError`.

    Attributes:
        user_repository (IUserRepository): Storage for user records.
        password_hasher (PasswordHasher): bcrypt hashing and verification.
        token_service (TokenService): Issues and validates access tokens.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def register_user(self, name: str, email: str, password: str) -> User:
        """
        Create and persist a new user.

        The email pre-check only saves a bcrypt round for the common duplicate
        case. Two concurrent registrations can both pass it, and the
        repository's own uniqueness enforcement decides the race. A failed
        lookup counts as "not found"; the insert is authoritative either way.

        Raises:
            UserAlreadyExistsError: If the email is taken.
            EmptyPasswordError: If the password is empty.
            InvalidUserDataError: If the name or email is empty.
        """
        try:
            await self.user_repository.get_by_email(email)
        except Exception:
            pass
        else:
            raise UserAlreadyExistsError()

        hashed_password = self.password_hasher.hash(password)
        user = User.create(name, email, hashed_password)
        await self.user_repository.create(user)
        return user

    async def register(self, name: str, email: str, password: str) -> RegisterResult:
        user = await self.register_user(name, email, password)
        return RegisterResult(id=user.id.hex)

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate with email and password and issue an access token.

        Raises:
            InvalidCredentialsError: If the email is unknown, the lookup fails or
                the password is wrong.
            InvalidSecretError: If no signing secret is configured.
        """
        try:
            user = await self.user_repository.get_by_email(email)
        except Exception as e:
            raise InvalidCredentialsError() from e

        try:
            self.password_hasher.verify(user.hashed_password, password)
        except PasswordMismatchError as e:
            raise InvalidCredentialsError() from e

        token = self.token_service.create_access_token(user)
        return LoginResult(token=token, user=UserProfile.from_entity(user))

    async def validate_token(self, token: str) -> UserProfile:
        """
        Resolve a bearer token to the current profile of its user.

        Raises:
            InvalidTokenError: If the token does not verify.
            UserNotFoundError: If the account was removed after issuance.
        """
        user = await self.token_service.validate_token(token)
        return UserProfile.from_entity(user)
