"""Account registration, login and token refresh."""

from typing import Any

from loguru import logger

from src.shop.core.errors import Unauthorized
from src.shop.core.models.auth import AuthResponse, CreateUserDto, LoginUserDto
from src.shop.core.services.database.db_session import DbSessionService
from src.shop.core.services.database.errors import translate_db_error
from src.shop.core.services.jwt import JwtGeneratorService
from src.shop.core.services.password import PasswordService
from src.shop.entities.core.user import User, UserRepository


class AuthService:
    def __init__(
        self,
        db_service: DbSessionService,
        jwt_generator: JwtGeneratorService,
        password_service: PasswordService,
        log: Any = None,
    ) -> None:
        self._db = db_service
        self._jwt = jwt_generator
        self._passwords = password_service
        self._log = log or logger.bind(service="AuthService")

    def register(self, dto: CreateUserDto) -> AuthResponse:
        """Create an account and return it with a signed access token.

        Raises:
            DuplicateResource: The email is already registered.
        """
        user = User(email=dto.email, full_name=dto.full_name)
        password_hash = self._passwords.hash(dto.password)

        try:
            with self._db.session_scope() as session:
                created = UserRepository(session).create(user, password_hash)
        except Exception as error:
            translate_db_error(error, self._log)

        self._log.info("User {} registered", created.id)
        return self._respond(created)

    def login(self, dto: LoginUserDto) -> AuthResponse:
        with self._db.get_session() as session:
            credentials = UserRepository(session).get_credentials(dto.email)

        if credentials is None:
            raise Unauthorized("Credentials are not valid (email)")

        user, password_hash = credentials
        if not self._passwords.verify(dto.password, password_hash):
            self._log.info("Failed login for user {}", user.id)
            raise Unauthorized("Credentials are not valid (password)")

        return self._respond(user)

    def check_status(self, user: User) -> AuthResponse:
        """Re-issue a token for an already authenticated user."""
        return self._respond(user)

    def _respond(self, user: User) -> AuthResponse:
        token = self._jwt.generate_access_token(
            user.id, roles=list(user.roles), email=user.email
        )
        return AuthResponse.from_user(user, token)
