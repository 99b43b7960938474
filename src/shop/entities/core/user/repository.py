"""User repository for database operations."""

from sqlalchemy import delete
from sqlmodel import Session, select

from .entity import User, normalize_email
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_by_email(self, email: str) -> User | None:
        row = self._get_row_by_email(email)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def get_credentials(self, email: str) -> tuple[User, str] | None:
        """Return the user and its password hash, for login only."""
        row = self._get_row_by_email(email)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True), row.password

    def create(self, user: User, password_hash: str) -> User:
        row = UserTable(
            id=user.id,
            email=user.email,
            password=password_hash,
            full_name=user.full_name,
            is_active=user.is_active,
            roles=list(user.roles),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def delete_all(self) -> int:
        result = self._session.exec(delete(UserTable))  # type: ignore[call-overload]
        return result.rowcount

    def _get_row_by_email(self, email: str) -> UserTable | None:
        statement = select(UserTable).where(UserTable.email == normalize_email(email))
        return self._session.exec(statement).first()
