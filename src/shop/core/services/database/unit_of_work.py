"""Explicit transactional scope over a dedicated session."""

from collections.abc import Callable
from types import TracebackType
from typing import Any

from loguru import logger
from sqlmodel import Session


class UnitOfWork:
    """Own one session and one transaction for the duration of a `with` block.

    Entering connects (opens a session) and begins a transaction. Leaving the
    block normally commits; leaving it with an exception rolls back and lets
    the exception propagate. The session is released on every path, including
    a failing commit or rollback. If the rollback itself fails, that failure
    is logged and is what the caller observes.

    Example:
        with UnitOfWork(db.get_session) as session:
            ProductRepository(session).delete_images(product_id)
    """

    def __init__(self, session_factory: Callable[[], Session], log: Any = logger) -> None:
        self._session_factory = session_factory
        self._log = log
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work is not active")
        return self._session

    def __enter__(self) -> Session:
        session = self._session_factory()
        try:
            session.begin()
        except Exception:
            session.close()
            raise
        self._session = session
        return session

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self.session
        try:
            if exc is None:
                self._commit(session)
            else:
                self._rollback(session)
        finally:
            session.close()
            self._session = None

    def _commit(self, session: Session) -> None:
        try:
            session.commit()
        except Exception:
            self._rollback(session)
            raise

    def _rollback(self, session: Session) -> None:
        try:
            session.rollback()
        except Exception:
            self._log.exception("Transaction rollback failed")
            raise
