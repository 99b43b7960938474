"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from src.shop.core.services.database.unit_of_work import UnitOfWork
from src.shop.runtime.config.config_data import ConfigData
from src.shop.runtime.context import get_config


def _connect_args(config: ConfigData) -> dict[str, Any]:
    db = config.database
    if db.is_sqlite:
        if config.app.environment == "production":
            logger.warning("Running on SQLite in production; use PostgreSQL")
        # sessions cross FastAPI's threadpool
        return {"check_same_thread": False, "timeout": 20}
    if db.url.startswith("postgresql"):
        return {"application_name": f"shop_api_{config.app.environment}", "connect_timeout": 30}
    return {}


def build_engine(config: ConfigData) -> Engine:
    """Create the engine described by `config.database`.

    Pool settings only apply to server databases; SQLite keeps SQLAlchemy's
    default pool.
    """
    db = config.database
    options: dict[str, Any] = {"echo": db.echo, "connect_args": _connect_args(config)}
    if not db.is_sqlite:
        options.update(
            pool_size=db.pool_size,
            max_overflow=db.max_overflow,
            pool_timeout=db.pool_timeout,
            pool_recycle=db.pool_recycle,
            pool_pre_ping=True,
        )

    logger.bind(sqlite=db.is_sqlite, environment=config.app.environment).info(
        "Creating database engine"
    )
    return create_engine(db.connection_string, **options)


class DbSessionService:
    """Owns the engine and hands out sessions and transaction scopes.

    Tests pass a pre-built in-memory engine; otherwise one is built from the
    active configuration.
    """

    def __init__(self, engine: Engine | None = None):
        self._engine = engine if engine is not None else build_engine(get_config())

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        # entities are read after commit
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        with self.get_session() as session:
            try:
                yield session
                session.commit()
            except Exception as e:
                session.rollback()
                # callers translate and log the error
                logger.bind(error_type=type(e).__name__).debug(
                    "Database transaction rolled back: {}", e
                )
                raise

    def unit_of_work(self, log: Any = logger) -> UnitOfWork:
        """Return an explicit transaction scope on a dedicated session."""
        return UnitOfWork(self.get_session, log=log)

    def create_all(self) -> None:
        # register every table on the metadata
        from src.shop.entities.core.user import UserTable  # noqa: F401
        from src.shop.entities.service.product import (  # noqa: F401
            ProductImageTable,
            ProductTable,
        )

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database tables created")

    def health_check(self) -> bool:
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.bind(error_type=type(e).__name__).error("Database health check failed: {}", e)
            return False
        return True

    def dispose(self) -> None:
        self._engine.dispose()
