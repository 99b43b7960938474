"""Translation of storage-layer failures into domain errors."""

from typing import Any, NoReturn

from loguru import logger
from sqlalchemy.exc import DBAPIError

from src.shop.core.errors import DuplicateResource, InternalError, ShopError

# PostgreSQL SQLSTATE and SQLite extended result codes for unique violations
UNIQUE_VIOLATION_CODES = frozenset(
    {"23505", "SQLITE_CONSTRAINT_UNIQUE", "SQLITE_CONSTRAINT_PRIMARYKEY"}
)


def storage_error_code(error: BaseException) -> str | None:
    """Return the vendor error code carried by a driver exception, if any."""
    orig: Any = error.orig if isinstance(error, DBAPIError) else error
    for attribute in ("pgcode", "sqlstate", "sqlite_errorname"):
        code = getattr(orig, attribute, None)
        if code:
            return str(code)
    return None


def storage_error_detail(error: BaseException) -> str:
    """Return the driver-provided detail message for a storage error."""
    orig: Any = error.orig if isinstance(error, DBAPIError) else error
    diag = getattr(orig, "diag", None)
    detail = getattr(diag, "message_detail", None)
    if detail:
        return str(detail)
    return str(orig)


def is_unique_violation(error: BaseException) -> bool:
    if storage_error_code(error) in UNIQUE_VIOLATION_CODES:
        return True
    # sqlite3 on interpreters that do not expose sqlite_errorname
    return isinstance(error, DBAPIError) and "UNIQUE constraint failed" in str(error.orig)


def translate_db_error(error: BaseException, log: Any = logger) -> NoReturn:
    """Raise the domain error corresponding to a storage failure.

    Never returns. Domain errors are re-raised unchanged, unique violations
    become DuplicateResource, everything else becomes InternalError.
    """
    if isinstance(error, ShopError):
        raise error

    code = storage_error_code(error)
    detail = storage_error_detail(error)

    if is_unique_violation(error):
        log.warning("Duplicate resource rejected: {}", detail)
        raise DuplicateResource(detail) from error

    log.opt(exception=error).error(
        "Unexpected storage error ({}): {}", code, detail
    )
    raise InternalError(code, detail) from error
