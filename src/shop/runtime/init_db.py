"""Create the schema: `python -m src.shop.runtime.init_db`."""

from loguru import logger

from src.shop.core.services.database.db_session import DbSessionService
from src.shop.runtime.context import get_config


def init_db() -> None:
    logger.info("Creating tables on {}", get_config().database.url.split("@")[-1])
    db_service = DbSessionService()
    try:
        db_service.create_all()
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()
