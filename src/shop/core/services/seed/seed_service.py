"""Reset the store to a known demo state."""

from typing import Any

from loguru import logger

from src.shop.core.models.auth import CreateUserDto
from src.shop.core.models.product import CreateProductDto
from src.shop.core.services.database.db_session import DbSessionService
from src.shop.core.services.database.errors import translate_db_error
from src.shop.core.services.password import PasswordService
from src.shop.core.services.product.product_service import ProductService
from src.shop.entities.core.user import User, UserRepository

from .seed_data import SEED_PRODUCTS, SEED_USERS


class SeedService:
    def __init__(
        self,
        db_service: DbSessionService,
        product_service: ProductService,
        password_service: PasswordService,
        log: Any = None,
    ) -> None:
        self._db = db_service
        self._products = product_service
        self._passwords = password_service
        self._log = log or logger.bind(service="SeedService")

    def run(self) -> str:
        """Wipe products and users, then insert the demo users and catalogue.

        Every seeded product is owned by the first seeded user.
        """
        self._products.delete_all()
        users = self._insert_users()

        owner = users[0]
        for data in SEED_PRODUCTS:
            self._products.create(CreateProductDto.model_validate(data), owner)

        self._log.info(
            "Seed executed: {} users, {} products", len(users), len(SEED_PRODUCTS)
        )
        return "SEED EXECUTED"

    def _insert_users(self) -> list[User]:
        created: list[User] = []
        try:
            with self._db.session_scope() as session:
                repository = UserRepository(session)
                repository.delete_all()
                for data in SEED_USERS:
                    dto = CreateUserDto.model_validate(data)
                    user = User(email=dto.email, full_name=dto.full_name, roles=data["roles"])
                    created.append(
                        repository.create(user, self._passwords.hash(dto.password))
                    )
        except Exception as error:
            translate_db_error(error, self._log)
        return created
