"""Service tests for demo data seeding."""

from sqlmodel import select

from src.shop.core.models.pagination import PaginationDto
from src.shop.core.services.seed import SEED_PRODUCTS, SEED_USERS
from src.shop.entities.core.user import UserTable


class TestSeedService:
    def test_run_inserts_demo_data(self, seed_service, product_service, session):
        assert seed_service.run() == "SEED EXECUTED"

        products = product_service.find_all(PaginationDto(limit=100))
        users = session.exec(select(UserTable)).all()

        assert len(products) == len(SEED_PRODUCTS)
        assert {user.email for user in users} == {u["email"] for u in SEED_USERS}
        assert {product.user_id for product in products} == {
            next(user.id for user in users if user.email == SEED_USERS[0]["email"])
        }

    def test_run_is_repeatable(self, seed_service, product_service, owner):
        seed_service.run()
        seed_service.run()

        assert len(product_service.find_all(PaginationDto(limit=100))) == len(SEED_PRODUCTS)
        assert product_service.find_one("mens_chill_crew_neck_sweatshirt").gender == "men"
