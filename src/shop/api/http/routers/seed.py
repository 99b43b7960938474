"""Demo data endpoint."""

from fastapi import APIRouter, Depends

from src.shop.api.http.deps import get_seed_service, require_seed_enabled
from src.shop.core.services import SeedService

router = APIRouter(prefix="/seed", tags=["seed"])


@router.get("", dependencies=[Depends(require_seed_enabled)])
def execute_seed(service: SeedService = Depends(get_seed_service)) -> str:
    """Replace all products and users with the demo data set."""
    return service.run()
