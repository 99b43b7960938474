"""FastAPI application setup."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.shop.api.http.app_data import ApplicationDependencies
from src.shop.api.http.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from src.shop.api.http.middleware.request_logging import REQUEST_ID_HEADER
from src.shop.api.http.routers.auth import router as auth_router
from src.shop.api.http.routers.products import router as products_router
from src.shop.api.http.routers.seed import router as seed_router
from src.shop.api.utils.app_startup import configure_logging
from src.shop.core.errors import ShopError
from src.shop.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
    PasswordService,
)
from src.shop.runtime.context import get_config

main_config = get_config()

configure_logging(main_config)


def build_dependencies(database_service: DbSessionService | None = None) -> ApplicationDependencies:
    """Construct the application-wide services."""
    return ApplicationDependencies(
        database_service=database_service or DbSessionService(),
        jwt_verify_service=JwtVerificationService(),
        jwt_generation_service=JwtGeneratorService(),
        password_service=PasswordService(),
    )


async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)
    if not config.app.jwt_signing_secret:
        raise RuntimeError("app.jwt_signing_secret must be configured")
    app.state.app_dependencies = build_dependencies()


async def shutdown() -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is not None:
        deps.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


_production = main_config.app.environment == "production"

app = FastAPI(
    title="Shop API",
    lifespan=lifespan,
    docs_url=None if _production else "/docs",
    redoc_url=None if _production else "/redoc",
)

# expose startup for tests
__all__ = ["app", "build_dependencies", "startup", "shutdown"]

cors = main_config.app.cors
if _production and "*" in cors.origins:
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

# Starlette runs the last added middleware first
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(ShopError)
async def handle_shop_error(request: Request, exc: ShopError) -> JSONResponse:
    """Render domain errors as `{"detail", "request_id"}` with their status."""
    request_id = getattr(request.state, "request_id", "-")
    # 5xx errors are logged with their traceback where they are raised
    if exc.status_code < 500:
        logger.bind(status_code=exc.status_code, error_type=type(exc).__name__).info(
            "request.rejected: {}", exc.detail
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.public_detail, "request_id": request_id},
        headers={REQUEST_ID_HEADER: request_id},
    )


app.include_router(auth_router)
app.include_router(products_router)
app.include_router(seed_router)


@app.get("/health", response_model=None)
async def health(request: Request) -> dict[str, str] | JSONResponse:
    """Liveness check including a database ping."""
    deps: ApplicationDependencies = request.app.state.app_dependencies
    if not deps.database_service.health_check():
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "unreachable"},
        )
    return {"status": "healthy", "database": "ok"}


@app.get("/ready")
async def readiness() -> dict[str, str]:
    return {"status": "ready"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=main_config.app.host,
        port=main_config.app.port,
        access_log=False,  # We handle access logging in middleware
    )
