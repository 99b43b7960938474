from dataclasses import dataclass

from src.shop.core.services import (
    DbSessionService,
    JwtGeneratorService,
    JwtVerificationService,
    PasswordService,
)


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_verify_service: JwtVerificationService
    jwt_generation_service: JwtGeneratorService
    password_service: PasswordService
