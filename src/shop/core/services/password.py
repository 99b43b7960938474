"""Password hashing with bcrypt."""

import bcrypt

from src.shop.runtime.context import get_config

# bcrypt only considers the first 72 bytes of the input
_BCRYPT_MAX_BYTES = 72


class PasswordService:
    def __init__(self, rounds: int | None = None) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        rounds = self._rounds or get_config().security.bcrypt_rounds
        salt = bcrypt.gensalt(rounds=rounds)
        return bcrypt.hashpw(self._encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # malformed stored hash
            return False

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]
