"""Domain error taxonomy raised by the core services.

Each error carries the HTTP status it maps to and the detail that is safe to
show to a client. The API layer turns them into JSON responses in one place.
"""


class ShopError(Exception):
    """Base class for errors raised by the core."""

    status_code: int = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    @property
    def public_detail(self) -> str:
        return self.detail


class NotFound(ShopError):
    """No record matches the requested identifier."""

    status_code = 404

    def __init__(self, term: str) -> None:
        super().__init__(f"Not found id {term}")
        self.term = term


class DuplicateResource(ShopError):
    """A uniqueness constraint was violated; the client can correct the input."""

    status_code = 400


class InvalidArgument(ShopError):
    status_code = 400


class Unauthorized(ShopError):
    status_code = 401


class InternalError(ShopError):
    """Unexpected storage failure. The detail is logged, never shown."""

    status_code = 500

    def __init__(self, code: str | None, detail: str) -> None:
        super().__init__(f"Unexpected error({code}), {detail}")
        self.code = code

    @property
    def public_detail(self) -> str:
        return "Internal Server Error"
