"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class ApiError(ServiceError):
    """Raised when the storefront API answers with an error or cannot be reached.

    ``status`` is the HTTP status code, or ``0`` for transport and decoding
    failures where no usable response exists.
    """

    def __init__(self, message: str, status: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class UnauthorizedError(ApiError):
    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status=401)


class ProductNotFound(ServiceError):
    pass
