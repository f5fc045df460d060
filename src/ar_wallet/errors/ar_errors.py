"""ARError — base exception class for all py-ar errors."""

from __future__ import annotations


class ARError(Exception):
    """Base error for all Arweave client operations.

    Attributes:
        message: Human-readable error description.
        status_code: Suggested HTTP status code.
        code: Machine-readable error code string.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        code: str = "ar-error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class ValidationError(ARError):
    """Caller-supplied input is invalid; fixable by correcting the input."""

    def __init__(self, message: str, *, code: str = "validation-error") -> None:
        super().__init__(message, status_code=400, code=code)


class GatewayError(ARError):
    """Error from the Arweave HTTP gateway."""

    def __init__(self, message: str, *, status_code: int = 502) -> None:
        super().__init__(message, status_code=status_code, code="gateway-error")


class SiloError(ARError):
    """A silo URI could not be resolved to a resource."""

    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message, status_code=status_code, code="silo-error")
