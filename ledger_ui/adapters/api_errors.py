from __future__ import annotations

from typing import Optional


class ApiError(RuntimeError):
    """Base class for ledger API transport failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.context = context


class ApiNetworkError(ApiError):
    """The request could not be sent or its response could not be received."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


class ApiServerError(ApiError):
    """Non-2xx response; ``message`` is the body text or the reason phrase."""

    def __init__(self, message: str, *, status: int, context: Optional[str] = None) -> None:
        super().__init__(message, status=status, context=context)


class ApiDecodeError(ApiError):
    """Successful status whose body is not valid JSON."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message, status=status, context=context)


__all__ = ["ApiError", "ApiNetworkError", "ApiServerError", "ApiDecodeError"]
