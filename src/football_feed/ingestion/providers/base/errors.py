from __future__ import annotations


class ProviderError(RuntimeError):
    """Base exception for provider-related failures."""


class ProviderRequestError(ProviderError):
    """HTTP/network/transport layer failures (timeouts, connection errors, non-2xx, etc.)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderRateLimited(ProviderRequestError):
    """Provider throttled the request (HTTP 429)."""


class ProviderAuthError(ProviderRequestError):
    """Provider refused the credentials (HTTP 401/403)."""


class EmptyResultError(ProviderError):
    """Provider answered successfully but with nothing usable."""


class ProviderMappingError(ProviderError):
    """Mapping/extraction failed due to unexpected schema or values."""

    def __init__(self, message: str, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"
