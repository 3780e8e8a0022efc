"""
Domain Models - Immutable dataclasses produced by the client.

Creation receipts are assembled from response headers, not from the body,
because Swish answers creation calls with an empty body and a Location header.
"""

from dataclasses import dataclass

import httpx

from swish_api.models.api import ErrorCode


@dataclass(frozen=True)
class RequestError:
    """One normalized error reported by Swish."""

    http_status: int
    code: ErrorCode | None
    message: str
    additional_information: str | None = None

    def __str__(self) -> str:
        if self.code is None:
            return f"[{self.http_status}] {self.message}"
        return f"[{self.http_status}] {self.code.value}: {self.message}"


@dataclass(frozen=True)
class CreatedPayment:
    """Receipt for a payment request accepted by Swish."""

    id: str
    location: str
    request_token: str | None = None  # Only issued for m-commerce payments


@dataclass(frozen=True)
class CreatedRefund:
    """Receipt for a refund accepted by Swish."""

    id: str
    location: str


@dataclass(frozen=True)
class ResourceLocation:
    """Identity headers of a creation response."""

    location: str | None
    request_token: str | None = None

    @property
    def resource_id(self) -> str | None:
        """Final path segment of the location, or the whole value without a '/'."""
        if self.location is None:
            return None
        return self.location.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class ProviderResponse:
    """A successful (2xx) exchange with Swish."""

    status_code: int
    body: str
    headers: httpx.Headers
