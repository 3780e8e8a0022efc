"""
Swish merchant API client.

Asynchronous bindings for creating and fetching Swish payment requests and
refunds over mutual TLS.
"""

from swish_api.client import SwishClient
from swish_api.config import (
    PRODUCTION_API_URL,
    TEST_API_URL,
    ConfigurationError,
    SwishSettings,
    get_settings,
)
from swish_api.exceptions import (
    CertificateError,
    CertificateReadError,
    SwishClientError,
    SwishConfigurationError,
    SwishDecodeError,
    SwishErrorCollection,
    SwishNotFoundError,
    SwishParseError,
    SwishRequestError,
    SwishTransportError,
    SwishUriError,
)
from swish_api.models.api import (
    Currency,
    ErrorCode,
    Payment,
    PaymentParams,
    Refund,
    RefundParams,
    Status,
)
from swish_api.models.domain import CreatedPayment, CreatedRefund, RequestError

__all__ = [
    "SwishClient",
    "SwishSettings",
    "get_settings",
    "ConfigurationError",
    "TEST_API_URL",
    "PRODUCTION_API_URL",
    "Currency",
    "ErrorCode",
    "Status",
    "Payment",
    "PaymentParams",
    "Refund",
    "RefundParams",
    "CreatedPayment",
    "CreatedRefund",
    "RequestError",
    "SwishClientError",
    "SwishConfigurationError",
    "CertificateReadError",
    "CertificateError",
    "SwishUriError",
    "SwishTransportError",
    "SwishRequestError",
    "SwishNotFoundError",
    "SwishErrorCollection",
    "SwishDecodeError",
    "SwishParseError",
]
