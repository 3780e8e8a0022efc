"""
Resource Location Extractor - Recovers created resource identity from headers.

Swish answers creation calls with an empty body; the new resource is only
identified by the Location header, and m-commerce payment requests also
carry a PaymentRequestToken header for opening the Swish app.
"""

from collections.abc import Mapping

import httpx
from structlog import get_logger

from swish_api.models.domain import ResourceLocation

logger = get_logger(__name__)

LOCATION_HEADER = "location"
PAYMENT_REQUEST_TOKEN_HEADER = "paymentrequesttoken"
PAYMENT_REQUEST_TOKEN_LENGTH = 32


class ResourceLocationExtractor:
    """Reads the Location and PaymentRequestToken headers of a creation response."""

    def extract(self, headers: Mapping[str, str]) -> ResourceLocation:
        """
        Extract identity headers.

        Header names are matched case-insensitively. Either value may be None.
        """
        headers = httpx.Headers(headers)
        location = headers.get(LOCATION_HEADER) or None
        request_token = headers.get(PAYMENT_REQUEST_TOKEN_HEADER) or None

        if request_token is not None and len(request_token) != PAYMENT_REQUEST_TOKEN_LENGTH:
            logger.warning(
                "swish_unexpected_request_token_length",
                length=len(request_token),
                expected=PAYMENT_REQUEST_TOKEN_LENGTH,
            )

        return ResourceLocation(location=location, request_token=request_token)
