"""
Response Classifier - Normalizes Swish responses into success or typed errors.

Swish is inconsistent about failures. Depending on endpoint and failure type
it answers with a plain-text 404, a JSON array of error objects, a single
error object, or a body that is not JSON at all. All of them end up as
RequestError values inside a SwishClientError.
"""

import json
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError
from structlog import get_logger

from swish_api.exceptions import SwishErrorCollection, SwishNotFoundError, SwishRequestError
from swish_api.models.api import ProviderErrorPayload
from swish_api.models.domain import ProviderResponse, RequestError

logger = get_logger(__name__)


class ResponseClassifier:
    """Decides success or failure for a completed HTTP exchange."""

    def classify(
        self,
        status_code: int,
        headers: Mapping[str, str],
        body: str,
    ) -> ProviderResponse:
        """
        Classify a response.

        Args:
            status_code: HTTP status code
            headers: Response headers
            body: Response body text

        Returns:
            ProviderResponse for any 2xx status, body and headers untouched

        Raises:
            SwishNotFoundError: 404, message is the raw body
            SwishErrorCollection: Non-2xx with a JSON array body
            SwishRequestError: Non-2xx with any other body
        """
        if status_code == httpx.codes.NOT_FOUND:
            raise SwishNotFoundError(
                RequestError(http_status=status_code, code=None, message=body)
            )

        if not httpx.codes.is_success(status_code):
            raise self._provider_error(status_code, body)

        return ProviderResponse(
            status_code=status_code,
            body=body,
            headers=httpx.Headers(headers),
        )

    def _provider_error(self, status_code: int, body: str) -> SwishRequestError | SwishErrorCollection:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            return SwishRequestError(
                RequestError(http_status=status_code, code=None, message=str(exc))
            )

        if isinstance(payload, list):
            errors = [
                error
                for error in (self._decode_error(status_code, element) for element in payload)
                if error is not None
            ]
            if len(errors) < len(payload):
                logger.warning(
                    "swish_error_elements_dropped",
                    status=status_code,
                    received=len(payload),
                    decoded=len(errors),
                )
            return SwishErrorCollection(status_code, errors)

        error = self._decode_error(status_code, payload) if isinstance(payload, dict) else None
        if error is None:
            error = RequestError(http_status=status_code, code=None, message=body)
        return SwishRequestError(error)

    @staticmethod
    def _decode_error(status_code: int, element: Any) -> RequestError | None:
        """Decode one error object, stamped with the HTTP status; None if malformed."""
        try:
            payload = ProviderErrorPayload.model_validate(element)
        except ValidationError:
            return None

        return RequestError(
            http_status=status_code,
            code=payload.error_code,
            message=payload.error_message,
            additional_information=payload.additional_information,
        )
