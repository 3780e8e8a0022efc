"""
Swish API Client.

Creates and fetches payment requests and refunds through the Swish merchant
API (https://developer.swish.nu/api/payment-request/v1). Every call is
authenticated by mutual TLS using the merchant's PKCS#12 certificate.

Usage:
    async with SwishClient.from_settings(get_settings()) as client:
        created = await client.create_payment(
            PaymentParams(amount=100.0, callback_url="https://example.com/swish/callback")
        )
        payment = await client.get_payment(created.id)
"""

from pathlib import Path
from types import TracebackType
from typing import TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError
from structlog import get_logger

from swish_api.config import TEST_API_URL, SwishSettings
from swish_api.exceptions import (
    SwishClientError,
    SwishDecodeError,
    SwishParseError,
    SwishTransportError,
)
from swish_api.models.api import Payment, PaymentParams, Refund, RefundParams, SwishModel
from swish_api.models.domain import CreatedPayment, CreatedRefund, ProviderResponse, ResourceLocation
from swish_api.observability.metrics import metrics, track_swish_request
from swish_api.services.certificates import CertificateStore
from swish_api.services.location import ResourceLocationExtractor
from swish_api.services.request_builder import RequestBuilder
from swish_api.services.response_classifier import ResponseClassifier
from swish_api.services.tls import TlsClientFactory

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SwishModel)


class SwishClient:
    """
    Asynchronous Swish merchant API client.

    Holds only immutable configuration and one pooled mutual-TLS transport,
    so a single instance can be shared by concurrent tasks on one event loop.
    Calls are never retried and have no timeout unless one is configured.
    """

    def __init__(
        self,
        merchant_number: str,
        cert_path: str | Path,
        root_cert_path: str | Path,
        passphrase: str,
        *,
        api_url: str = TEST_API_URL,
        timeout: float | None = None,
        max_connections: int = 10,
        metrics_enabled: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client and its TLS transport.

        Args:
            merchant_number: Swish number receiving payments and paying refunds
            cert_path: Path to the PKCS#12 client certificate
            root_cert_path: Path to the DER root certificate
            passphrase: Passphrase of the client certificate
            api_url: Swish API root URL (must be https)
            timeout: Per-request timeout in seconds, None for no timeout
            max_connections: Connection pool size
            metrics_enabled: Record Prometheus metrics for each call
            http_client: Pre-built transport; certificates are not read when given

        Raises:
            SwishConfigurationError: If the URL or certificate material is unusable
        """
        if not merchant_number:
            raise ValueError("merchant_number cannot be empty")

        self.merchant_number = merchant_number
        self.api_url = api_url
        self.metrics_enabled = metrics_enabled
        self.request_builder = RequestBuilder(api_url)
        self.classifier = ResponseClassifier()
        self.location_extractor = ResourceLocationExtractor()

        if http_client is None:
            store = CertificateStore(cert_path, root_cert_path)
            http_client = TlsClientFactory(timeout, max_connections).build(
                store.load_root_certificate(),
                store.load_client_certificate(),
                passphrase,
            )
        self._http_client = http_client

        logger.info(
            "swish_client_initialized",
            merchant_number=merchant_number,
            api_url=self.request_builder.base_url,
        )

    @classmethod
    def from_settings(
        cls,
        settings: SwishSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> "SwishClient":
        """Create a client from SwishSettings."""
        return cls(
            settings.merchant_number,
            settings.cert_path,
            settings.root_cert_path,
            settings.passphrase.get_secret_value(),
            api_url=settings.api_url,
            timeout=settings.request_timeout,
            max_connections=settings.max_connections,
            metrics_enabled=settings.metrics_enabled,
            http_client=http_client,
        )

    async def __aenter__(self) -> "SwishClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close pooled connections."""
        await self._http_client.aclose()

    # ========================================================================
    # Payment Requests
    # ========================================================================

    async def create_payment(self, params: PaymentParams) -> CreatedPayment:
        """
        Create a payment request.

        The payee alias is always the configured merchant number, whatever
        the caller put in params.

        Args:
            params: Payment request parameters

        Returns:
            CreatedPayment with the id taken from the Location header and,
            for m-commerce payments, the request token

        Raises:
            SwishClientError: If Swish rejects the request or the exchange fails
        """
        params = params.model_copy(update={"payee_alias": self.merchant_number})

        logger.info(
            "creating_swish_payment",
            amount=params.amount,
            payee_payment_reference=params.payee_payment_reference,
            has_payer_alias=params.payer_alias is not None,
        )

        request = self.request_builder.build("POST", "paymentrequests", params)
        response = await self._send("create_payment", request)
        resource = self._require_location("create_payment", response)

        payment = CreatedPayment(
            id=resource.resource_id or "",
            location=resource.location or "",
            request_token=resource.request_token,
        )

        logger.info(
            "swish_payment_created",
            payment_id=payment.id,
            has_request_token=payment.request_token is not None,
        )

        return payment

    async def get_payment(self, payment_id: str) -> Payment:
        """
        Fetch the current state of a payment request.

        Args:
            payment_id: Id returned by create_payment

        Returns:
            Payment as currently reported by Swish

        Raises:
            SwishNotFoundError: If Swish does not know the payment
            SwishClientError: For any other failure
        """
        if not payment_id:
            raise ValueError("payment_id cannot be empty")

        request = self.request_builder.build("GET", f"paymentrequests/{quote(payment_id, safe='')}")
        response = await self._send("get_payment", request)
        payment = self._decode("get_payment", Payment, response)

        logger.info("swish_payment_retrieved", payment_id=payment.id, status=payment.status)

        return payment

    # ========================================================================
    # Refunds
    # ========================================================================

    async def create_refund(self, params: RefundParams) -> CreatedRefund:
        """
        Create a refund of an earlier payment.

        The payer alias is always the configured merchant number, whatever
        the caller put in params.

        Args:
            params: Refund parameters

        Returns:
            CreatedRefund with the id taken from the Location header

        Raises:
            SwishClientError: If Swish rejects the request or the exchange fails
        """
        params = params.model_copy(update={"payer_alias": self.merchant_number})

        logger.info(
            "creating_swish_refund",
            amount=params.amount,
            original_payment_reference=params.original_payment_reference,
            payer_payment_reference=params.payer_payment_reference,
        )

        request = self.request_builder.build("POST", "refunds", params)
        response = await self._send("create_refund", request)
        resource = self._require_location("create_refund", response)

        refund = CreatedRefund(id=resource.resource_id or "", location=resource.location or "")

        logger.info("swish_refund_created", refund_id=refund.id)

        return refund

    async def get_refund(self, refund_id: str) -> Refund:
        """
        Fetch the current state of a refund.

        Args:
            refund_id: Id returned by create_refund

        Returns:
            Refund as currently reported by Swish

        Raises:
            SwishNotFoundError: If Swish does not know the refund
            SwishClientError: For any other failure
        """
        if not refund_id:
            raise ValueError("refund_id cannot be empty")

        request = self.request_builder.build("GET", f"refunds/{quote(refund_id, safe='')}")
        response = await self._send("get_refund", request)
        refund = self._decode("get_refund", Refund, response)

        logger.info("swish_refund_retrieved", refund_id=refund.id, status=refund.status)

        return refund

    # ========================================================================
    # Helpers
    # ========================================================================

    async def _send(self, operation: str, request: httpx.Request) -> ProviderResponse:
        """Send a request and classify the response."""
        with track_swish_request(operation, enabled=self.metrics_enabled) as tracker:
            try:
                response = await self._http_client.send(request)
            except httpx.HTTPError as exc:
                logger.error(
                    "swish_transport_failed",
                    operation=operation,
                    url=str(request.url),
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                raise SwishTransportError(str(exc) or type(exc).__name__) from exc

            tracker.set_status_code(response.status_code)

            try:
                return self.classifier.classify(
                    response.status_code, response.headers, response.text
                )
            except SwishClientError as exc:
                logger.warning(
                    "swish_request_rejected",
                    operation=operation,
                    status=response.status_code,
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                raise

    def _require_location(self, operation: str, response: ProviderResponse) -> ResourceLocation:
        resource = self.location_extractor.extract(response.headers)
        if resource.location is None:
            logger.error("swish_location_missing", operation=operation, status=response.status_code)
            if self.metrics_enabled:
                metrics.record_error(SwishParseError.__name__, operation)
            raise SwishParseError("could not find resource location")
        return resource

    def _decode(self, operation: str, model: type[ModelT], response: ProviderResponse) -> ModelT:
        try:
            return model.model_validate_json(response.body)
        except ValidationError as exc:
            logger.error(
                "swish_response_decode_failed",
                operation=operation,
                target=model.__name__,
                status=response.status_code,
                error_count=exc.error_count(),
            )
            if self.metrics_enabled:
                metrics.record_error(SwishDecodeError.__name__, operation)
            raise SwishDecodeError(model.__name__, str(exc)) from exc
