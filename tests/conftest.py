"""
Pytest Configuration and Centralized Fixtures.

Provides reusable fixtures for testing:
- Generated certificate material (DER root, PKCS#12 client bundle)
- SwishClient instances backed by httpx.MockTransport
- Canned Swish payment and refund response bodies
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import httpx
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import (
    BestAvailableEncryption,
    Encoding,
    NoEncryption,
    pkcs12,
)
from cryptography.x509.oid import NameOID

from swish_api.client import SwishClient

MERCHANT_NUMBER = "1231181189"
PASSPHRASE = "swish"
API_URL = "https://mss.cpc.getswish.net/swish-cpcapi/api/v1/"
PAYMENT_ID = "AB23D7406ECE4542A80152D909EF9F6B"
REFUND_ID = "ABC2D7406ECE4542A80152D909EF9F6B"
REQUEST_TOKEN = "c28a4061470f4af48973bd2a4642b4fa"

Handler = Callable[[httpx.Request], httpx.Response]


# ============================================================================
# Certificate Fixtures
# ============================================================================


def make_certificate(common_name: str, key: ec.EllipticCurvePrivateKey, ca: bool) -> x509.Certificate:
    """Create a self-signed certificate for tests."""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(UTC)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )


@dataclass(frozen=True)
class TlsMaterial:
    """Certificate files written to a temporary directory."""

    root_cert_path: Path
    cert_path: Path
    unencrypted_cert_path: Path
    root_cert_bytes: bytes
    client_cert_bytes: bytes
    passphrase: str


@pytest.fixture(scope="session")
def tls_material(tmp_path_factory: pytest.TempPathFactory) -> TlsMaterial:
    """Root certificate (DER) and merchant client certificate (PKCS#12)."""
    directory = tmp_path_factory.mktemp("certs")

    root_key = ec.generate_private_key(ec.SECP256R1())
    root_cert = make_certificate("Swish Root CA Test", root_key, ca=True)
    client_key = ec.generate_private_key(ec.SECP256R1())
    client_cert = make_certificate(MERCHANT_NUMBER, client_key, ca=False)

    root_bytes = root_cert.public_bytes(Encoding.DER)
    client_bytes = pkcs12.serialize_key_and_certificates(
        MERCHANT_NUMBER.encode(),
        client_key,
        client_cert,
        None,
        BestAvailableEncryption(PASSPHRASE.encode()),
    )
    unencrypted_bytes = pkcs12.serialize_key_and_certificates(
        MERCHANT_NUMBER.encode(), client_key, client_cert, None, NoEncryption()
    )

    root_path = directory / "root_cert.der"
    root_path.write_bytes(root_bytes)
    cert_path = directory / "test_cert.p12"
    cert_path.write_bytes(client_bytes)
    unencrypted_path = directory / "test_cert_nopass.p12"
    unencrypted_path.write_bytes(unencrypted_bytes)

    return TlsMaterial(
        root_cert_path=root_path,
        cert_path=cert_path,
        unencrypted_cert_path=unencrypted_path,
        root_cert_bytes=root_bytes,
        client_cert_bytes=client_bytes,
        passphrase=PASSPHRASE,
    )


# ============================================================================
# Client Fixtures
# ============================================================================


def build_client(handler: Handler, **kwargs: Any) -> SwishClient:
    """SwishClient whose transport answers with handler."""
    return SwishClient(
        MERCHANT_NUMBER,
        "unused.p12",
        "unused.der",
        PASSPHRASE,
        api_url=kwargs.pop("api_url", API_URL),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        **kwargs,
    )


@pytest.fixture
def client_factory() -> Callable[[Handler], SwishClient]:
    """Factory for clients backed by a MockTransport handler."""
    return build_client


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests captured by handlers in a test."""
    return []


# ============================================================================
# Response Body Fixtures
# ============================================================================


@pytest.fixture
def payment_body() -> dict[str, Any]:
    """Body of GET /paymentrequests/{id} for a created payment."""
    return {
        "id": PAYMENT_ID,
        "payeePaymentReference": "0123456789",
        "paymentReference": "6D6CD7406ECE4542A80152D909EF9F6B",
        "callbackUrl": "https://example.com/api/swishcb/paymentrequests",
        "payerAlias": "4671234768",
        "payeeAlias": MERCHANT_NUMBER,
        "amount": 100.0,
        "currency": "SEK",
        "message": "Kingston USB Flash Drive 8 GB",
        "status": "CREATED",
        "dateCreated": "2019-01-02T14:29:51.092Z",
        "datePaid": None,
        "errorCode": None,
        "errorMessage": None,
    }


@pytest.fixture
def refund_body() -> dict[str, Any]:
    """Body of GET /refunds/{id} for an initiated refund."""
    return {
        "id": REFUND_ID,
        "payerPaymentReference": "0123456789",
        "originalpaymentReference": "6D6CD7406ECE4542A80152D909EF9F6B",
        "callbackUrl": "https://example.com/api/swishcb/refunds",
        "payerAlias": MERCHANT_NUMBER,
        "payeeAlias": None,
        "amount": 100.0,
        "currency": "SEK",
        "message": "Refund for Kingston USB Flash Drive 8 GB",
        "status": "INITIATED",
        "dateCreated": "2019-01-02T14:29:51.092Z",
        "datePaid": None,
        "errorCode": None,
        "errorMessage": None,
        "additionalInformation": None,
    }
