"""
TLS Client Factory - Builds the mutual-TLS HTTP transport for Swish.

Swish authenticates merchants by client certificate: every connection must
present the PKCS#12 identity issued to the merchant, and the server is
verified against the pinned Swish root certificate only.
"""

import os
import ssl
import tempfile

import httpx
from cryptography import x509
from cryptography.hazmat.primitives.serialization import (
    BestAvailableEncryption,
    Encoding,
    KeySerializationEncryption,
    NoEncryption,
    PrivateFormat,
    pkcs12,
)
from structlog import get_logger

from swish_api.exceptions import CertificateError

logger = get_logger(__name__)


class TlsClientFactory:
    """Combines certificate material and passphrase into a pooled AsyncClient."""

    def __init__(self, timeout: float | None = None, max_connections: int = 10) -> None:
        """
        Initialize the factory.

        Args:
            timeout: Seconds before connect/read/write/pool timeouts, None to disable
            max_connections: Size of the connection pool
        """
        self.timeout = timeout
        self.max_connections = max_connections

    def build(
        self,
        root_cert_bytes: bytes,
        client_cert_bytes: bytes,
        passphrase: str,
    ) -> httpx.AsyncClient:
        """
        Build an AsyncClient presenting the client identity on every connection.

        Args:
            root_cert_bytes: DER encoded root certificate to trust
            client_cert_bytes: PKCS#12 bundle with the merchant key and certificate
            passphrase: Passphrase protecting the PKCS#12 bundle

        Returns:
            Configured httpx.AsyncClient

        Raises:
            CertificateError: If any certificate material cannot be used
        """
        ssl_context = self.build_ssl_context(root_cert_bytes, client_cert_bytes, passphrase)

        return httpx.AsyncClient(
            verify=ssl_context,
            timeout=httpx.Timeout(self.timeout),
            limits=httpx.Limits(max_connections=self.max_connections),
            follow_redirects=False,
        )

    def build_ssl_context(
        self,
        root_cert_bytes: bytes,
        client_cert_bytes: bytes,
        passphrase: str,
    ) -> ssl.SSLContext:
        """Build the SSL context; see build() for arguments."""
        try:
            root_cert = x509.load_der_x509_certificate(root_cert_bytes)
        except ValueError as exc:
            raise CertificateError(f"root certificate is not valid DER: {exc}") from exc

        password = passphrase.encode("utf-8") if passphrase else None
        try:
            private_key, certificate, additional_certs = pkcs12.load_key_and_certificates(
                client_cert_bytes, password
            )
        except (ValueError, TypeError) as exc:
            raise CertificateError(
                f"client certificate could not be decrypted (wrong passphrase or bad PKCS#12): {exc}"
            ) from exc

        if private_key is None or certificate is None:
            raise CertificateError("client certificate bundle has no private key or certificate")

        ssl_context = ssl.create_default_context(
            ssl.Purpose.SERVER_AUTH,
            cadata=root_cert.public_bytes(Encoding.DER),
        )
        ssl_context.minimum_version = ssl.TLSVersion.TLSv1_2

        # ssl can only load an identity from a file; the key stays encrypted on disk
        encryption: KeySerializationEncryption = (
            BestAvailableEncryption(password) if password else NoEncryption()
        )
        identity_pem = b"".join(
            [
                certificate.public_bytes(Encoding.PEM),
                *(cert.public_bytes(Encoding.PEM) for cert in additional_certs),
                private_key.private_bytes(Encoding.PEM, PrivateFormat.PKCS8, encryption),
            ]
        )
        with tempfile.NamedTemporaryFile(suffix=".pem", delete=False) as handle:
            handle.write(identity_pem)
            identity_path = handle.name
        try:
            ssl_context.load_cert_chain(identity_path, password=password)
        except ssl.SSLError as exc:
            raise CertificateError(f"client identity rejected by TLS: {exc}") from exc
        finally:
            os.unlink(identity_path)

        logger.info(
            "swish_tls_context_built",
            client_subject=certificate.subject.rfc4514_string(),
            client_not_after=certificate.not_valid_after_utc.isoformat(),
            root_subject=root_cert.subject.rfc4514_string(),
            chain_length=len(additional_certs),
        )

        return ssl_context
