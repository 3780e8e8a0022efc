"""
Certificate Store - Reads TLS material from disk.
"""

from pathlib import Path

from structlog import get_logger

from swish_api.exceptions import CertificateReadError

logger = get_logger(__name__)


class CertificateStore:
    """Loads the client (PKCS#12) and root (DER) certificate bytes."""

    def __init__(self, cert_path: str | Path, root_cert_path: str | Path) -> None:
        self.cert_path = Path(cert_path)
        self.root_cert_path = Path(root_cert_path)

    @staticmethod
    def read(path: str | Path) -> bytes:
        """
        Read a whole certificate file.

        Raises:
            CertificateReadError: If the file is missing, unreadable or empty
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.error("swish_certificate_read_failed", path=str(path), error=str(exc))
            raise CertificateReadError(str(path), exc.strerror or str(exc)) from exc

        if not data:
            logger.error("swish_certificate_empty", path=str(path))
            raise CertificateReadError(str(path), "file is empty")

        return data

    def load_client_certificate(self) -> bytes:
        """Read the PKCS#12 client certificate bundle."""
        return self.read(self.cert_path)

    def load_root_certificate(self) -> bytes:
        """Read the DER encoded root certificate."""
        return self.read(self.root_cert_path)
