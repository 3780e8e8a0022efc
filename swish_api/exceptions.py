"""
Exception Classes - Strongly typed exception hierarchy.

Every failure surfaced by the client is a SwishClientError. Provider
rejections carry RequestError values so callers can branch on HTTP status
and provider error code.
"""

from swish_api.models.domain import RequestError


class SwishClientError(Exception):
    """Base exception for all Swish client errors."""

    pass


class SwishConfigurationError(SwishClientError):
    """Raised when certificates, passphrase or base URL are unusable."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Configuration error: {message}")


class CertificateReadError(SwishConfigurationError):
    """Raised when a certificate file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"could not read certificate {path}: {reason}")


class CertificateError(SwishConfigurationError):
    """Raised when certificate material cannot be parsed."""

    pass


class SwishUriError(SwishConfigurationError):
    """Raised when a request URL is malformed or not https."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"invalid URL {url!r}: {reason}")


class SwishTransportError(SwishClientError):
    """Raised when the HTTP exchange itself fails (connect, TLS, IO)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Transport error: {message}")


class SwishRequestError(SwishClientError):
    """Raised when Swish rejects a request with a single error."""

    def __init__(self, error: RequestError) -> None:
        self.error = error
        super().__init__(str(error))

    @property
    def http_status(self) -> int:
        return self.error.http_status


class SwishNotFoundError(SwishRequestError):
    """Raised when Swish answers 404 Not Found."""

    pass


class SwishErrorCollection(SwishClientError):
    """Raised when Swish rejects a request with an array of errors.

    The collection may be empty when no element of the array could be decoded.
    """

    def __init__(self, http_status: int, errors: list[RequestError]) -> None:
        self.http_status = http_status
        self.errors = errors
        details = ", ".join(str(error) for error in errors)
        super().__init__(f"Swish returned {len(errors)} error(s) [{http_status}]: {details}")


class SwishDecodeError(SwishClientError):
    """Raised when a successful response body cannot be decoded."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Could not decode {target}: {reason}")


class SwishParseError(SwishClientError):
    """Raised when a successful response lacks data the client needs."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Parse error: {message}")
