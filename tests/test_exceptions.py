"""
Tests for exception classes.

Covers the hierarchy callers branch on and the string representations.
"""

import pytest

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
from swish_api.models.api import ErrorCode
from swish_api.models.domain import RequestError


class TestHierarchy:
    """Every error is a SwishClientError, grouped by taxonomy."""

    @pytest.mark.parametrize(
        "exc_type",
        [
            SwishConfigurationError,
            CertificateReadError,
            CertificateError,
            SwishUriError,
            SwishTransportError,
            SwishRequestError,
            SwishNotFoundError,
            SwishErrorCollection,
            SwishDecodeError,
            SwishParseError,
        ],
    )
    def test_is_swish_client_error(self, exc_type):
        assert issubclass(exc_type, SwishClientError)

    @pytest.mark.parametrize("exc_type", [CertificateReadError, CertificateError, SwishUriError])
    def test_configuration_errors(self, exc_type):
        assert issubclass(exc_type, SwishConfigurationError)

    def test_not_found_is_request_error(self):
        assert issubclass(SwishNotFoundError, SwishRequestError)

    def test_collection_is_not_request_error(self):
        """Single and multiple provider errors are distinct branches."""
        assert not issubclass(SwishErrorCollection, SwishRequestError)


class TestSwishRequestError:
    """Tests for SwishRequestError."""

    def test_attributes(self):
        error = RequestError(http_status=422, code=ErrorCode.PA02, message="Amount value is missing")
        exc = SwishRequestError(error)

        assert exc.error is error
        assert exc.http_status == 422
        assert str(exc) == "[422] PA02: Amount value is missing"


class TestSwishErrorCollection:
    """Tests for SwishErrorCollection."""

    def test_message_lists_errors(self):
        errors = [
            RequestError(http_status=422, code=ErrorCode.RP01, message="a"),
            RequestError(http_status=422, code=ErrorCode.RP02, message="b"),
        ]
        exc = SwishErrorCollection(422, errors)

        assert exc.errors == errors
        assert "2 error(s)" in str(exc)
        assert "RP01: a" in str(exc)
        assert "RP02: b" in str(exc)

    def test_empty_collection(self):
        exc = SwishErrorCollection(422, [])

        assert exc.errors == []
        assert "0 error(s)" in str(exc)


class TestOtherErrors:
    """Message formats of the remaining errors."""

    def test_certificate_read_error(self):
        exc = CertificateReadError("/certs/test_cert.p12", "No such file or directory")

        assert exc.path == "/certs/test_cert.p12"
        assert "Configuration error" in str(exc)
        assert "/certs/test_cert.p12" in str(exc)

    def test_uri_error(self):
        exc = SwishUriError("http://x", "Swish only accepts https")

        assert exc.url == "http://x"
        assert "https" in str(exc)

    def test_transport_error(self):
        assert str(SwishTransportError("timed out")) == "Transport error: timed out"

    def test_decode_error(self):
        exc = SwishDecodeError("Payment", "field required")

        assert exc.target == "Payment"
        assert "Could not decode Payment" in str(exc)

    def test_parse_error(self):
        exc = SwishParseError("could not find resource location")

        assert exc.message == "could not find resource location"
        assert "could not find resource location" in str(exc)
