"""
Request Builder - Turns a logical Swish operation into an httpx.Request.
"""

import httpx

from swish_api.exceptions import SwishUriError
from swish_api.models.api import SwishModel


class RequestBuilder:
    """Builds fully-qualified requests against the Swish API base URL."""

    def __init__(self, base_url: str) -> None:
        """
        Initialize request builder.

        Args:
            base_url: Swish API root, e.g. https://cpc.getswish.net/swish-cpcapi/api/v1/

        Raises:
            SwishUriError: If the base URL does not use https
        """
        if not base_url.startswith("https://"):
            raise SwishUriError(base_url, "Swish only accepts https")
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"

    def url_for(self, relative_path: str) -> httpx.URL:
        """Resolve a path relative to the base URL."""
        url_text = f"{self.base_url}{relative_path}"
        try:
            url = httpx.URL(url_text)
        except httpx.InvalidURL as exc:
            raise SwishUriError(url_text, str(exc)) from exc

        if url.scheme != "https" or not url.host:
            raise SwishUriError(url_text, "not an absolute https URL")
        return url

    def build(
        self,
        method: str,
        relative_path: str,
        body: SwishModel | None = None,
    ) -> httpx.Request:
        """
        Build a request.

        Args:
            method: HTTP method
            relative_path: Path below the base URL, e.g. "paymentrequests"
            body: Optional model sent as JSON; None fields are left out

        Returns:
            Request ready to be sent by the mutual-TLS client

        Raises:
            SwishUriError: If the resulting URL is invalid
        """
        url = self.url_for(relative_path)
        headers = {"Accept": "application/json"}
        content: bytes | None = None

        if body is not None:
            content = body.to_json().encode("utf-8")
            headers["Content-Type"] = "application/json"

        return httpx.Request(method, url, headers=headers, content=content)
