"""
Generic content fetcher shared by every extractor.

Performs one GET per call and reports the declared content type together
with the body: parsed JSON for JSON responses, raw bytes otherwise.
"""

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger
from requests.exceptions import RequestException

from ..exceptions import MalformedDocument, TransportFailure
from ..settings import Settings
from .request_manager import ExternalRequestManager

JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class FetchResponse:
    """Result of a single GET."""
    content_type: str
    body: Any

    @property
    def is_json(self) -> bool:
        return media_type(self.content_type) == JSON_MEDIA_TYPE


def media_type(content_type: Optional[str]) -> str:
    """Strip parameters from a Content-Type header: ``application/json; charset=utf-8`` -> ``application/json``."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


class ContentFetcher:
    """Fetches metadata documents and media over HTTP."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        request_manager: Optional[ExternalRequestManager] = None,
    ):
        self.settings = settings or Settings()
        self.request_manager = request_manager or ExternalRequestManager(self.settings)

    def get(self, url: str) -> FetchResponse:
        """
        GET ``url``.

        Raises:
            TransportFailure: on any connection, timeout or HTTP status error
            MalformedDocument: when a JSON content type carries an unparsable body
        """
        try:
            response = self.request_manager.get(url)
        except RequestException as e:
            raise TransportFailure(f"GET {url} failed: {e}") from e

        content_type = response.headers.get("content-type", "")
        if media_type(content_type) != JSON_MEDIA_TYPE:
            logger.debug(f"Fetched {len(response.content)} bytes of '{content_type}' from {url}")
            return FetchResponse(content_type=content_type, body=response.content)

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedDocument(f"Invalid JSON at {url}: {e}") from e
        return FetchResponse(content_type=content_type, body=body)

    __call__ = get
