"""
European Central Bank Daily Reference Rates Client (Primary Source)

Document: https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml
Published around 16:00 CET on every TARGET working day.
"""

import logging
from typing import Any

import httpx

from eurofxref.config import Settings, get_settings
from eurofxref.models import RateDocument
from eurofxref.parser import parse_document
from eurofxref.providers.base import (
    BaseDocumentSource,
    MalformedDocument,
    RetrievalFailed,
)

logger = logging.getLogger(__name__)


class ECBDailyClient(BaseDocumentSource):
    """
    Single GET of the ECB daily document.

    No retries and no streaming. An httpx.Client passed in by the caller is
    used as-is and left open; otherwise a client is created per call and
    closed before returning.
    """

    PROVIDER_NAME = "ecb"

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None
    ):
        self.settings = settings or get_settings()
        self.url = self.settings.ecb_daily_url
        self._client = client

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "headers": {"User-Agent": self.settings.user_agent},
            "follow_redirects": True,
        }
        # httpx treats timeout=None as "no timeout", so only pass an explicit value
        if self.settings.http_timeout_seconds is not None:
            kwargs["timeout"] = self.settings.http_timeout_seconds
        return kwargs

    def _get(self, client: httpx.Client) -> bytes:
        response = client.get(self.url)
        response.raise_for_status()
        return response.content

    def fetch_content(self) -> bytes:
        """
        Download the raw document bytes.

        Raises:
            RetrievalFailed: On transport errors or a non-2xx status
        """
        try:
            if self._client is not None:
                return self._get(self._client)
            with httpx.Client(**self._client_kwargs()) as client:
                return self._get(client)

        except httpx.HTTPStatusError as e:
            raise RetrievalFailed(
                message=f"HTTP error: {e.response.status_code}",
                provider=self.PROVIDER_NAME,
                error_type=f"HTTP_{e.response.status_code}",
                details={"url": str(e.request.url)}
            ) from e

        except httpx.TimeoutException as e:
            raise RetrievalFailed(
                message="Request timeout",
                provider=self.PROVIDER_NAME,
                error_type="TIMEOUT",
                details={"url": self.url}
            ) from e

        except httpx.HTTPError as e:
            raise RetrievalFailed(
                message=f"Transport error: {e}",
                provider=self.PROVIDER_NAME,
                details={"url": self.url}
            ) from e

    def fetch_document(self) -> RateDocument:
        content = self.fetch_content()
        try:
            document = parse_document(content)
        except MalformedDocument as e:
            raise MalformedDocument(
                message=f"Unintelligible ECB response: {e}",
                provider=self.PROVIDER_NAME,
                details={"url": self.url, **e.details}
            ) from e

        logger.info(
            f"ECB fetched {len(document.snapshots)} snapshot(s) from {self.url}"
        )
        return document
