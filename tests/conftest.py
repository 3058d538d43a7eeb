"""
Shared fixtures: XML document builders and fake HTTP transports.
"""

from typing import Callable, Iterator

import httpx
import pytest

from eurofxref.config import Settings
from eurofxref.models import RateDocument
from eurofxref.providers.base import BaseDocumentSource, RateSourceError

ECB_URL = "https://ecb.test/stats/eurofxref/eurofxref-daily.xml"

ENVELOPE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" '
    'xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">'
    "<gesmes:subject>Reference rates</gesmes:subject>"
    "<Cube>{snapshots}</Cube>"
    "</gesmes:Envelope>"
)


def render_document(*snapshots: tuple[str, dict[str, str]]) -> bytes:
    """Render (time, {currency: rate}) pairs into an ECB-style document."""
    parts = []
    for time, rates in snapshots:
        entries = "".join(
            f"<Cube currency='{currency}' rate='{rate}'/>"
            for currency, rate in rates.items()
        )
        parts.append(f"<Cube time='{time}'>{entries}</Cube>")
    return ENVELOPE.format(snapshots="".join(parts)).encode("utf-8")


@pytest.fixture
def build_document() -> Callable[..., bytes]:
    return render_document


@pytest.fixture
def sample_xml() -> bytes:
    """One snapshot: USD 1.0823, JPY 161.45."""
    return render_document(("2024-06-14", {"USD": "1.0823", "JPY": "161.45"}))


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the environment and the bundled fallback."""
    return Settings(
        _env_file=None,
        ecb_daily_url=ECB_URL,
        fallback_enabled=True,
        fallback_path=tmp_path / "eurofxref-daily.xml",
    )


@pytest.fixture
def mock_client() -> Iterator[Callable[..., httpx.Client]]:
    """
    Factory for an httpx.Client backed by MockTransport.

    Pass content/status for a canned response, or exc to raise a transport error.
    """
    clients: list[httpx.Client] = []

    def _make(
        content: bytes = b"",
        status_code: int = 200,
        exc: type[httpx.TransportError] | None = None
    ) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc("simulated failure", request=request)
            return httpx.Response(status_code, content=content)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


class StubSource(BaseDocumentSource):
    """Returns a fixed document or raises a fixed error, counting calls."""

    def __init__(
        self,
        name: str,
        document: RateDocument | None = None,
        error: RateSourceError | None = None
    ):
        self.PROVIDER_NAME = name
        self.document = document
        self.error = error
        self.calls = 0

    def fetch_document(self) -> RateDocument:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.document is not None
        return self.document


@pytest.fixture
def stub_source() -> type[StubSource]:
    return StubSource
