"""
Source Chain with Fallback Hierarchy

Default order: ECB network endpoint → local fallback file.
Each source is tried once; the first document obtained wins.
"""

import logging
import time
from typing import Sequence

from eurofxref.config import Settings, get_settings
from eurofxref.models import RateDocument
from eurofxref.providers.base import BaseDocumentSource, RateSourceError
from eurofxref.providers.bundled import BundledFileSource
from eurofxref.providers.ecb import ECBDailyClient

logger = logging.getLogger(__name__)


def default_sources(settings: Settings | None = None) -> list[BaseDocumentSource]:
    """Build the source list described by settings."""
    settings = settings or get_settings()
    sources: list[BaseDocumentSource] = [ECBDailyClient(settings=settings)]
    if settings.fallback_enabled:
        sources.append(BundledFileSource(settings=settings))
    return sources


class SourceChain:
    """
    Ordered fallback over document sources.

    This is not a retry loop: every source gets exactly one attempt and the
    chain stops at the first success.
    """

    def __init__(self, sources: Sequence[BaseDocumentSource]):
        if not sources:
            raise ValueError("SourceChain needs at least one source")
        self.sources = list(sources)

    def fetch_document(self) -> tuple[RateDocument, str]:
        """
        Attempt sources in order.

        Returns:
            Tuple of (document, provider_name_used)

        Raises:
            RateSourceError: The last source's error when every source fails,
                so the kind (RetrievalFailed or MalformedDocument) reflects
                the final attempt
        """
        errors: list[RateSourceError] = []

        for idx, source in enumerate(self.sources, start=1):
            name = source.PROVIDER_NAME
            start_time = time.time()

            try:
                logger.info(f"Attempting {name} (attempt {idx}/{len(self.sources)})")
                document = source.fetch_document()

                latency_ms = int((time.time() - start_time) * 1000)
                logger.info(f"✅ {name} success ({latency_ms}ms)")
                return document, name

            except RateSourceError as e:
                latency_ms = int((time.time() - start_time) * 1000)
                errors.append(e)
                logger.warning(f"❌ {name} failed after {latency_ms}ms [{e.error_type}]: {e}")

                if idx == len(self.sources):
                    logger.error(
                        f"All sources failed: "
                        f"{[(err.provider, err.error_type) for err in errors]}"
                    )
                    raise

        # Should not reach here
        raise RuntimeError("No sources available")
