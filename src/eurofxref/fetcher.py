"""
Euro Reference Rate Fetcher

Answers "rate of the euro in currency X" and "all euro rates" from the current
ECB publication. Nothing is cached: every query retrieves and parses the
document again, so concurrent callers share no state.
"""

import logging
from typing import Sequence

from eurofxref.config import Settings, get_settings
from eurofxref.exceptions import SymbolNotFound
from eurofxref.models import Currency, RateSnapshot, RateTable
from eurofxref.providers.base import BaseDocumentSource
from eurofxref.providers.manager import SourceChain, default_sources

logger = logging.getLogger(__name__)


class RateFetcher:
    """
    Query surface over a SourceChain.

    Usage:
        fetcher = RateFetcher()
        usd = fetcher.fetch_rate(Currency.USD)   # e.g. 1.0823
        table = fetcher.fetch_all_rates()        # {"USD": 1.0823, "JPY": 161.45, ...}
    """

    def __init__(
        self,
        sources: Sequence[BaseDocumentSource] | None = None,
        settings: Settings | None = None
    ):
        self.settings = settings or get_settings()
        if sources is None:
            sources = default_sources(self.settings)
        self.chain = SourceChain(sources)

    def fetch_snapshot(self) -> RateSnapshot:
        """
        Return the first snapshot of the current document.

        Raises:
            RetrievalFailed: If no source produced bytes
            MalformedDocument: If the final document is unparseable or empty
        """
        document, provider = self.chain.fetch_document()
        snapshot = document.current_snapshot()
        logger.debug(f"Using {provider} snapshot dated {snapshot.time}")
        return snapshot

    def fetch_rate(self, symbol: Currency | str) -> float:
        """
        Rate of one euro in the given currency.

        Args:
            symbol: Currency member or any non-empty symbol string (case-sensitive)

        Returns:
            The published rate, converted through Decimal to float

        Raises:
            ValueError: If symbol is empty
            RetrievalFailed / MalformedDocument: See fetch_snapshot
            SymbolNotFound: If the current snapshot has no entry for symbol
        """
        if isinstance(symbol, Currency):
            symbol = symbol.value
        if not symbol:
            raise ValueError("symbol must be a non-empty string")

        entry = self.fetch_snapshot().find(symbol)
        if entry is None:
            raise SymbolNotFound(symbol)
        return entry.to_float()

    def fetch_all_rates(self) -> RateTable:
        """
        All rates of the current snapshot as a read-only mapping.

        Any unparseable rate fails the whole call with MalformedDocument.
        """
        table = self.fetch_snapshot().to_table()
        logger.info(f"Fetched {len(table)} euro reference rates")
        return table
