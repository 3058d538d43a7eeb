"""
eurofxref - European Central Bank daily euro reference rates.

Rates are published around 16:00 CET on every TARGET working day, based on the
daily concertation between central banks at 14:15 CET.
"""

from eurofxref.exceptions import (
    MalformedDocument,
    RateSourceError,
    RetrievalFailed,
    SymbolNotFound,
)
from eurofxref.fetcher import RateFetcher
from eurofxref.models import (
    KNOWN_CURRENCIES,
    Currency,
    RateDocument,
    RateEntry,
    RateSnapshot,
    RateTable,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Currency",
    "KNOWN_CURRENCIES",
    "MalformedDocument",
    "RateDocument",
    "RateEntry",
    "RateFetcher",
    "RateSnapshot",
    "RateSourceError",
    "RateTable",
    "RetrievalFailed",
    "SymbolNotFound",
    "fetch_all_rates",
    "fetch_rate",
]


def fetch_rate(symbol: Currency | str) -> float:
    """Rate of one euro in symbol, using the default source chain."""
    return RateFetcher().fetch_rate(symbol)


def fetch_all_rates() -> RateTable:
    """All euro rates of the current snapshot, using the default source chain."""
    return RateFetcher().fetch_all_rates()
