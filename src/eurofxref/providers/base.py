"""
Base Document Source Interface

Every source yields a parsed RateDocument or raises a RateSourceError subclass.
"""

from abc import ABC, abstractmethod

from eurofxref.exceptions import (
    MalformedDocument,
    RateSourceError,
    RetrievalFailed,
    SymbolNotFound,
)
from eurofxref.models import RateDocument


class BaseDocumentSource(ABC):
    """
    Abstract base class for reference rate document sources.

    Sources hold no state between calls: each fetch_document() retrieves
    and parses the document again.
    """

    PROVIDER_NAME: str = "base"

    @abstractmethod
    def fetch_document(self) -> RateDocument:
        """
        Retrieve and parse the daily reference rate document.

        Returns:
            RateDocument with the snapshots in document order

        Raises:
            RetrievalFailed: If the raw bytes cannot be obtained
            MalformedDocument: If the bytes do not parse into the Cube schema
        """
        pass


__all__ = [
    "BaseDocumentSource",
    "MalformedDocument",
    "RateSourceError",
    "RetrievalFailed",
    "SymbolNotFound",
]
