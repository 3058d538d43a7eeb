"""
eurofxref Error Taxonomy

RetrievalFailed    - no document bytes could be obtained
MalformedDocument  - bytes do not match the Cube schema, or a rate is not a decimal
SymbolNotFound     - requested currency absent from the current snapshot
"""

from typing import Any


class RateSourceError(Exception):
    """Base exception for rate retrieval and lookup errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.provider = provider
        self.error_type = error_type
        self.details = details or {}


class RetrievalFailed(RateSourceError):
    """Transport-level failure."""

    def __init__(
        self,
        message: str,
        provider: str,
        error_type: str = "RETRIEVAL_FAILED",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, provider, error_type, details)


class MalformedDocument(RateSourceError):
    """Payload does not match the eurofxref Cube schema."""

    def __init__(
        self,
        message: str,
        provider: str = "parser",
        error_type: str = "PARSE_ERROR",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, provider, error_type, details)


class SymbolNotFound(RateSourceError):
    def __init__(self, symbol: str, provider: str = "fetcher"):
        super().__init__(
            message=f"symbol {symbol} not found",
            provider=provider,
            error_type="SYMBOL_NOT_FOUND",
            details={"symbol": symbol}
        )
        self.symbol = symbol
