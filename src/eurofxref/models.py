"""
eurofxref Data Models

The ECB daily document nests three levels of Cube elements:

    <Cube>                                   outer wrapper
      <Cube time="2024-06-14">               one snapshot per publication date
        <Cube currency="USD" rate="1.0823"/> one entry per currency
      </Cube>
    </Cube>

Rates are quoted as units of the currency per one euro. Entry rates are kept as
the published decimal text and only converted when a query asks for them.
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from eurofxref.exceptions import MalformedDocument


# === Enums ===

class Currency(str, Enum):
    """
    Currencies the ECB has quoted in its daily reference rates.

    Lookups accept any string; a document may carry symbols missing here.
    """
    USD = "USD"
    JPY = "JPY"
    BGN = "BGN"
    CZK = "CZK"
    DKK = "DKK"
    GBP = "GBP"
    HUF = "HUF"
    PLN = "PLN"
    RON = "RON"
    SEK = "SEK"
    CHF = "CHF"
    ISK = "ISK"
    NOK = "NOK"
    HRK = "HRK"
    RUB = "RUB"
    TRY = "TRY"
    AUD = "AUD"
    BRL = "BRL"
    CAD = "CAD"
    CNY = "CNY"
    HKD = "HKD"
    IDR = "IDR"
    ILS = "ILS"
    INR = "INR"
    KRW = "KRW"
    MXN = "MXN"
    MYR = "MYR"
    NZD = "NZD"
    PHP = "PHP"
    SGD = "SGD"
    THB = "THB"
    ZAR = "ZAR"


KNOWN_CURRENCIES: tuple[str, ...] = tuple(c.value for c in Currency)

_DECIMAL_TEXT = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

# Read-only view; recomputed per query, never cached.
RateTable = Mapping[str, float]


def to_decimal_rate(text: str, currency: str | None = None) -> Decimal:
    """
    Parse a published rate string into an exact Decimal.

    Raises:
        MalformedDocument: If the text is not a finite, non-negative decimal
    """
    # Decimal() also takes "1_000" and padded text; published rates never do
    if not isinstance(text, str) or not _DECIMAL_TEXT.fullmatch(text):
        raise MalformedDocument(
            message=f"Invalid decimal rate {text!r} for {currency}",
            details={"currency": currency, "rate": text}
        )
    try:
        value = Decimal(text)
    except InvalidOperation as e:
        raise MalformedDocument(
            message=f"Invalid decimal rate {text!r} for {currency}",
            details={"currency": currency, "rate": text}
        ) from e

    if not value.is_finite() or value < 0:
        raise MalformedDocument(
            message=f"Rate {text!r} for {currency} is not a non-negative finite decimal",
            details={"currency": currency, "rate": text}
        )
    return value


def to_float_rate(text: str, currency: str | None = None) -> float:
    """
    Convert a published rate string to float through Decimal.

    The text is never handed to float() directly; the Decimal intermediate
    is exact, so the result is the correctly rounded nearest double and the
    same text always yields the same bits.
    """
    return float(to_decimal_rate(text, currency))


# === Document Structure ===

class RateEntry(BaseModel):
    """One currency/rate pair within a snapshot."""
    model_config = ConfigDict(frozen=True)

    currency: str = Field(min_length=1, description="Currency symbol, e.g. USD")
    rate: str = Field(description="Units of currency per 1 EUR, as published")

    def to_float(self) -> float:
        return to_float_rate(self.rate, self.currency)


class RateSnapshot(BaseModel):
    """All rates published for a single date."""
    model_config = ConfigDict(frozen=True)

    time: date | None = Field(default=None, description="Publication date")
    entries: tuple[RateEntry, ...] = Field(default_factory=tuple)

    def find(self, symbol: str) -> RateEntry | None:
        """Return the first entry whose currency equals symbol (case-sensitive)."""
        for entry in self.entries:
            if entry.currency == symbol:
                return entry
        return None

    def to_table(self) -> RateTable:
        """
        Convert every entry to float.

        All-or-nothing: the first bad rate raises MalformedDocument and no
        table is returned.
        """
        rates: dict[str, float] = {}
        for entry in self.entries:
            # first occurrence wins, matching find()
            rates.setdefault(entry.currency, entry.to_float())
        return MappingProxyType(rates)


class RateDocument(BaseModel):
    """A parsed eurofxref publication."""
    model_config = ConfigDict(frozen=True)

    snapshots: tuple[RateSnapshot, ...] = Field(default_factory=tuple)

    def current_snapshot(self) -> RateSnapshot:
        """
        Return the first snapshot in document order.

        Raises:
            MalformedDocument: If the document holds no snapshots
        """
        if not self.snapshots:
            raise MalformedDocument(
                message="Document contains no rate snapshots",
                details={"snapshots": 0}
            )
        return self.snapshots[0]
