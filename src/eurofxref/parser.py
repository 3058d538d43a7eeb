"""
eurofxref XML Parser

Turns the raw bytes of an ECB daily reference rate document into a RateDocument.
"""

import logging
import xml.etree.ElementTree as ET
from datetime import date

from eurofxref.exceptions import MalformedDocument
from eurofxref.models import RateDocument, RateEntry, RateSnapshot

logger = logging.getLogger(__name__)

# ECB wraps the Cubes in a gesmes envelope with a default namespace, so tags
# are matched by local name only.
CUBE = "Cube"


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def _cubes(element: ET.Element) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == CUBE]


def _parse_time(value: str | None, strict: bool = True) -> date | None:
    if value is None:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        if not strict:
            return None
        raise MalformedDocument(
            message=f"Invalid snapshot time {value!r}",
            details={"time": value}
        ) from e


def _parse_entry(element: ET.Element) -> RateEntry:
    currency = element.get("currency")
    rate = element.get("rate")
    if not currency or rate is None:
        raise MalformedDocument(
            message="Rate entry is missing the currency or rate attribute",
            details={"attributes": dict(element.attrib)}
        )
    return RateEntry(currency=currency, rate=rate)


def parse_document(content: bytes | str) -> RateDocument:
    """
    Parse an eurofxref XML document.

    Only structure is checked here; rate strings are validated when a query
    converts them. Only the first snapshot must carry a valid time; later
    ones get None when theirs is invalid.

    Args:
        content: Raw XML as bytes (preferred, keeps the declared encoding) or str

    Returns:
        RateDocument with snapshots in document order

    Raises:
        MalformedDocument: If the XML is not well-formed, has no outer Cube,
            has no snapshots, or holds entries without currency/rate attributes
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise MalformedDocument(message=f"XML parse error: {e}") from e

    outer = _cubes(root)
    if not outer:
        raise MalformedDocument(
            message="Document has no outer Cube element",
            details={"root": _local_name(root.tag)}
        )

    dated = _cubes(outer[0])
    if not dated:
        raise MalformedDocument(
            message="Document contains no rate snapshots",
            details={"snapshots": 0}
        )

    snapshots = tuple(
        RateSnapshot(
            time=_parse_time(snapshot.get("time"), strict=idx == 0),
            entries=tuple(_parse_entry(entry) for entry in _cubes(snapshot)),
        )
        for idx, snapshot in enumerate(dated)
    )

    logger.debug(
        f"Parsed eurofxref document: {len(snapshots)} snapshot(s), "
        f"{len(snapshots[0].entries)} entries in the first"
    )
    return RateDocument(snapshots=snapshots)
