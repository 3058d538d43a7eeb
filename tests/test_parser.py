"""
eurofxref XML Parser Tests
"""

from datetime import date

import pytest

from eurofxref.config import BUNDLED_DOCUMENT_PATH
from eurofxref.exceptions import MalformedDocument
from eurofxref.models import KNOWN_CURRENCIES
from eurofxref.parser import parse_document


class TestParseDocument:
    """Tests for parse_document."""

    def test_parse_namespaced_envelope(self, sample_xml):
        document = parse_document(sample_xml)

        assert len(document.snapshots) == 1
        snapshot = document.current_snapshot()
        assert snapshot.time == date(2024, 6, 14)
        assert [(e.currency, e.rate) for e in snapshot.entries] == [
            ("USD", "1.0823"),
            ("JPY", "161.45"),
        ]

    def test_parse_without_namespace(self):
        content = (
            "<Envelope><Cube><Cube time='2024-01-02'>"
            "<Cube currency='USD' rate='1.10'/>"
            "</Cube></Cube></Envelope>"
        )
        document = parse_document(content)
        assert document.current_snapshot().find("USD").rate == "1.10"

    def test_snapshots_kept_in_document_order(self, build_document):
        content = build_document(
            ("2024-06-14", {"USD": "1.0823"}),
            ("2024-06-13", {"USD": "1.0750"}),
        )
        document = parse_document(content)

        assert [s.time for s in document.snapshots] == [
            date(2024, 6, 14),
            date(2024, 6, 13),
        ]
        assert document.current_snapshot().find("USD").rate == "1.0823"

    def test_unknown_symbols_are_accepted(self, build_document):
        document = parse_document(build_document(("2024-06-14", {"XAU": "2150.5"})))
        assert document.current_snapshot().find("XAU").rate == "2150.5"

    def test_rate_text_not_validated_at_parse_time(self, build_document):
        document = parse_document(build_document(("2024-06-14", {"USD": "abc"})))
        assert document.current_snapshot().find("USD").rate == "abc"

    def test_later_snapshot_with_bad_time_is_tolerated(self, build_document):
        content = build_document(
            ("2024-06-14", {"USD": "1.0823"}),
            ("not-a-date", {"USD": "1.0750"}),
        )
        document = parse_document(content)

        assert document.current_snapshot().time == date(2024, 6, 14)
        assert document.snapshots[1].time is None
        assert document.snapshots[1].find("USD").rate == "1.0750"

    def test_snapshot_without_time(self):
        content = "<Envelope><Cube><Cube><Cube currency='USD' rate='1.1'/></Cube></Cube></Envelope>"
        assert parse_document(content).current_snapshot().time is None

    def test_bundled_document_parses(self):
        document = parse_document(BUNDLED_DOCUMENT_PATH.read_bytes())
        snapshot = document.current_snapshot()

        assert snapshot.time is not None
        symbols = {entry.currency for entry in snapshot.entries}
        assert symbols <= set(KNOWN_CURRENCIES)
        assert "USD" in symbols
        assert len(snapshot.to_table()) == len(snapshot.entries)


class TestParseDocumentErrors:
    """Structural failures raise MalformedDocument."""

    @pytest.mark.parametrize(
        "content",
        [
            b"",
            b"not xml at all",
            b"<html><body>Service Unavailable</body>",
        ],
    )
    def test_not_well_formed(self, content):
        with pytest.raises(MalformedDocument, match="XML parse error"):
            parse_document(content)

    def test_missing_outer_cube(self):
        with pytest.raises(MalformedDocument, match="no outer Cube"):
            parse_document(b"<html><body>Maintenance</body></html>")

    @pytest.mark.parametrize(
        "entry",
        ["<Cube rate='1.1'/>", "<Cube currency='USD'/>", "<Cube currency='' rate='1.1'/>"],
    )
    def test_entry_missing_attribute(self, entry):
        content = f"<Envelope><Cube><Cube time='2024-06-14'>{entry}</Cube></Cube></Envelope>"
        with pytest.raises(MalformedDocument, match="missing the currency or rate"):
            parse_document(content)

    def test_empty_outer_cube(self, build_document):
        with pytest.raises(MalformedDocument, match="no rate snapshots"):
            parse_document(build_document())

    def test_invalid_snapshot_time(self):
        content = "<Envelope><Cube><Cube time='yesterday'/></Cube></Envelope>"
        with pytest.raises(MalformedDocument, match="Invalid snapshot time"):
            parse_document(content)
