# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Report Text Formatting

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- voluntrack.adapters.formatting.formatter (formatting functions for testing)
- voluntrack.domain.models (ActivityRecord for test data)
"""
from voluntrack.adapters.formatting.formatter import (
    activity_lines,  # Numbered prompt lines
    format_date_uk,  # dd.mm.yyyy HH:MM dates
    format_usdc,  # Estimate formatting
    truncate_signature,  # Short signatures
)
from voluntrack.domain.models import ActivityRecord


class TestTruncateSignature:
    def test_long_signature(self):
        assert truncate_signature("5VERv8NMvzbJMEkV8xnrLkEa") == "5VERv8NM…"

    def test_short_signature_unchanged(self):
        assert truncate_signature("abc") == "abc"
        assert truncate_signature("12345678") == "12345678"


class TestFormatDate:
    def test_known_timestamp(self):
        assert format_date_uk(1700000000) == "14.11.2023 22:13"

    def test_unknown_timestamp(self):
        assert format_date_uk(0) == "дата невідома"
        assert format_date_uk(-1) == "дата невідома"


class TestFormatUsdc:
    def test_two_decimals(self):
        assert format_usdc(140) == "140.00 USDC"
        assert format_usdc(0.123) == "0.12 USDC"


class TestActivityLines:
    def test_numbered_lines(self):
        lines = activity_lines([
            ActivityRecord(signature="AAAAAAAAAAAA", timestamp=1700000000),
            ActivityRecord(signature="BBBBBBBBBBBB", timestamp=0),
        ])
        assert lines == [
            "1. AAAAAAAA… — 14.11.2023 22:13 (UTC)",
            "2. BBBBBBBB… — дата невідома",
        ]

    def test_enriched_amount(self):
        lines = activity_lines([
            ActivityRecord(signature="AAAAAAAAAAAA", amount=-0.5, mint="So11111111111111111111111111111111111111112",
                           timestamp=0),
        ])
        assert lines == ["1. AAAAAAAA… — дата невідома, сума: -0.5 (So111111…)"]

    def test_empty(self):
        assert activity_lines([]) == []
