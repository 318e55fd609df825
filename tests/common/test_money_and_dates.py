from datetime import datetime, timedelta, timezone

from src.earnings_ticker.earnings_ticker.common.datetime_utils import parse_iso_datetime, to_iso
from src.earnings_ticker.earnings_ticker.common.money import format_money


def test_format_money_known_symbol():
    assert format_money(100, "USD") == "$100.00"
    assert format_money(1234.5, "eur") == "€1,234.50"


def test_format_money_unknown_code():
    assert format_money(1234.567, "CHF") == "CHF 1,234.57"


def test_parse_iso_roundtrip_naive():
    value = datetime(2026, 2, 2, 9, 0)
    assert parse_iso_datetime(to_iso(value)) == value


def test_parse_iso_z_suffix_becomes_local_naive():
    parsed = parse_iso_datetime("2026-02-02T14:00:00.000Z")
    expected = datetime(2026, 2, 2, 14, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    assert parsed == expected
    assert parsed.tzinfo is None


def test_parse_iso_offset():
    parsed = parse_iso_datetime("2026-02-02T09:00:00+02:00")
    expected = datetime(2026, 2, 2, 9, 0, tzinfo=timezone(timedelta(hours=2))).astimezone().replace(tzinfo=None)
    assert parsed == expected


def test_parse_iso_garbage():
    assert parse_iso_datetime("not a date") is None
    assert parse_iso_datetime(None) is None
    assert parse_iso_datetime(42) is None
