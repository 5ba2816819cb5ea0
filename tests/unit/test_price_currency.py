from __future__ import annotations

import pytest

from listify.core.normalize.price import currency_from_marker, detect_currency_marker, parse_price
from listify.schemas.labels import CURRENCY_MARKERS
from listify.schemas.models import CurrencyCode


@pytest.mark.parametrize(
    ("raw", "amount", "currency"),
    [
        ("US $45.00", 45.00, CurrencyCode.USD),
        ("45.00", 45.00, CurrencyCode.USD),
        ("$1,299.99", 1299.99, CurrencyCode.USD),
        ("£1,234.50", 1234.50, CurrencyCode.GBP),
        ("EUR 12,50", 12.50, CurrencyCode.EUR),
        ("¥1200", 1200.00, CurrencyCode.JPY),
        ("CA$20.00", 20.00, CurrencyCode.CAD),
        ("AU$15.25", 15.25, CurrencyCode.AUD),
        ("A$9.99", 9.99, CurrencyCode.AUD),
        ("AU $15.00", 15.00, CurrencyCode.AUD),
        ("C $20.00", 20.00, CurrencyCode.CAD),
        ("usd 5", 5.00, CurrencyCode.USD),
        ("GBP 7.5", 7.50, CurrencyCode.GBP),
    ],
)
def test_parse_price_markers_and_amounts(raw, amount, currency):
    info = parse_price(raw)
    assert info is not None
    assert info.amount == pytest.approx(amount)
    assert info.currency is currency


def test_decimal_comma_only_when_no_dot():
    assert parse_price("12,50").amount == pytest.approx(12.5)
    # with a dot present, commas are thousands separators
    assert parse_price("1,234.56").amount == pytest.approx(1234.56)


def test_amount_is_rounded_to_cents():
    assert parse_price("$19.999").amount == pytest.approx(20.00)
    assert parse_price("$3.14159").amount == pytest.approx(3.14)


@pytest.mark.parametrize("raw", [None, "", "   ", "Free", "$0.00", "-$5.00", "$."])
def test_no_price(raw):
    assert parse_price(raw) is None


@pytest.mark.parametrize(
    ("raw", "amount"),
    [
        ("$10.00 to $20.00", 10.00),
        ("$1,250.00 to $2,000.00", 1250.00),
        ("£5.50 each", 5.50),
    ],
)
def test_leading_number_wins(raw, amount):
    info = parse_price(raw)
    assert info is not None
    assert info.amount == pytest.approx(amount)


def test_detect_marker_order_and_default():
    assert detect_currency_marker("CA$20") == "CA$"
    assert detect_currency_marker("AU$20") == "AU$"
    assert detect_currency_marker("US$20") == "US$"
    assert detect_currency_marker("20.00") == "$"


def test_currency_lookup_is_total():
    for marker in CURRENCY_MARKERS:
        assert isinstance(currency_from_marker(marker), CurrencyCode)
    assert currency_from_marker("cad") is CurrencyCode.CAD
    assert currency_from_marker("XYZ") is CurrencyCode.USD
    assert currency_from_marker(None) is CurrencyCode.USD
