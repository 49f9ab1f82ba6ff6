from utils.currency import CURRENCY_SYMBOLS, format_amount


def test_format_amount_with_symbol():
    assert format_amount(11.5, "USD") == "$11.50"
    assert format_amount(1234.5, "EUR") == "€1234.50"


def test_format_negative_amount():
    assert format_amount(-2, "GBP") == "-£2.00"


def test_format_unknown_currency_uses_code():
    assert format_amount(3, "XYZ") == "XYZ3.00"


def test_supported_currencies():
    assert CURRENCY_SYMBOLS["SGD"] == "S$"
    assert len(CURRENCY_SYMBOLS) == 16
