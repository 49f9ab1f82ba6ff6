"""Currency-related utilities: supported currencies and amount formatting."""


# Currency symbols for formatting, in the order they are offered to users
CURRENCY_SYMBOLS = {
    "USD": "$",
    "SGD": "S$",
    "THB": "฿",
    "MYR": "RM",
    "IDR": "Rp",
    "PHP": "₱",
    "VND": "₫",
    "JPY": "¥",
    "CNY": "¥",
    "HKD": "HK$",
    "KRW": "₩",
    "EUR": "€",
    "GBP": "£",
    "AUD": "A$",
    "CAD": "C$",
    "INR": "₹",
}


def format_amount(amount: float, currency: str) -> str:
    """
    Format an amount in major units as a currency string with symbol.

    Args:
        amount: Amount in major units (e.g., 12.34 for $12.34)
        currency: Currency code (e.g., "USD", "EUR")

    Returns:
        Formatted string with symbol (e.g., "$12.34", "-€2.00")
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)

    # Handle negative amounts
    if amount < 0:
        return f"-{symbol}{abs(amount):.2f}"
    else:
        return f"{symbol}{amount:.2f}"
