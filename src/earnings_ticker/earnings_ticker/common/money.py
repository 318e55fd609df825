from __future__ import annotations

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "VND": "₫",
}


def format_money(amount: float, currency: str) -> str:
    """Render an amount with two decimals, prefixed by the currency symbol or code."""
    code = (currency or "").strip()
    symbol = CURRENCY_SYMBOLS.get(code.upper())
    if symbol:
        return f"{symbol}{amount:,.2f}"
    return f"{code} {amount:,.2f}".strip()
