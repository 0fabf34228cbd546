"""Currency utilities: supported codes, static fallback rates and display formatting."""

SUPPORTED_CURRENCIES: tuple[str, ...] = (
    "USD", "EUR", "GBP", "INR", "JPY", "AUD", "CAD", "CHF", "CNY", "SGD",
    "AED", "THB", "MXN", "BRL", "ZAR", "NZD", "KRW", "HKD", "SEK", "NOK",
)

# Static exchange rates to USD, used when the live rate API is unavailable
EXCHANGE_RATES_TO_USD: dict[str, float] = {
    "USD": 1.0,
    "EUR": 1.08,
    "GBP": 1.27,
    "INR": 0.012,
    "JPY": 0.0067,
    "AUD": 0.65,
    "CAD": 0.74,
    "CHF": 1.13,
    "CNY": 0.14,
    "SGD": 0.75,
    "AED": 0.27,
    "THB": 0.028,
    "MXN": 0.058,
    "BRL": 0.2,
    "ZAR": 0.054,
    "NZD": 0.6,
    "KRW": 0.00074,
    "HKD": 0.13,
    "SEK": 0.095,
    "NOK": 0.093,
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$", "EUR": "€", "GBP": "£", "INR": "₹",
    "JPY": "¥", "AUD": "A$", "CAD": "CA$", "CHF": "CHF ",
    "CNY": "CN¥", "SGD": "S$", "AED": "AED ", "THB": "฿",
    "MXN": "MX$", "BRL": "R$", "ZAR": "R", "NZD": "NZ$",
    "KRW": "₩", "HKD": "HK$", "SEK": "kr ", "NOK": "kr ",
}


def is_supported(currency: str) -> bool:
    return currency.upper() in SUPPORTED_CURRENCIES


def static_rate_from_usd(to_currency: str) -> float | None:
    """Units of to_currency per 1 USD from the static table, None if unknown."""
    rate = EXCHANGE_RATES_TO_USD.get(to_currency.upper())
    if not rate:
        return None
    return 1 / rate


def format_price(amount: float, currency: str = "USD") -> str:
    """Format a price with currency symbol for display."""
    symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    return f"{symbol}{round(amount):,}"
