"""Display formatting for amounts and dates.

Formatting options travel as an explicit ``FormatConfig`` value; nothing here
reads process-wide state.
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

# locale -> (decimal separator, thousands separator)
_SEPARATORS = {
    "en-US": (".", ","),
    "en-GB": (".", ","),
    "pt-BR": (",", "."),
    "fr-FR": (",", " "),
    "de-DE": (",", "."),
}

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "BRL": "R$",
}


@dataclass(frozen=True)
class FormatConfig:
    currency_symbol: str = "$"
    decimal_separator: str = "."
    thousands_separator: str = ","
    symbol_first: bool = True
    date_format: str = "%Y-%m-%d"

    @classmethod
    def for_locale(cls, locale: str, currency: str, date_format: str = "%Y-%m-%d") -> "FormatConfig":
        decimal_sep, thousands_sep = _SEPARATORS.get(locale, (".", ","))
        return cls(
            currency_symbol=_CURRENCY_SYMBOLS.get(currency.upper(), currency.upper()),
            decimal_separator=decimal_sep,
            thousands_separator=thousands_sep,
            # Continental European locales put the symbol after the amount
            symbol_first=locale not in ("fr-FR", "de-DE"),
            date_format=date_format,
        )


def round_currency(value) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_amount(value, config: FormatConfig) -> str:
    """Two-decimal amount with the configured separators, no symbol."""
    rounded = round_currency(value)
    sign = "-" if rounded < 0 else ""
    integer_part, fraction = f"{abs(rounded):.2f}".split(".")

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    return f"{sign}{config.thousands_separator.join(groups)}{config.decimal_separator}{fraction}"


def format_currency(value, config: FormatConfig) -> str:
    amount = format_amount(value, config)
    if config.symbol_first:
        if amount.startswith("-"):
            return f"-{config.currency_symbol}{amount[1:]}"
        return f"{config.currency_symbol}{amount}"
    return f"{amount} {config.currency_symbol}"


def format_date(value: date, config: FormatConfig) -> str:
    return value.strftime(config.date_format)
