"""Annual/monthly rate conversions.

All rates are fractions (0.12 for 12%). Converting percentages typed by a
user is left to the caller.
"""

import math
from typing import Mapping

from app.core.exceptions import InvalidRate


def _check_annual_rate(rate: float, label: str = "Annual rate") -> None:
    if not math.isfinite(rate) or rate <= -1:
        raise InvalidRate(rate, f"{label} must be a finite value greater than -100% (got {rate!r})")


def monthly_rate(annual_rate: float) -> float:
    """Effective monthly rate equivalent to ``annual_rate`` compounded 12 times."""
    _check_annual_rate(annual_rate)
    return (1 + annual_rate) ** (1 / 12) - 1


def real_annual_rate(nominal_annual: float, inflation_annual: float) -> float:
    """Inflation-adjusted annual rate (Fisher relation)."""
    _check_annual_rate(inflation_annual, "Inflation rate")
    if not math.isfinite(nominal_annual):
        raise InvalidRate(nominal_annual)
    return (1 + nominal_annual) / (1 + inflation_annual) - 1


def risk_profile_rate(profile: str, rates: Mapping[str, float]) -> float:
    """Default nominal annual rate for a risk profile.

    The rate table is passed in so callers decide where it comes from
    (settings, user preferences, tests).
    """
    key = getattr(profile, "value", profile)
    try:
        rate = rates[key]
    except KeyError:
        raise KeyError(f"No default rate configured for risk profile '{key}'") from None
    _check_annual_rate(rate)
    return rate
