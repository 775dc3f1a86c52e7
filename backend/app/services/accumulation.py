"""Monthly compound accumulation simulator.

Projects initial capital plus a fixed monthly contribution forward, once in
nominal terms and once in real (inflation-adjusted) terms. Contributions in
the real series are taken as already expressed in today's money, so they are
not discounted.

The simulation is a pure function of its input: no clock, no randomness and
no rounding. Rounding for display happens in the presentation layer.
"""

import enum
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from app.core.exceptions import InvalidRate
from app.services.rates import monthly_rate, real_annual_rate


class RiskProfile(str, enum.Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class SimulationInput:
    """Parameters of one projection. Rates are annual fractions."""

    nominal_annual_rate: float
    inflation_annual_rate: float
    initial_value: float = 0.0
    monthly_contribution: float = 0.0
    horizon_years: float = 10.0
    risk_profile: RiskProfile = RiskProfile.MODERATE
    # Informational only, never used in the projection
    current_age: Optional[int] = None

    def __post_init__(self):
        if self.nominal_annual_rate <= -1:
            raise InvalidRate(self.nominal_annual_rate)
        if self.initial_value < 0:
            raise ValueError("initial_value must not be negative")
        if self.monthly_contribution < 0:
            raise ValueError("monthly_contribution must not be negative")
        if not self.horizon_years > 0:
            raise ValueError("horizon_years must be greater than zero")
        if self.current_age is not None and self.current_age < 0:
            raise ValueError("current_age must not be negative")

    @property
    def months(self) -> int:
        return horizon_months(self.horizon_years)


@dataclass(frozen=True)
class SimulationResult:
    monthly_series_nominal: Tuple[float, ...]
    monthly_series_real: Tuple[float, ...]
    total_invested: float
    final_nominal: float
    final_real: float

    @property
    def months(self) -> int:
        return len(self.monthly_series_nominal)

    @property
    def nominal_return(self) -> float:
        return self.final_nominal - self.total_invested

    @property
    def real_return(self) -> float:
        return self.final_real - self.total_invested


def horizon_months(horizon_years: float) -> int:
    """Whole months in the horizon, rounded half up, never less than one."""
    return max(1, math.floor(horizon_years * 12 + 0.5))


def _accumulate(initial: float, contribution: float, rate: float, months: int) -> List[float]:
    series = []
    value = initial
    for _ in range(months):
        value = value * (1 + rate) + contribution
        series.append(value)
    return series


def simulate(params: SimulationInput) -> SimulationResult:
    """Run the monthly projection for ``params``."""
    months = params.months
    nominal_monthly = monthly_rate(params.nominal_annual_rate)
    real_monthly = monthly_rate(
        real_annual_rate(params.nominal_annual_rate, params.inflation_annual_rate)
    )

    nominal = _accumulate(params.initial_value, params.monthly_contribution, nominal_monthly, months)
    real = _accumulate(params.initial_value, params.monthly_contribution, real_monthly, months)

    return SimulationResult(
        monthly_series_nominal=tuple(nominal),
        monthly_series_real=tuple(real),
        total_invested=params.initial_value + params.monthly_contribution * months,
        final_nominal=nominal[-1] if nominal else params.initial_value,
        final_real=real[-1] if real else params.initial_value,
    )
