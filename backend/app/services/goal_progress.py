"""Derived progress figures for savings goals.

Nothing here is stored: progress, remaining amount and time estimates are
recomputed from the goal every time it is read.
"""

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from app.core.exceptions import InvalidContribution

# Average days per month, used to turn a day count into months
DAYS_PER_MONTH = 30.44


@dataclass(frozen=True)
class TimeToGoal:
    """Estimated time until a goal is met at a fixed monthly contribution."""

    months: int

    @property
    def already_met(self) -> bool:
        return self.months == 0

    @property
    def years(self) -> int:
        return self.months // 12 if self.months > 12 else 0

    @property
    def remainder_months(self) -> int:
        return self.months % 12 if self.months > 12 else self.months

    @property
    def label(self) -> str:
        if self.already_met:
            return "already met"
        if self.months <= 12:
            return _plural(self.months, "month")
        parts = [_plural(self.years, "year")]
        if self.remainder_months:
            parts.append(_plural(self.remainder_months, "month"))
        return " ".join(parts)

    def __str__(self) -> str:
        return self.label


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def progress_percent(goal) -> float:
    """Share of the target already saved, clamped to [0, 100]."""
    target = float(goal.target_amount or 0)
    if target <= 0:
        return 0.0
    progress = float(goal.current_amount or 0) / target * 100
    return max(0.0, min(progress, 100.0))


def remaining(goal) -> float:
    return max(0.0, float(goal.target_amount or 0) - float(goal.current_amount or 0))


def estimate_time_to_goal(goal, assumed_monthly_contribution: float) -> TimeToGoal:
    """Months of contributions needed to close the gap, ignoring interest."""
    if not assumed_monthly_contribution > 0:
        raise InvalidContribution(assumed_monthly_contribution)

    amount_left = remaining(goal)
    if amount_left == 0:
        return TimeToGoal(months=0)
    return TimeToGoal(months=math.ceil(amount_left / assumed_monthly_contribution))


def days_remaining(goal, today: date) -> Optional[int]:
    if goal.target_date is None:
        return None
    return max((goal.target_date - today).days, 0)


def monthly_needed(goal, today: date) -> Optional[float]:
    """Monthly amount required to reach the target by the goal's target date."""
    days = days_remaining(goal, today)
    amount_left = remaining(goal)
    if not days or amount_left <= 0:
        return None
    return amount_left / (days / DAYS_PER_MONTH)


def add_funds(goal, amount) -> None:
    """Increase the goal's saved amount in place."""
    amount = Decimal(str(amount))
    if amount <= 0:
        raise InvalidContribution(float(amount))
    goal.current_amount = Decimal(str(goal.current_amount or 0)) + amount
