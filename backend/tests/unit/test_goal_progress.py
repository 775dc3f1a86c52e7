"""Tests for goal progress figures."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.core.exceptions import InvalidContribution
from app.models.goal import Goal
from app.services.goal_progress import (
    TimeToGoal,
    add_funds,
    days_remaining,
    estimate_time_to_goal,
    monthly_needed,
    progress_percent,
    remaining,
)


def make_goal(target, current, target_date=None):
    return SimpleNamespace(
        target_amount=Decimal(str(target)),
        current_amount=Decimal(str(current)),
        target_date=target_date,
    )


class TestProgressPercent:
    def test_partial(self):
        assert progress_percent(make_goal(1000, 250)) == 25.0

    def test_nothing_saved(self):
        assert progress_percent(make_goal(1000, 0)) == 0.0

    def test_clamped_when_exceeded(self):
        assert progress_percent(make_goal(1000, 1500)) == 100.0

    def test_zero_target(self):
        assert progress_percent(make_goal(0, 300)) == 0.0

    @pytest.mark.parametrize("target,current", [(1, 0), (10, 3), (3, 10), (0.01, 1e6), (1e9, 1)])
    def test_always_within_bounds(self, target, current):
        assert 0.0 <= progress_percent(make_goal(target, current)) <= 100.0

    def test_works_with_orm_goal(self):
        goal = Goal(name="Car", target_amount=Decimal("20000"), current_amount=Decimal("5000"))
        assert progress_percent(goal) == 25.0


class TestRemaining:
    def test_gap(self):
        assert remaining(make_goal(1000, 400)) == 600.0

    def test_never_negative(self):
        assert remaining(make_goal(1000, 1200)) == 0.0


class TestEstimateTimeToGoal:
    def test_five_months(self):
        estimate = estimate_time_to_goal(make_goal(3000, 500), 500)
        assert estimate.months == 5
        assert estimate.label == "5 months"
        assert str(estimate) == "5 months"

    def test_partial_month_rounds_up(self):
        assert estimate_time_to_goal(make_goal(1000, 0), 300).months == 4

    def test_single_month(self):
        assert estimate_time_to_goal(make_goal(100, 50), 500).label == "1 month"

    def test_twelve_months_stay_in_months(self):
        estimate = estimate_time_to_goal(make_goal(1200, 0), 100)
        assert estimate.label == "12 months"
        assert estimate.years == 0

    def test_years_and_months(self):
        estimate = estimate_time_to_goal(make_goal(1500, 0), 100)
        assert estimate.months == 15
        assert estimate.years == 1
        assert estimate.remainder_months == 3
        assert estimate.label == "1 year 3 months"

    def test_whole_years(self):
        assert estimate_time_to_goal(make_goal(2400, 0), 100).label == "2 years"

    def test_already_met(self):
        estimate = estimate_time_to_goal(make_goal(1000, 1000), 100)
        assert estimate.already_met
        assert estimate.label == "already met"

    @pytest.mark.parametrize("contribution", [0, -50])
    def test_rejects_non_positive_contribution(self, contribution):
        with pytest.raises(InvalidContribution):
            estimate_time_to_goal(make_goal(1000, 0), contribution)

    def test_rejects_non_positive_contribution_even_when_met(self):
        with pytest.raises(InvalidContribution):
            estimate_time_to_goal(make_goal(1000, 1000), 0)

    def test_time_to_goal_value(self):
        assert TimeToGoal(months=25).label == "2 years 1 month"


class TestTargetDate:
    TODAY = date(2025, 1, 1)

    def test_no_target_date(self):
        goal = make_goal(1000, 0)
        assert days_remaining(goal, self.TODAY) is None
        assert monthly_needed(goal, self.TODAY) is None

    def test_days_remaining(self):
        goal = make_goal(1000, 0, target_date=date(2025, 1, 31))
        assert days_remaining(goal, self.TODAY) == 30

    def test_past_target_date_clamps_to_zero(self):
        goal = make_goal(1000, 0, target_date=date(2024, 12, 1))
        assert days_remaining(goal, self.TODAY) == 0
        assert monthly_needed(goal, self.TODAY) is None

    def test_monthly_needed(self):
        goal = make_goal(1000, 400, target_date=date(2025, 7, 1))
        days = (date(2025, 7, 1) - self.TODAY).days
        assert monthly_needed(goal, self.TODAY) == pytest.approx(600 / (days / 30.44))

    def test_monthly_needed_when_met(self):
        goal = make_goal(1000, 1000, target_date=date(2025, 7, 1))
        assert monthly_needed(goal, self.TODAY) is None


class TestAddFunds:
    def test_increases_current_amount(self):
        goal = make_goal(1000, 100)
        add_funds(goal, 250.5)
        assert goal.current_amount == Decimal("350.5")

    @pytest.mark.parametrize("amount", [0, -10])
    def test_rejects_non_positive_amounts(self, amount):
        goal = make_goal(1000, 100)
        with pytest.raises(InvalidContribution):
            add_funds(goal, amount)
        assert goal.current_amount == Decimal("100")
