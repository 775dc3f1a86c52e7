"""Savings goals endpoints."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field, field_validator

from app.api.deps import get_current_user_id, get_repository, get_today
from app.core.exceptions import InvalidContribution, NotFound
from app.models.goal import Goal
from app.repositories import SqlAlchemyFinanceRepository
from app.services import goal_progress

router = APIRouter()


# ---- Schemas ----

class GoalCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    target_amount: Decimal = Field(..., gt=0)
    current_amount: Decimal = Field(default=Decimal("0"), ge=0)
    target_date: Optional[date] = None
    description: Optional[str] = None


class GoalUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    target_amount: Optional[Decimal] = Field(None, gt=0)
    current_amount: Optional[Decimal] = Field(None, ge=0)
    target_date: Optional[date] = None
    description: Optional[str] = None

    @field_validator("name", "target_amount", "current_amount")
    @classmethod
    def reject_null(cls, v):
        # Omit a field to keep it; null would clear a required column
        if v is None:
            raise ValueError("must not be null")
        return v


class GoalFunds(BaseModel):
    amount: Decimal = Field(..., gt=0)


class GoalResponse(BaseModel):
    id: UUID
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: Optional[date]
    description: Optional[str]
    progress_percent: float
    remaining_amount: float
    days_remaining: Optional[int]
    monthly_needed: Optional[float]
    created_at: datetime


class GoalEstimate(BaseModel):
    goal_id: UUID
    monthly_contribution: float
    remaining_amount: float
    already_met: bool
    months: int
    years: int
    remainder_months: int
    label: str


def _build_response(goal: Goal, today: date) -> GoalResponse:
    """Build goal response with computed fields."""
    monthly_needed = goal_progress.monthly_needed(goal, today)
    return GoalResponse(
        id=goal.id,
        name=goal.name,
        target_amount=goal.target_amount,
        current_amount=goal.current_amount,
        target_date=goal.target_date,
        description=goal.description,
        progress_percent=round(goal_progress.progress_percent(goal), 1),
        remaining_amount=goal_progress.remaining(goal),
        days_remaining=goal_progress.days_remaining(goal, today),
        monthly_needed=round(monthly_needed, 2) if monthly_needed is not None else None,
        created_at=goal.created_at,
    )


async def _get_goal_or_404(repository, user_id: UUID, goal_id: UUID) -> Goal:
    try:
        return await repository.get_goal(user_id, goal_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Goal not found")


@router.get("/", response_model=List[GoalResponse])
async def list_goals(
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """List all goals for the current user."""
    goals = await repository.list_goals(user_id)
    return [_build_response(g, today) for g in goals]


@router.post("/", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    data: GoalCreate,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """Create a new savings goal."""
    goal = Goal(user_id=user_id, **data.model_dump())
    await repository.add_goal(goal)
    await repository.save()
    await repository.refresh(goal)
    return _build_response(goal, today)


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(
    goal_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """Get a specific goal."""
    goal = await _get_goal_or_404(repository, user_id, goal_id)
    return _build_response(goal, today)


@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: UUID,
    data: GoalUpdate,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """Update a goal."""
    goal = await _get_goal_or_404(repository, user_id, goal_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(goal, field, value)

    await repository.save()
    await repository.refresh(goal)
    return _build_response(goal, today)


@router.post("/{goal_id}/funds", response_model=GoalResponse)
async def add_goal_funds(
    goal_id: UUID,
    data: GoalFunds,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    today: date = Depends(get_today),
):
    """Add money to a goal's saved amount."""
    goal = await _get_goal_or_404(repository, user_id, goal_id)
    goal_progress.add_funds(goal, data.amount)
    await repository.save()
    await repository.refresh(goal)
    return _build_response(goal, today)


@router.get("/{goal_id}/estimate", response_model=GoalEstimate)
async def estimate_goal(
    goal_id: UUID,
    monthly_contribution: float = Query(...),
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
):
    """Estimate how long a fixed monthly contribution takes to reach the goal."""
    goal = await _get_goal_or_404(repository, user_id, goal_id)
    try:
        estimate = goal_progress.estimate_time_to_goal(goal, monthly_contribution)
    except InvalidContribution as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return GoalEstimate(
        goal_id=goal.id,
        monthly_contribution=monthly_contribution,
        remaining_amount=goal_progress.remaining(goal),
        already_met=estimate.already_met,
        months=estimate.months,
        years=estimate.years,
        remainder_months=estimate.remainder_months,
        label=estimate.label,
    )


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
):
    """Delete a goal."""
    try:
        await repository.delete_goal(user_id, goal_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Goal not found")
    await repository.save()
