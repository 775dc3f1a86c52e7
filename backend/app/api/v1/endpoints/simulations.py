"""Simulation endpoints: accumulation projections in nominal and real terms."""

import math
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from app.api.deps import get_current_user_id, get_format_config
from app.core.config import settings
from app.core.exceptions import InvalidRate
from app.core.rate_limit import RATE_LIMITS, limiter
from app.services.accumulation import RiskProfile, SimulationInput, simulate
from app.services.rates import risk_profile_rate
from app.utils.formatting import FormatConfig, format_currency

router = APIRouter()

# Upper bound for money inputs, keeps long projections inside float range
MAX_AMOUNT = 1e12


# ============ Schemas ============

class AccumulationParameters(BaseModel):
    """Parameters for an accumulation projection. Rates are fractions (0.12 = 12%)."""

    risk_profile: RiskProfile = RiskProfile.MODERATE
    # Falls back to the risk profile's default rate when omitted
    nominal_annual_rate: Optional[float] = Field(default=None, gt=-1, le=10)
    inflation_annual_rate: Optional[float] = None
    initial_value: float = Field(default=0, ge=0, le=MAX_AMOUNT)
    monthly_contribution: float = Field(default=0, ge=0, le=MAX_AMOUNT)
    horizon_years: float = Field(default=10, gt=0, le=100)
    current_age: Optional[int] = Field(default=None, ge=0, le=150)


class AccumulationResult(BaseModel):
    """Accumulation projection result, unrounded."""

    months: int
    nominal_annual_rate: float
    inflation_annual_rate: float
    monthly_series_nominal: List[float]
    monthly_series_real: List[float]
    total_invested: float
    final_nominal: float
    final_real: float
    nominal_return: float
    real_return: float
    display: Dict[str, str]


class RiskProfileInfo(BaseModel):
    value: str
    label: str
    default_rate: float


_PROFILE_LABELS = {
    RiskProfile.CONSERVATIVE: "Conservative",
    RiskProfile.MODERATE: "Moderate",
    RiskProfile.AGGRESSIVE: "Aggressive",
}


# ============ Endpoints ============

@router.get("/risk-profiles", response_model=List[RiskProfileInfo])
async def list_risk_profiles() -> List[RiskProfileInfo]:
    """List risk profiles and their default nominal annual rates."""
    return [
        RiskProfileInfo(
            value=profile.value,
            label=_PROFILE_LABELS[profile],
            default_rate=risk_profile_rate(profile, settings.RISK_PROFILE_RATES),
        )
        for profile in RiskProfile
    ]


@router.post("/accumulation", response_model=AccumulationResult)
@limiter.limit(RATE_LIMITS["simulation"])
async def project_accumulation(
    request: Request,
    params: AccumulationParameters,
    user_id=Depends(get_current_user_id),
    format_config: FormatConfig = Depends(get_format_config),
) -> AccumulationResult:
    """Project savings month by month."""
    nominal = params.nominal_annual_rate
    if nominal is None:
        nominal = risk_profile_rate(params.risk_profile, settings.RISK_PROFILE_RATES)
    inflation = params.inflation_annual_rate
    if inflation is None:
        inflation = settings.DEFAULT_INFLATION_RATE

    try:
        result = simulate(
            SimulationInput(
                nominal_annual_rate=nominal,
                inflation_annual_rate=inflation,
                initial_value=params.initial_value,
                monthly_contribution=params.monthly_contribution,
                horizon_years=params.horizon_years,
                risk_profile=params.risk_profile,
                current_age=params.current_age,
            )
        )
    except InvalidRate as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    if not (math.isfinite(result.final_nominal) and math.isfinite(result.final_real)):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Projection exceeds the representable numeric range",
        )

    return AccumulationResult(
        months=result.months,
        nominal_annual_rate=nominal,
        inflation_annual_rate=inflation,
        monthly_series_nominal=list(result.monthly_series_nominal),
        monthly_series_real=list(result.monthly_series_real),
        total_invested=result.total_invested,
        final_nominal=result.final_nominal,
        final_real=result.final_real,
        nominal_return=result.nominal_return,
        real_return=result.real_return,
        display={
            "total_invested": format_currency(result.total_invested, format_config),
            "final_nominal": format_currency(result.final_nominal, format_config),
            "final_real": format_currency(result.final_real, format_config),
        },
    )
