"""API v1 router."""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    alerts,
    categories,
    goals,
    simulations,
    transactions,
)

api_router = APIRouter()

api_router.include_router(
    transactions.router, prefix="/transactions", tags=["Transactions"]
)
api_router.include_router(categories.router, prefix="/categories", tags=["Categories"])
api_router.include_router(goals.router, prefix="/goals", tags=["Goals"])
api_router.include_router(alerts.router, prefix="/alerts", tags=["Alerts"])
api_router.include_router(simulations.router, prefix="/simulations", tags=["Simulations"])
