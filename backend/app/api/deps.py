"""Shared FastAPI dependencies."""

from datetime import date
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.repositories import SqlAlchemyFinanceRepository
from app.services.alert_service import DueDateAlertEngine
from app.services.transaction_service import TransactionService
from app.utils.formatting import FormatConfig


async def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> UUID:
    """Identity of the caller, as established by the upstream auth gateway."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-User-Id header",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid X-User-Id header",
        )


async def get_repository(db: AsyncSession = Depends(get_db)) -> SqlAlchemyFinanceRepository:
    return SqlAlchemyFinanceRepository(db)


def get_alert_engine() -> DueDateAlertEngine:
    return DueDateAlertEngine(window_days=settings.DUE_DATE_ALERT_WINDOW_DAYS)


async def get_transaction_service(
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    alert_engine: DueDateAlertEngine = Depends(get_alert_engine),
) -> TransactionService:
    return TransactionService(repository, alert_engine)


def get_today() -> date:
    """Reference date for due-date and goal calculations."""
    return date.today()


def get_format_config() -> FormatConfig:
    return FormatConfig.for_locale(
        settings.DISPLAY_LOCALE,
        settings.DISPLAY_CURRENCY,
        settings.DISPLAY_DATE_FORMAT,
    )
