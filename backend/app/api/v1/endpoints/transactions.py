"""Transaction endpoints."""

from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import (
    get_current_user_id,
    get_repository,
    get_today,
    get_transaction_service,
)
from app.core.config import settings
from app.core.exceptions import NotFound
from app.models.transaction import TransactionType
from app.repositories import SqlAlchemyFinanceRepository
from app.schemas.alert import AlertResponse
from app.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionSaveResponse,
    TransactionUpdate,
)
from app.services.transaction_service import TransactionSaveResult, TransactionService

router = APIRouter()


def _save_response(result: TransactionSaveResult) -> TransactionSaveResponse:
    return TransactionSaveResponse(
        transaction=TransactionResponse.model_validate(result.transaction),
        alert=AlertResponse.model_validate(result.alert) if result.alert else None,
        alert_error=result.alert_error,
    )


@router.get("/", response_model=List[TransactionResponse])
async def list_transactions(
    transaction_type: Optional[TransactionType] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> List[TransactionResponse]:
    """List transactions for the current user, newest first."""
    transactions = await repository.list_transactions(
        user_id,
        transaction_type=transaction_type,
        start_date=start_date,
        end_date=end_date,
    )
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.get("/upcoming", response_model=List[TransactionResponse])
async def list_upcoming_transactions(
    days: Optional[int] = Query(None, ge=0, le=365),
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
    today: date = Depends(get_today),
) -> List[TransactionResponse]:
    """Pending bills due within the next ``days`` days."""
    if days is None:
        days = settings.UPCOMING_BILLS_DEFAULT_DAYS
    transactions = await repository.list_upcoming_transactions(user_id, today, days)
    return [TransactionResponse.model_validate(t) for t in transactions]


@router.post("/", response_model=TransactionSaveResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    data: TransactionCreate,
    user_id: UUID = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
    today: date = Depends(get_today),
) -> TransactionSaveResponse:
    """Create a transaction and check its due date."""
    try:
        result = await service.create(user_id, data.model_dump(), today)
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return _save_response(result)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> TransactionResponse:
    """Get a specific transaction."""
    try:
        transaction = await repository.get_transaction(user_id, transaction_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )
    return TransactionResponse.model_validate(transaction)


@router.patch("/{transaction_id}", response_model=TransactionSaveResponse)
async def update_transaction(
    transaction_id: UUID,
    data: TransactionUpdate,
    user_id: UUID = Depends(get_current_user_id),
    service: TransactionService = Depends(get_transaction_service),
    today: date = Depends(get_today),
) -> TransactionSaveResponse:
    """Update a transaction and check its due date again."""
    try:
        result = await service.update(
            user_id, transaction_id, data.model_dump(exclude_unset=True), today
        )
    except NotFound as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return _save_response(result)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
):
    """Delete a transaction."""
    try:
        await repository.delete_transaction(user_id, transaction_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )
    await repository.save()
