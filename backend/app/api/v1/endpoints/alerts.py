"""Alert endpoints.

Alerts are produced by the due-date engine on transaction writes; this
router only reads, marks and removes them.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_current_user_id, get_repository
from app.core.exceptions import NotFound
from app.repositories import SqlAlchemyFinanceRepository
from app.schemas.alert import AlertCountResponse, AlertResponse

router = APIRouter()


@router.get("/", response_model=List[AlertResponse])
async def list_alerts(
    unread_only: bool = False,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> List[AlertResponse]:
    """List alerts for the current user, newest first."""
    alerts = await repository.list_alerts(user_id, unread_only=unread_only)
    return [AlertResponse.model_validate(a) for a in alerts]


@router.get("/count", response_model=AlertCountResponse)
async def count_unread_alerts(
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> AlertCountResponse:
    """Number of unread alerts."""
    return AlertCountResponse(unread=await repository.count_unread_alerts(user_id))


@router.post("/{alert_id}/read", response_model=AlertResponse)
async def mark_alert_read(
    alert_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> AlertResponse:
    """Mark an alert as read."""
    try:
        alert = await repository.mark_alert_read(user_id, alert_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Alert not found",
        )
    await repository.save()
    await repository.refresh(alert)
    return AlertResponse.model_validate(alert)


@router.delete("/{alert_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_alert(
    alert_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
):
    """Delete an alert."""
    try:
        await repository.delete_alert(user_id, alert_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Alert not found",
        )
    await repository.save()
