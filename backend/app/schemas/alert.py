"""Alert schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from app.models.alert import AlertReferenceType, AlertType


class AlertResponse(BaseModel):
    """Alert response schema."""

    id: UUID
    message: str
    alert_type: AlertType
    reference_id: Optional[UUID]
    reference_type: Optional[AlertReferenceType]
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True


class AlertCountResponse(BaseModel):
    unread: int
