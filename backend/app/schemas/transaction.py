"""Transaction schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.models.transaction import TransactionStatus, TransactionType
from app.schemas.alert import AlertResponse


class TransactionBase(BaseModel):
    """Base transaction schema."""

    description: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., gt=0)
    transaction_date: date
    due_date: Optional[date] = None
    transaction_type: TransactionType
    status: TransactionStatus = TransactionStatus.PENDING
    category_id: Optional[UUID] = None
    is_recurring: bool = False


class TransactionCreate(TransactionBase):
    """Schema for creating a transaction."""


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction."""

    description: Optional[str] = Field(None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(None, gt=0)
    transaction_date: Optional[date] = None
    due_date: Optional[date] = None
    transaction_type: Optional[TransactionType] = None
    status: Optional[TransactionStatus] = None
    category_id: Optional[UUID] = None
    is_recurring: Optional[bool] = None

    @field_validator(
        "description",
        "amount",
        "transaction_date",
        "transaction_type",
        "status",
        "is_recurring",
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class TransactionResponse(TransactionBase):
    """Schema for transaction response."""

    id: UUID
    created_at: datetime

    class Config:
        from_attributes = True


class TransactionSaveResponse(BaseModel):
    """A saved transaction plus the outcome of its due-date check."""

    transaction: TransactionResponse
    alert: Optional[AlertResponse] = None
    alert_error: Optional[str] = None
