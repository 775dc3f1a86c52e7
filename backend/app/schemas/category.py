"""Category schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from app.models.category import CategoryKind
from app.models.transaction import TransactionType


class CategoryCreate(BaseModel):
    """Schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=100)
    kind: CategoryKind


class CategoryResponse(BaseModel):
    """Category with the display attributes of its kind."""

    id: UUID
    name: str
    kind: CategoryKind
    transaction_type: TransactionType
    icon: str
    color: str

    @classmethod
    def from_category(cls, category) -> "CategoryResponse":
        display = category.display
        return cls(
            id=category.id,
            name=category.name,
            kind=category.kind,
            transaction_type=display.transaction_type,
            icon=display.icon,
            color=display.color,
        )
