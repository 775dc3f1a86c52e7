"""Pydantic schemas."""

from app.schemas.alert import (
    AlertCountResponse,
    AlertResponse,
)
from app.schemas.category import CategoryCreate, CategoryResponse
from app.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionResponse,
    TransactionSaveResponse,
)

__all__ = [
    "AlertCountResponse",
    "AlertResponse",
    "CategoryCreate",
    "CategoryResponse",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionResponse",
    "TransactionSaveResponse",
]
