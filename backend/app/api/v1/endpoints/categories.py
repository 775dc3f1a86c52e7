"""Category endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user_id, get_repository
from app.core.logging import get_logger
from app.models.category import Category
from app.models.transaction import TransactionType
from app.repositories import SqlAlchemyFinanceRepository
from app.schemas.category import CategoryCreate, CategoryResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/", response_model=List[CategoryResponse])
async def list_categories(
    transaction_type: Optional[TransactionType] = None,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> List[CategoryResponse]:
    """List categories, creating the default set for a user who has none."""
    if not await repository.list_categories(user_id):
        await repository.add_default_categories(user_id)
        await repository.save()
        logger.info("Default categories created", extra={"user_id": str(user_id)})

    categories = await repository.list_categories(user_id, transaction_type=transaction_type)
    return [CategoryResponse.from_category(c) for c in categories]


@router.post("/", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    user_id: UUID = Depends(get_current_user_id),
    repository: SqlAlchemyFinanceRepository = Depends(get_repository),
) -> CategoryResponse:
    """Create a category of one of the known kinds."""
    category = Category(user_id=user_id, **data.model_dump())
    await repository.add_category(category)
    await repository.save()
    await repository.refresh(category)
    return CategoryResponse.from_category(category)
