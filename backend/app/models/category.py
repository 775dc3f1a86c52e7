"""Category model and the closed set of category kinds."""

import enum
import uuid
from dataclasses import dataclass

from sqlalchemy import Column, Enum, String, Uuid

from app.models import Base
from app.models.transaction import TransactionType


@dataclass(frozen=True)
class CategoryDisplay:
    """How a category kind is shown in lists and charts."""

    label: str
    icon: str
    color: str
    transaction_type: TransactionType


class CategoryKind(str, enum.Enum):
    FOOD = "food"
    TRANSPORT = "transport"
    HOUSING = "housing"
    LEISURE = "leisure"
    HEALTH = "health"
    EDUCATION = "education"
    OTHER_EXPENSE = "other_expense"
    SALARY = "salary"
    FREELANCE = "freelance"
    INVESTMENTS = "investments"
    GIFT = "gift"
    OTHER_INCOME = "other_income"

    @property
    def display(self) -> CategoryDisplay:
        return _DISPLAY[self]


_DISPLAY = {
    CategoryKind.FOOD: CategoryDisplay("Food", "utensils", "#FF6B6B", TransactionType.EXPENSE),
    CategoryKind.TRANSPORT: CategoryDisplay("Transport", "car", "#4ECDC4", TransactionType.EXPENSE),
    CategoryKind.HOUSING: CategoryDisplay("Housing", "home", "#45B7D1", TransactionType.EXPENSE),
    CategoryKind.LEISURE: CategoryDisplay("Leisure", "film", "#96CEB4", TransactionType.EXPENSE),
    CategoryKind.HEALTH: CategoryDisplay("Health", "heart", "#FFEEAD", TransactionType.EXPENSE),
    CategoryKind.EDUCATION: CategoryDisplay("Education", "book", "#D4A5A5", TransactionType.EXPENSE),
    CategoryKind.OTHER_EXPENSE: CategoryDisplay("Other", "more-horizontal", "#9B9B9B", TransactionType.EXPENSE),
    CategoryKind.SALARY: CategoryDisplay("Salary", "dollar-sign", "#77DD77", TransactionType.INCOME),
    CategoryKind.FREELANCE: CategoryDisplay("Freelance", "code", "#AEC6CF", TransactionType.INCOME),
    CategoryKind.INVESTMENTS: CategoryDisplay("Investments", "trending-up", "#FDFD96", TransactionType.INCOME),
    CategoryKind.GIFT: CategoryDisplay("Gift", "gift", "#FFB347", TransactionType.INCOME),
    CategoryKind.OTHER_INCOME: CategoryDisplay("Other", "more-horizontal", "#9B9B9B", TransactionType.INCOME),
}

_missing = set(CategoryKind) - set(_DISPLAY)
if _missing:
    raise RuntimeError(f"Category kinds without display attributes: {sorted(k.value for k in _missing)}")


class Category(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    kind = Column(Enum(CategoryKind), nullable=False)

    @property
    def display(self) -> CategoryDisplay:
        return self.kind.display
