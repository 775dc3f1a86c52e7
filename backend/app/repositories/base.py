"""Narrow storage interface the services depend on."""

from datetime import date
from typing import List, Optional, Protocol
from uuid import UUID

from app.models.alert import Alert
from app.models.category import Category
from app.models.goal import Goal
from app.models.transaction import Transaction, TransactionType


class FinanceRepository(Protocol):
    """Every method is scoped to a single owning user."""

    async def get_category(self, user_id: UUID, category_id: UUID) -> Category: ...

    async def list_categories(
        self, user_id: UUID, transaction_type: Optional[TransactionType] = None
    ) -> List[Category]: ...

    async def add_category(self, category: Category) -> Category: ...

    async def add_default_categories(self, user_id: UUID) -> List[Category]: ...

    async def get_goal(self, user_id: UUID, goal_id: UUID) -> Goal: ...

    async def list_goals(self, user_id: UUID) -> List[Goal]: ...

    async def add_goal(self, goal: Goal) -> Goal: ...

    async def delete_goal(self, user_id: UUID, goal_id: UUID) -> None: ...

    async def get_transaction(self, user_id: UUID, transaction_id: UUID) -> Transaction: ...

    async def list_transactions(
        self,
        user_id: UUID,
        transaction_type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Transaction]: ...

    async def list_upcoming_transactions(
        self, user_id: UUID, today: date, days: int
    ) -> List[Transaction]: ...

    async def add_transaction(self, transaction: Transaction) -> Transaction: ...

    async def delete_transaction(self, user_id: UUID, transaction_id: UUID) -> None: ...

    async def create_alert(self, draft) -> Alert: ...

    async def list_alerts(self, user_id: UUID, unread_only: bool = False) -> List[Alert]: ...

    async def count_unread_alerts(self, user_id: UUID) -> int: ...

    async def mark_alert_read(self, user_id: UUID, alert_id: UUID) -> Alert: ...

    async def delete_alert(self, user_id: UUID, alert_id: UUID) -> None: ...

    async def save(self) -> None: ...

    async def refresh(self, entity) -> None: ...
