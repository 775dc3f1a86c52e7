"""SQLAlchemy implementation of the finance repository."""

import logging
from datetime import date, timedelta
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound, StorageFailure
from app.models.alert import Alert
from app.models.category import Category, CategoryKind
from app.models.goal import Goal
from app.models.transaction import Transaction, TransactionStatus, TransactionType

logger = logging.getLogger(__name__)


class SqlAlchemyFinanceRepository:
    """Repository over an async session. Commits only in ``save`` and ``create_alert``."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_owned(self, model, user_id: UUID, entity_id: UUID, label: str):
        result = await self.session.execute(
            select(model).where(
                model.id == entity_id,
                model.user_id == user_id,
            )
        )
        entity = result.scalar_one_or_none()
        if entity is None:
            raise NotFound(label, entity_id)
        return entity

    async def _add(self, entity):
        self.session.add(entity)
        await self.session.flush()
        return entity

    # ---- Categories ----

    async def get_category(self, user_id: UUID, category_id: UUID) -> Category:
        return await self._get_owned(Category, user_id, category_id, "Category")

    async def list_categories(
        self, user_id: UUID, transaction_type: Optional[TransactionType] = None
    ) -> List[Category]:
        query = select(Category).where(Category.user_id == user_id)
        if transaction_type:
            kinds = [k for k in CategoryKind if k.display.transaction_type == transaction_type]
            query = query.where(Category.kind.in_(kinds))
        result = await self.session.execute(query.order_by(Category.name.asc()))
        return list(result.scalars().all())

    async def add_category(self, category: Category) -> Category:
        return await self._add(category)

    async def add_default_categories(self, user_id: UUID) -> List[Category]:
        """One category per kind, named after its display label."""
        categories = [
            Category(user_id=user_id, name=kind.display.label, kind=kind)
            for kind in CategoryKind
        ]
        self.session.add_all(categories)
        await self.session.flush()
        return categories

    # ---- Goals ----

    async def get_goal(self, user_id: UUID, goal_id: UUID) -> Goal:
        return await self._get_owned(Goal, user_id, goal_id, "Goal")

    async def list_goals(self, user_id: UUID) -> List[Goal]:
        result = await self.session.execute(
            select(Goal)
            .where(Goal.user_id == user_id)
            .order_by(Goal.created_at.desc())
        )
        return list(result.scalars().all())

    async def add_goal(self, goal: Goal) -> Goal:
        return await self._add(goal)

    async def delete_goal(self, user_id: UUID, goal_id: UUID) -> None:
        goal = await self.get_goal(user_id, goal_id)
        await self.session.delete(goal)

    # ---- Transactions ----

    async def get_transaction(self, user_id: UUID, transaction_id: UUID) -> Transaction:
        return await self._get_owned(Transaction, user_id, transaction_id, "Transaction")

    async def list_transactions(
        self,
        user_id: UUID,
        transaction_type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Transaction]:
        query = select(Transaction).where(Transaction.user_id == user_id)
        if transaction_type:
            query = query.where(Transaction.transaction_type == transaction_type)
        if start_date:
            query = query.where(Transaction.transaction_date >= start_date)
        if end_date:
            query = query.where(Transaction.transaction_date <= end_date)

        result = await self.session.execute(
            query.order_by(Transaction.transaction_date.desc())
        )
        return list(result.scalars().all())

    async def list_upcoming_transactions(
        self, user_id: UUID, today: date, days: int
    ) -> List[Transaction]:
        """Pending transactions due between today and ``days`` ahead, inclusive."""
        result = await self.session.execute(
            select(Transaction)
            .where(
                Transaction.user_id == user_id,
                Transaction.status == TransactionStatus.PENDING,
                Transaction.due_date.is_not(None),
                Transaction.due_date >= today,
                Transaction.due_date <= today + timedelta(days=days),
            )
            .order_by(Transaction.due_date.asc())
        )
        return list(result.scalars().all())

    async def add_transaction(self, transaction: Transaction) -> Transaction:
        return await self._add(transaction)

    async def delete_transaction(self, user_id: UUID, transaction_id: UUID) -> None:
        transaction = await self.get_transaction(user_id, transaction_id)
        await self.session.delete(transaction)

    # ---- Alerts ----

    async def create_alert(self, draft) -> Alert:
        """Persist and commit a new alert, raising StorageFailure on any DB error."""
        alert = Alert(
            user_id=draft.user_id,
            message=draft.message,
            alert_type=draft.alert_type,
            reference_id=draft.reference_id,
            reference_type=draft.reference_type,
            is_read=draft.is_read,
        )
        try:
            self.session.add(alert)
            await self.session.commit()
            await self.session.refresh(alert)
        except SQLAlchemyError as e:
            logger.error(f"Could not persist alert: {type(e).__name__}: {e}")
            await self.session.rollback()
            raise StorageFailure("Alert could not be saved") from e
        return alert

    async def list_alerts(self, user_id: UUID, unread_only: bool = False) -> List[Alert]:
        query = select(Alert).where(Alert.user_id == user_id)
        if unread_only:
            query = query.where(Alert.is_read.is_(False))
        result = await self.session.execute(query.order_by(Alert.created_at.desc()))
        return list(result.scalars().all())

    async def count_unread_alerts(self, user_id: UUID) -> int:
        result = await self.session.execute(
            select(func.count(Alert.id)).where(
                Alert.user_id == user_id,
                Alert.is_read.is_(False),
            )
        )
        return result.scalar_one()

    async def mark_alert_read(self, user_id: UUID, alert_id: UUID) -> Alert:
        alert = await self._get_owned(Alert, user_id, alert_id, "Alert")
        alert.is_read = True
        return alert

    async def delete_alert(self, user_id: UUID, alert_id: UUID) -> None:
        alert = await self._get_owned(Alert, user_id, alert_id, "Alert")
        await self.session.delete(alert)

    # ---- Unit of work ----

    async def save(self) -> None:
        await self.session.commit()

    async def refresh(self, entity) -> None:
        await self.session.refresh(entity)
