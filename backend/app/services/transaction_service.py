"""Transaction write path.

The transaction is committed first; the due-date alert engine runs after the
commit. A failure to store the alert is reported to the caller and logged,
but never undoes the transaction write.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional
from uuid import UUID

from app.core.exceptions import StorageFailure
from app.models.alert import Alert
from app.models.transaction import Transaction
from app.services.alert_service import DueDateAlertEngine

logger = logging.getLogger(__name__)


@dataclass
class TransactionSaveResult:
    transaction: Transaction
    alert: Optional[Alert] = None
    alert_error: Optional[str] = None


class TransactionService:
    """Creates and updates transactions, then runs the alert engine."""

    def __init__(self, repository, alert_engine: DueDateAlertEngine):
        self.repository = repository
        self.alert_engine = alert_engine

    async def create(self, user_id: UUID, data: Dict[str, Any], today: date) -> TransactionSaveResult:
        await self._check_category(user_id, data.get("category_id"))
        transaction = Transaction(user_id=user_id, **data)
        await self.repository.add_transaction(transaction)
        await self.repository.save()
        await self.repository.refresh(transaction)
        return await self._after_write(transaction, today)

    async def update(
        self,
        user_id: UUID,
        transaction_id: UUID,
        changes: Dict[str, Any],
        today: date,
    ) -> TransactionSaveResult:
        transaction = await self.repository.get_transaction(user_id, transaction_id)
        if "category_id" in changes:
            await self._check_category(user_id, changes["category_id"])
        for field, value in changes.items():
            setattr(transaction, field, value)
        await self.repository.save()
        await self.repository.refresh(transaction)
        return await self._after_write(transaction, today)

    async def _check_category(self, user_id: UUID, category_id: Optional[UUID]) -> None:
        # Raises NotFound for unknown ids and for other users' categories
        if category_id is not None:
            await self.repository.get_category(user_id, category_id)

    async def _after_write(self, transaction: Transaction, today: date) -> TransactionSaveResult:
        try:
            alert = await self.alert_engine.on_transaction_saved(self.repository, transaction, today)
        except StorageFailure as e:
            logger.warning(
                "Alert not saved for transaction",
                extra={
                    "transaction_id": str(transaction.id),
                    "user_id": str(transaction.user_id),
                    "error": str(e),
                },
            )
            # The failed alert write rolled the session back; reload the committed row
            await self.repository.refresh(transaction)
            return TransactionSaveResult(transaction=transaction, alert_error=str(e))
        return TransactionSaveResult(transaction=transaction, alert=alert)
