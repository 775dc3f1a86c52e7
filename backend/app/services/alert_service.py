"""Due-date alerts for expense transactions.

Every create or update of a transaction is evaluated once. Expenses with a
due date at most ``window_days`` ahead (or already past) produce one advisory
alert. Repeated edits produce repeated alerts: there is no deduplication
against alerts created earlier for the same transaction.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union
from uuid import UUID

from app.models.alert import Alert, AlertReferenceType, AlertType
from app.models.transaction import TransactionType

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 7


@dataclass(frozen=True)
class AlertDraft:
    """A fully formed alert, ready to be handed to storage."""

    user_id: UUID
    message: str
    alert_type: AlertType
    reference_id: Optional[UUID] = None
    reference_type: Optional[AlertReferenceType] = None
    is_read: bool = False


def _as_day(value: Union[date, datetime]) -> date:
    # Calendar date as stored, no timezone conversion
    if isinstance(value, datetime):
        return value.date()
    return value


def day_diff(due_date: Union[date, datetime], today: Union[date, datetime]) -> int:
    """Whole days from ``today`` until ``due_date`` (negative once overdue)."""
    return (_as_day(due_date) - _as_day(today)).days


def due_date_message(description: str, diff: int) -> str:
    if diff > 0:
        return f'Expense "{description}" is due in {diff} day(s).'
    if diff == 0:
        return f'Expense "{description}" is due today.'
    return f'Expense "{description}" is overdue by {abs(diff)} day(s).'


def evaluate_transaction(
    transaction,
    today: Union[date, datetime],
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> Optional[AlertDraft]:
    """Decide whether ``transaction`` warrants a due-date alert."""
    if transaction.transaction_type != TransactionType.EXPENSE or transaction.due_date is None:
        return None

    diff = day_diff(transaction.due_date, today)
    if diff > window_days:
        return None

    return AlertDraft(
        user_id=transaction.user_id,
        message=due_date_message(transaction.description, diff),
        alert_type=AlertType.DUE_DATE,
        reference_id=transaction.id,
        reference_type=AlertReferenceType.TRANSACTION,
        is_read=False,
    )


class DueDateAlertEngine:
    """Evaluates saved transactions and persists the resulting alerts."""

    def __init__(self, window_days: int = DEFAULT_WINDOW_DAYS):
        self.window_days = window_days

    async def on_transaction_saved(
        self,
        repository,
        transaction,
        today: Union[date, datetime],
    ) -> Optional[Alert]:
        """Run once per create/update event.

        Raises StorageFailure when the alert cannot be written; the
        transaction write that triggered the event is left untouched.
        """
        draft = evaluate_transaction(transaction, today, self.window_days)
        if draft is None:
            return None

        alert = await repository.create_alert(draft)
        logger.info(
            "Due-date alert created",
            extra={
                "user_id": str(draft.user_id),
                "transaction_id": str(draft.reference_id),
                "alert_id": str(alert.id),
            },
        )
        return alert
