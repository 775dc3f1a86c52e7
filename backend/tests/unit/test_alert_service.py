"""Tests for the due-date alert engine."""

import uuid
from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from app.core.exceptions import StorageFailure
from app.models.alert import AlertReferenceType, AlertType
from app.models.transaction import TransactionType
from app.services.alert_service import (
    AlertDraft,
    DueDateAlertEngine,
    day_diff,
    due_date_message,
    evaluate_transaction,
)

TODAY = date(2025, 3, 10)


def make_transaction(due_in=None, transaction_type=TransactionType.EXPENSE, description="Rent"):
    return SimpleNamespace(
        id=uuid.uuid4(),
        user_id=uuid.uuid4(),
        description=description,
        transaction_type=transaction_type,
        due_date=TODAY + timedelta(days=due_in) if due_in is not None else None,
    )


class RecordingRepository:
    """Collects alert drafts instead of writing them."""

    def __init__(self, fail=False):
        self.fail = fail
        self.drafts = []

    async def create_alert(self, draft):
        if self.fail:
            raise StorageFailure("database unavailable")
        self.drafts.append(draft)
        return SimpleNamespace(id=uuid.uuid4(), **vars(draft))


class TestDayDiff:
    def test_future(self):
        assert day_diff(date(2025, 3, 13), TODAY) == 3

    def test_past(self):
        assert day_diff(date(2025, 3, 9), TODAY) == -1

    def test_datetimes_are_truncated_to_calendar_days(self):
        due = datetime(2025, 3, 11, 0, 5)
        now = datetime(2025, 3, 10, 23, 55)
        assert day_diff(due, now) == 1

    def test_same_day_different_times(self):
        assert day_diff(datetime(2025, 3, 10, 23, 59), datetime(2025, 3, 10, 0, 1)) == 0


class TestDueDateMessage:
    def test_due_in(self):
        assert due_date_message("Rent", 3) == 'Expense "Rent" is due in 3 day(s).'

    def test_due_today(self):
        assert due_date_message("Rent", 0) == 'Expense "Rent" is due today.'

    def test_overdue(self):
        assert due_date_message("Rent", -4) == 'Expense "Rent" is overdue by 4 day(s).'


class TestEvaluateTransaction:
    def test_eight_days_out_is_ignored(self):
        assert evaluate_transaction(make_transaction(8), TODAY) is None

    def test_seven_days_out(self):
        draft = evaluate_transaction(make_transaction(7), TODAY)
        assert "due in 7 day(s)" in draft.message

    def test_due_today(self):
        assert "due today" in evaluate_transaction(make_transaction(0), TODAY).message

    def test_one_day_overdue(self):
        assert "overdue by 1 day(s)" in evaluate_transaction(make_transaction(-1), TODAY).message

    def test_long_overdue_still_alerts(self):
        assert "overdue by 90 day(s)" in evaluate_transaction(make_transaction(-90), TODAY).message

    def test_income_is_ignored(self):
        transaction = make_transaction(1, transaction_type=TransactionType.INCOME)
        assert evaluate_transaction(transaction, TODAY) is None

    def test_missing_due_date_is_ignored(self):
        assert evaluate_transaction(make_transaction(None), TODAY) is None

    def test_draft_fields(self):
        transaction = make_transaction(3)
        draft = evaluate_transaction(transaction, TODAY)
        assert draft == AlertDraft(
            user_id=transaction.user_id,
            message='Expense "Rent" is due in 3 day(s).',
            alert_type=AlertType.DUE_DATE,
            reference_id=transaction.id,
            reference_type=AlertReferenceType.TRANSACTION,
            is_read=False,
        )

    def test_custom_window(self):
        assert evaluate_transaction(make_transaction(10), TODAY, window_days=14) is not None
        assert evaluate_transaction(make_transaction(2), TODAY, window_days=1) is None

    def test_plain_string_type_is_accepted(self):
        transaction = make_transaction(2, transaction_type="expense")
        assert evaluate_transaction(transaction, TODAY) is not None


class TestDueDateAlertEngine:
    @pytest.mark.asyncio
    async def test_persists_one_alert(self):
        repository = RecordingRepository()
        alert = await DueDateAlertEngine().on_transaction_saved(repository, make_transaction(3), TODAY)
        assert len(repository.drafts) == 1
        assert alert.message.endswith("due in 3 day(s).")

    @pytest.mark.asyncio
    async def test_nothing_persisted_when_out_of_window(self):
        repository = RecordingRepository()
        alert = await DueDateAlertEngine().on_transaction_saved(repository, make_transaction(30), TODAY)
        assert alert is None
        assert repository.drafts == []

    @pytest.mark.asyncio
    async def test_repeated_events_create_repeated_alerts(self):
        repository = RecordingRepository()
        engine = DueDateAlertEngine()
        transaction = make_transaction(2)
        await engine.on_transaction_saved(repository, transaction, TODAY)
        await engine.on_transaction_saved(repository, transaction, TODAY)
        assert len(repository.drafts) == 2

    @pytest.mark.asyncio
    async def test_storage_failure_propagates(self):
        repository = RecordingRepository(fail=True)
        with pytest.raises(StorageFailure):
            await DueDateAlertEngine().on_transaction_saved(repository, make_transaction(1), TODAY)


class TestAlertKinds:
    def test_every_alert_kind_has_a_producer(self):
        # Overdue bills reuse the due-date kind with an "overdue" message
        assert [t.value for t in AlertType] == ["due_date"]
        assert [t.value for t in AlertReferenceType] == ["transaction"]
        draft = evaluate_transaction(make_transaction(-3), TODAY)
        assert draft.alert_type == AlertType.DUE_DATE
