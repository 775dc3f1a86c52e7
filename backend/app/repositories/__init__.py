"""Storage collaborators used by the services."""

from app.repositories.base import FinanceRepository  # noqa: F401
from app.repositories.finance_repository import SqlAlchemyFinanceRepository  # noqa: F401
