"""SQLAlchemy models."""

from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import all models so Base.metadata.create_all() picks them up
from app.models.category import Category  # noqa: E402, F401
from app.models.transaction import Transaction  # noqa: E402, F401
from app.models.goal import Goal  # noqa: E402, F401
from app.models.alert import Alert  # noqa: E402, F401
