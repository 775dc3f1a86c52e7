"""Goal model."""

import uuid
from decimal import Decimal

from sqlalchemy import Column, Date, DateTime, Numeric, String, Text, Uuid
from sqlalchemy.sql import func

from app.models import Base


class Goal(Base):
    __tablename__ = "goals"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    target_amount = Column(Numeric(precision=18, scale=2), nullable=False)
    current_amount = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    target_date = Column(Date, nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
