"""Alert model."""

import enum
import uuid

from sqlalchemy import Boolean, Column, DateTime, Enum, Text, Uuid
from sqlalchemy.sql import func

from app.models import Base


class AlertType(str, enum.Enum):
    DUE_DATE = "due_date"


class AlertReferenceType(str, enum.Enum):
    TRANSACTION = "transaction"


class Alert(Base):
    __tablename__ = "alerts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    message = Column(Text, nullable=False)
    alert_type = Column(Enum(AlertType), nullable=False)
    # Not a foreign key: alerts outlive the record that produced them
    reference_id = Column(Uuid, nullable=True)
    reference_type = Column(Enum(AlertReferenceType), nullable=True)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
