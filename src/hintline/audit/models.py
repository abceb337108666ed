"""SQLAlchemy model for the support-interaction audit log."""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from hintline.common.models import Base, generate_uuid, utcnow


class AuditAction(str, Enum):
    VIEW_USER_PROGRESS = "VIEW_USER_PROGRESS"
    SEND_HINT = "SEND_HINT"
    VIEW_HINT_LIST = "VIEW_HINT_LIST"
    VIEW_HINT = "VIEW_HINT"


class AuditEventModel(Base):
    __tablename__ = "audit_events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    actor_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    actor_role: Mapped[str] = mapped_column(String(50), nullable=False)
    action: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    target_user_id: Mapped[str | None] = mapped_column(
        String(36), nullable=True, index=True
    )
    metadata_: Mapped[dict] = mapped_column("metadata", JSON, default=dict)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
