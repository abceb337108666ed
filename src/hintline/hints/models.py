"""SQLAlchemy model for hints sent by support staff."""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hintline.common.models import Base, TimestampMixin, generate_uuid


class HintStatus(str, Enum):
    UNREAD = "UNREAD"
    VIEWED = "VIEWED"


class HintModel(Base, TimestampMixin):
    __tablename__ = "hints"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    # Subject: the user the hint is for.
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    support_request_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("support_requests.id"), nullable=False, index=True
    )
    step_id: Mapped[str] = mapped_column(String(100), nullable=False)
    puzzle_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    # Author: the specialist or admin who sent it.
    sent_by_id: Mapped[str] = mapped_column(String(36), nullable=False)
    sent_by_role: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=HintStatus.UNREAD.value
    )
    viewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
