"""SQLAlchemy models for users, support requests and progress logs."""

from enum import Enum

from sqlalchemy import ForeignKey, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from hintline.common.models import Base, TimestampMixin, generate_uuid


class SupportRequestStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class ProgressStatus(str, Enum):
    IN_PROGRESS = "IN_PROGRESS"
    STUCK = "STUCK"
    DONE = "DONE"


class UserModel(Base, TimestampMixin):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)


class SupportRequestModel(Base, TimestampMixin):
    __tablename__ = "support_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=SupportRequestStatus.OPEN.value, index=True
    )


class ProgressLogModel(Base, TimestampMixin):
    __tablename__ = "progress_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    step_id: Mapped[str] = mapped_column(String(100), nullable=False)
    puzzle_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ProgressStatus.IN_PROGRESS.value
    )
    details: Mapped[dict] = mapped_column(JSON, default=dict)
