"""Pydantic schemas for real-time notification frames."""

from enum import Enum
from typing import Optional

from hintline.common.schemas import CamelModel, UTCDateTime


class NotificationType(str, Enum):
    HINT = "HINT"
    FEEDBACK = "FEEDBACK"
    GENERIC = "GENERIC"


class NotificationPayload(CamelModel):
    type: NotificationType
    message: str
    hint_id: Optional[str] = None
    step_id: Optional[str] = None
    puzzle_id: Optional[str] = None
    sent_at: Optional[UTCDateTime] = None

    def to_frame(self) -> dict:
        """JSON-ready dict as sent over the socket."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
