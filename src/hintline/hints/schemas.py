"""Pydantic schemas for hint endpoints."""

from typing import Optional

from hintline.common.schemas import CamelModel, UTCDateTime


class HintCreate(CamelModel):
    # Presence is checked by HintService so the error maps to VALIDATION_ERROR.
    step_id: Optional[str] = None
    puzzle_id: Optional[str] = None
    message: Optional[str] = None


class HintSummary(CamelModel):
    id: str
    step_id: str
    puzzle_id: Optional[str] = None
    message: str
    sent_at: UTCDateTime
    status: str


class HintCreateResponse(CamelModel):
    message: str = "Hint/feedback sent successfully."
    hint: HintSummary


class HintDetail(CamelModel):
    id: str
    step_id: str
    puzzle_id: Optional[str] = None
    message: str
    status: str
    created_at: UTCDateTime
    viewed_at: Optional[UTCDateTime] = None
    sent_by_id: str
    sent_by_role: str


class HintListResponse(CamelModel):
    hints: list[HintDetail]


class HintViewState(CamelModel):
    id: str
    status: str
    viewed_at: Optional[UTCDateTime] = None


class HintViewedResponse(CamelModel):
    message: str = "Hint marked as viewed."
    hint: HintViewState
