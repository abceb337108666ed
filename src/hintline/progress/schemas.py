"""Pydantic schemas for the progress viewer."""

from typing import Any, Optional

from hintline.common.schemas import CamelModel, UTCDateTime


class ProgressUser(CamelModel):
    id: str
    username: str


class SupportRequestSummary(CamelModel):
    id: str
    created_at: UTCDateTime


class ProgressLogEntry(CamelModel):
    id: str
    step_id: str
    puzzle_id: Optional[str] = None
    status: str
    updated_at: UTCDateTime
    details: dict[str, Any] = {}


class StuckStep(CamelModel):
    step_id: str
    puzzle_id: Optional[str] = None
    status: str
    updated_at: UTCDateTime
    details: dict[str, Any] = {}


class ProgressResponse(CamelModel):
    user: ProgressUser
    support_request: SupportRequestSummary
    progress_logs: list[ProgressLogEntry]
    stuck_step_or_puzzle: Optional[StuckStep] = None
