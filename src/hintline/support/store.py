"""Support record store: the queries the hint pipeline runs against the DB."""

from datetime import datetime
from typing import Any

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from hintline.hints.models import HintModel, HintStatus
from hintline.support.models import (
    ProgressLogModel,
    ProgressStatus,
    SupportRequestModel,
    SupportRequestStatus,
    UserModel,
)


class SupportRecordStore:
    """Single-record reads and writes for users, requests, hints and progress."""

    # ── Users & support requests ──

    async def find_user(
        self, session: AsyncSession, user_id: str,
    ) -> UserModel | None:
        return await session.get(UserModel, user_id)

    async def find_open_support_request(
        self, session: AsyncSession, user_id: str,
    ) -> SupportRequestModel | None:
        """First OPEN request for the user, oldest first.

        Uniqueness of OPEN requests is not enforced here.
        """
        result = await session.execute(
            select(SupportRequestModel)
            .where(
                and_(
                    SupportRequestModel.user_id == user_id,
                    SupportRequestModel.status == SupportRequestStatus.OPEN.value,
                )
            )
            .order_by(SupportRequestModel.created_at.asc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    # ── Hints ──

    async def create_hint(
        self,
        session: AsyncSession,
        user_id: str,
        support_request_id: str,
        step_id: str,
        message: str,
        sent_by_id: str,
        sent_by_role: str,
        puzzle_id: str | None = None,
    ) -> HintModel:
        hint = HintModel(
            user_id=user_id,
            support_request_id=support_request_id,
            step_id=step_id,
            puzzle_id=puzzle_id,
            message=message,
            sent_by_id=sent_by_id,
            sent_by_role=sent_by_role,
            status=HintStatus.UNREAD.value,
        )
        session.add(hint)
        await session.flush()
        return hint

    async def find_hints(
        self, session: AsyncSession, user_id: str,
    ) -> list[HintModel]:
        """All hints for a user, newest first."""
        result = await session.execute(
            select(HintModel)
            .where(HintModel.user_id == user_id)
            .order_by(HintModel.created_at.desc())
        )
        return list(result.scalars().all())

    async def find_hint(
        self, session: AsyncSession, hint_id: str,
    ) -> HintModel | None:
        return await session.get(HintModel, hint_id)

    async def update_hint_status(
        self,
        session: AsyncSession,
        hint_id: str,
        status: HintStatus,
        viewed_at: datetime | None = None,
    ) -> HintModel | None:
        hint = await self.find_hint(session, hint_id)
        if hint is None:
            return None
        hint.status = HintStatus(status).value
        hint.viewed_at = viewed_at
        await session.flush()
        return hint

    # ── Progress ──

    async def find_progress_logs(
        self, session: AsyncSession, user_id: str,
    ) -> list[ProgressLogModel]:
        """All progress logs for a user, most recently updated first."""
        result = await session.execute(
            select(ProgressLogModel)
            .where(ProgressLogModel.user_id == user_id)
            .order_by(ProgressLogModel.updated_at.desc())
        )
        return list(result.scalars().all())

    # ── Seeding writes (request intake and progress tracking live elsewhere) ──

    async def create_user(
        self, session: AsyncSession, username: str, user_id: str | None = None,
    ) -> UserModel:
        user = UserModel(username=username)
        if user_id is not None:
            user.id = user_id
        session.add(user)
        await session.flush()
        return user

    async def open_support_request(
        self, session: AsyncSession, user_id: str,
    ) -> SupportRequestModel:
        request = SupportRequestModel(
            user_id=user_id, status=SupportRequestStatus.OPEN.value,
        )
        session.add(request)
        await session.flush()
        return request

    async def close_support_request(
        self, session: AsyncSession, request_id: str,
    ) -> SupportRequestModel | None:
        request = await session.get(SupportRequestModel, request_id)
        if request is None:
            return None
        request.status = SupportRequestStatus.CLOSED.value
        await session.flush()
        return request

    async def record_progress(
        self,
        session: AsyncSession,
        user_id: str,
        step_id: str,
        status: ProgressStatus | str = ProgressStatus.IN_PROGRESS,
        puzzle_id: str | None = None,
        details: dict[str, Any] | None = None,
        updated_at: datetime | None = None,
    ) -> ProgressLogModel:
        log = ProgressLogModel(
            user_id=user_id,
            step_id=step_id,
            puzzle_id=puzzle_id,
            status=ProgressStatus(status).value,
            details=details or {},
        )
        if updated_at is not None:
            log.updated_at = updated_at
        session.add(log)
        await session.flush()
        return log
