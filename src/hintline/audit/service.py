"""Audit recorder: append-only log of access-sensitive support actions."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from hintline.audit.models import AuditAction, AuditEventModel
from hintline.common.models import utcnow
from hintline.common.security import ActorIdentity

logger = logging.getLogger(__name__)


class AuditRecorder:
    """Write-only sink for audit events.

    ``record`` never raises. The event is written inside a savepoint, so a
    failed append is rolled back on its own and the caller's transaction
    (the hint or progress operation being audited) still commits.
    """

    async def record(
        self,
        session: AsyncSession,
        actor: ActorIdentity,
        action: AuditAction,
        target_user_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> AuditEventModel | None:
        try:
            return await self._append(
                session, actor, action, target_user_id, metadata or {},
            )
        except Exception:
            logger.exception(
                "Audit log error: %s by %s (%s) not recorded",
                AuditAction(action).value, actor.id, actor.role.value,
            )
            return None

    async def _append(
        self,
        session: AsyncSession,
        actor: ActorIdentity,
        action: AuditAction,
        target_user_id: str | None,
        metadata: dict[str, Any],
    ) -> AuditEventModel:
        async with session.begin_nested():
            event = AuditEventModel(
                actor_id=actor.id,
                actor_role=actor.role.value,
                action=AuditAction(action).value,
                target_user_id=target_user_id,
                metadata_=metadata,
                timestamp=utcnow(),
            )
            session.add(event)
            await session.flush()
        return event
