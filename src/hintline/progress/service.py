"""Progress viewer: a support specialist's read of a user's progress log."""

from sqlalchemy.ext.asyncio import AsyncSession

from hintline.access.policy import AccessPolicy, Operation
from hintline.audit.models import AuditAction
from hintline.audit.service import AuditRecorder
from hintline.common.exceptions import ForbiddenError, NotFoundError
from hintline.common.models import utcnow
from hintline.common.security import ActorIdentity
from hintline.support.models import ProgressLogModel, ProgressStatus
from hintline.support.store import SupportRecordStore


def find_stuck_log(logs: list[ProgressLogModel]) -> ProgressLogModel | None:
    """First STUCK entry of a newest-first log list."""
    for log in logs:
        if log.status == ProgressStatus.STUCK.value:
            return log
    return None


class ProgressService:
    """Progress reads, allowed only while the user has an open support request."""

    def __init__(
        self,
        store: SupportRecordStore,
        audit: AuditRecorder,
        policy: AccessPolicy,
    ):
        self.store = store
        self.audit = audit
        self.policy = policy

    async def view_progress(
        self,
        session: AsyncSession,
        actor: ActorIdentity,
        target_user_id: str,
    ) -> dict:
        self.policy.authorize(
            actor, Operation.VIEW_PROGRESS, target_user_id=target_user_id,
            message="Access denied. Support Specialist role required.",
        )

        user = await self.store.find_user(session, target_user_id)
        if user is None:
            raise NotFoundError("User not found.")

        support_request = await self.store.find_open_support_request(
            session, target_user_id,
        )
        if support_request is None:
            raise ForbiddenError("No active support request for this user.")

        logs = await self.store.find_progress_logs(session, target_user_id)
        stuck = find_stuck_log(logs)

        await self.audit.record(
            session, actor, AuditAction.VIEW_USER_PROGRESS,
            target_user_id=target_user_id,
            metadata={
                "supportRequestId": support_request.id,
                "viewedAt": utcnow().isoformat(),
            },
        )

        return {
            "user": user,
            "support_request": support_request,
            "progress_logs": logs,
            "stuck": stuck,
        }
