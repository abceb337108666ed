"""Hint lifecycle: send, list and mark-viewed."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from hintline.access.policy import AccessPolicy, Operation
from hintline.audit.models import AuditAction
from hintline.audit.service import AuditRecorder
from hintline.common.exceptions import ForbiddenError, NotFoundError, ValidationError
from hintline.common.models import utcnow
from hintline.common.security import ActorIdentity
from hintline.hints.models import HintModel, HintStatus
from hintline.notifications.dispatcher import NotificationDispatcher
from hintline.notifications.schemas import NotificationPayload, NotificationType
from hintline.support.store import SupportRecordStore

logger = logging.getLogger(__name__)


class HintService:
    """Hint operations for support staff and the users they help.

    A hint can only be created while its target user has an OPEN support
    request. The audit event is attempted on the caller's session and cannot
    undo the hint. The real-time push is a separate step, ``notify_hint``,
    which callers run once the hint's transaction has committed.
    """

    def __init__(
        self,
        store: SupportRecordStore,
        audit: AuditRecorder,
        policy: AccessPolicy,
        dispatcher: NotificationDispatcher,
    ):
        self.store = store
        self.audit = audit
        self.policy = policy
        self.dispatcher = dispatcher

    async def create_hint(
        self,
        session: AsyncSession,
        actor: ActorIdentity,
        target_user_id: str,
        step_id: str | None,
        message: str | None,
        puzzle_id: str | None = None,
    ) -> HintModel:
        """Send a hint or feedback message to a user who asked for support."""
        self.policy.authorize(
            actor, Operation.SEND_HINT, target_user_id=target_user_id,
            message="Access denied. Support Specialist role required.",
        )

        if not step_id or not message:
            raise ValidationError("stepId and message are required.")

        user = await self.store.find_user(session, target_user_id)
        if user is None:
            raise NotFoundError("User not found.")

        support_request = await self.store.find_open_support_request(
            session, target_user_id,
        )
        if support_request is None:
            raise ForbiddenError("Cannot send hint: user has not requested support.")

        hint = await self.store.create_hint(
            session,
            user_id=target_user_id,
            support_request_id=support_request.id,
            step_id=step_id,
            message=message,
            sent_by_id=actor.id,
            sent_by_role=actor.role.value,
            puzzle_id=puzzle_id,
        )

        await self.audit.record(
            session, actor, AuditAction.SEND_HINT,
            target_user_id=target_user_id,
            metadata={
                "hintId": hint.id,
                "supportRequestId": support_request.id,
                "stepId": step_id,
                "puzzleId": puzzle_id,
            },
        )

        return hint

    async def list_hints(
        self,
        session: AsyncSession,
        actor: ActorIdentity,
        target_user_id: str | None = None,
    ) -> list[HintModel]:
        """Hints for a user, newest first.

        Staff must name the user. A plain user always gets their own hints;
        a target they pass is dropped rather than rejected.
        """
        if actor.is_staff:
            if not target_user_id:
                raise ValidationError("User ID is required.")
            target, requested = target_user_id, target_user_id
        else:
            if target_user_id and target_user_id != actor.id:
                logger.debug(
                    "Ignoring target %s requested by user %s", target_user_id, actor.id,
                )
            target, requested = actor.id, None

        self.policy.authorize(actor, Operation.LIST_OWN_HINTS, target_user_id=requested)

        hints = await self.store.find_hints(session, target)

        await self.audit.record(
            session, actor, AuditAction.VIEW_HINT_LIST,
            target_user_id=target, metadata={},
        )
        return hints

    async def mark_viewed(
        self,
        session: AsyncSession,
        actor: ActorIdentity,
        hint_id: str,
    ) -> HintModel:
        """Flip a hint to VIEWED. Repeat calls refresh ``viewed_at``."""
        hint = await self.store.find_hint(session, hint_id)
        if hint is None:
            raise NotFoundError("Hint not found.")

        self.policy.authorize(actor, Operation.MARK_VIEWED, hint_owner_id=hint.user_id)

        viewed_at = utcnow()
        updated = await self.store.update_hint_status(
            session, hint.id, HintStatus.VIEWED, viewed_at=viewed_at,
        )

        await self.audit.record(
            session, actor, AuditAction.VIEW_HINT,
            target_user_id=hint.user_id,
            metadata={"hintId": hint.id, "viewedAt": viewed_at.isoformat()},
        )
        return updated

    async def notify_hint(self, hint: HintModel) -> int:
        """Push a committed hint to the user's live connections.

        Best-effort: returns the number of connections reached and never
        raises.
        """
        payload = NotificationPayload(
            type=NotificationType.HINT,
            hint_id=hint.id,
            message=hint.message,
            step_id=hint.step_id,
            puzzle_id=hint.puzzle_id,
            sent_at=hint.created_at,
        )
        try:
            return await self.dispatcher.dispatch(hint.user_id, payload)
        except Exception:
            logger.exception("Notification dispatch to user %s failed", hint.user_id)
            return 0
