"""Role and ownership rules for hint and progress operations."""

from enum import Enum

from hintline.common.exceptions import ForbiddenError
from hintline.common.security import ActorIdentity, Role


class Operation(str, Enum):
    VIEW_PROGRESS = "view_progress"
    SEND_HINT = "send_hint"
    LIST_OWN_HINTS = "list_own_hints"
    MARK_VIEWED = "mark_viewed"


class AccessPolicy:
    """Pure allow/deny decisions.

    Specialists and admins share one bypass rule for progress viewing, hint
    sending and hint listing. Marking a hint viewed depends on who the hint
    belongs to, so callers pass ``hint_owner_id`` once the hint is loaded.
    """

    def is_allowed(
        self,
        actor: ActorIdentity,
        operation: Operation,
        target_user_id: str | None = None,
        hint_owner_id: str | None = None,
    ) -> bool:
        if operation in (Operation.VIEW_PROGRESS, Operation.SEND_HINT):
            return actor.is_staff

        if operation == Operation.LIST_OWN_HINTS:
            if actor.is_staff:
                return True
            return actor.role == Role.USER and target_user_id is None

        if operation == Operation.MARK_VIEWED:
            if actor.role == Role.ADMIN:
                return True
            return (
                actor.role == Role.USER
                and hint_owner_id is not None
                and actor.id == hint_owner_id
            )

        return False

    def authorize(
        self,
        actor: ActorIdentity,
        operation: Operation,
        target_user_id: str | None = None,
        hint_owner_id: str | None = None,
        message: str = "Access denied.",
    ) -> None:
        """Raise ForbiddenError when ``is_allowed`` denies."""
        if not self.is_allowed(
            actor, operation,
            target_user_id=target_user_id, hint_owner_id=hint_owner_id,
        ):
            raise ForbiddenError(message)
