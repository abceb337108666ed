"""Hintline: support-specialist hints delivered to users in real time."""

from hintline.access.policy import AccessPolicy, Operation
from hintline.common.security import ActorIdentity, Role
from hintline.notifications.dispatcher import NotificationDispatcher

__all__ = [
    "AccessPolicy",
    "Operation",
    "ActorIdentity",
    "Role",
    "NotificationDispatcher",
]
__version__ = "0.1.0"
