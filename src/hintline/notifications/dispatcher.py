"""Notification dispatcher: per-user directory of live connections."""

import asyncio
import logging
from typing import Any, Protocol

from hintline.notifications.schemas import NotificationPayload

logger = logging.getLogger(__name__)


class Connection(Protocol):
    """Anything that can push a JSON frame, e.g. a starlette WebSocket."""

    async def send_json(self, data: Any) -> None: ...


class NotificationDispatcher:
    """Pushes payloads to every live connection a user has registered.

    Delivery is best-effort: nothing is queued for users who are offline and
    failed sends are not retried. The directory is guarded by a single lock;
    sends happen outside it on a snapshot of the user's connections, and each
    send is abandoned after ``send_timeout`` seconds.
    """

    def __init__(self, send_timeout: float = 5.0) -> None:
        self._connections: dict[str, set[Connection]] = {}
        self._lock = asyncio.Lock()
        self.send_timeout = send_timeout

    async def register(self, user_id: str, connection: Connection) -> None:
        if not user_id:
            return
        async with self._lock:
            self._connections.setdefault(user_id, set()).add(connection)
        logger.debug("Registered connection for user %s", user_id)

    async def unregister(self, connection: Connection) -> None:
        async with self._lock:
            for user_id, connections in list(self._connections.items()):
                if connection in connections:
                    connections.discard(connection)
                    if not connections:
                        del self._connections[user_id]
                    logger.debug("Unregistered connection for user %s", user_id)

    def connection_count(self, user_id: str) -> int:
        return len(self._connections.get(user_id, ()))

    async def dispatch(
        self, user_id: str, payload: NotificationPayload | dict[str, Any],
    ) -> int:
        """Send ``payload`` to all of the user's connections.

        Returns the number of connections the frame was delivered to. Never
        raises.
        """
        async with self._lock:
            targets = list(self._connections.get(user_id, ()))

        if not targets:
            logger.warning(
                "User %s not connected. Notification not delivered in real time.",
                user_id,
            )
            return 0

        frame = payload.to_frame() if isinstance(payload, NotificationPayload) else payload
        results = await asyncio.gather(
            *(self._send(conn, frame) for conn in targets),
            return_exceptions=True,
        )

        delivered = 0
        for result in results:
            if isinstance(result, BaseException):
                logger.warning(
                    "Failed to push notification to a connection of user %s: %r",
                    user_id, result,
                )
            else:
                delivered += 1
        return delivered

    async def _send(self, connection: Connection, frame: dict[str, Any]) -> None:
        await asyncio.wait_for(connection.send_json(frame), timeout=self.send_timeout)

    async def close(self) -> None:
        """Forget every connection (app shutdown)."""
        async with self._lock:
            self._connections.clear()
