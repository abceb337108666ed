"""WebSocket endpoint through which users receive hints in real time."""

import json
import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect, status

from hintline.common.exceptions import UnauthenticatedError
from hintline.common.security import decode_identity

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws/notifications")
async def notifications_websocket(
    websocket: WebSocket,
    token: str | None = Query(default=None),
):
    """
    Live notification channel for one user session.

    Connect:  ws://host/ws/notifications?token=<jwt>

    The socket belongs to the token's subject and is registered as soon as it
    is accepted.

    Server -> Client:
      - registered: {type, userId}
      - notification frames: {type: HINT|FEEDBACK|GENERIC, message, ...}
      - pong: {type}
      - error: {type, error}

    Client -> Server:
      - register: {type}
      - ping: {type}
    """
    try:
        identity = decode_identity(token)
    except UnauthenticatedError as e:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=e.message)
        return

    dispatcher = websocket.app.state.dispatcher
    await websocket.accept()
    await dispatcher.register(identity.id, websocket)
    await websocket.send_json({"type": "registered", "userId": identity.id})

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json({"type": "error", "error": "Invalid JSON"})
                continue

            kind = data.get("type") if isinstance(data, dict) else None
            if kind == "register":
                await dispatcher.register(identity.id, websocket)
                await websocket.send_json({"type": "registered", "userId": identity.id})
            elif kind == "ping":
                await websocket.send_json({"type": "pong"})
            else:
                await websocket.send_json(
                    {"type": "error", "error": f"Unknown message type: {kind!r}"}
                )
    except WebSocketDisconnect:
        pass
    finally:
        await dispatcher.unregister(websocket)
        logger.debug("Notification socket for user %s closed", identity.id)
