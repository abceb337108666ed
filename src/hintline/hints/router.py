"""Hint API router."""

from fastapi import APIRouter, Depends, Query, Request

from hintline.common.security import ActorIdentity, require_identity
from hintline.hints.schemas import (
    HintCreate,
    HintCreateResponse,
    HintDetail,
    HintListResponse,
    HintSummary,
    HintViewedResponse,
    HintViewState,
)

router = APIRouter()


def _get_service(request: Request):
    from hintline.deps import get_hint_service
    return get_hint_service(request.app.state.dispatcher)


def _get_db():
    from hintline.deps import get_db
    return get_db()


@router.post("/hint/{user_id}", response_model=HintCreateResponse, status_code=201)
async def send_hint(
    user_id: str,
    body: HintCreate,
    request: Request,
    actor: ActorIdentity = Depends(require_identity),
):
    svc = _get_service(request)
    db = _get_db()
    async with db.get_session() as session:
        hint = await svc.create_hint(
            session, actor, user_id,
            step_id=body.step_id,
            message=body.message,
            puzzle_id=body.puzzle_id,
        )
        response = HintCreateResponse(
            hint=HintSummary(
                id=hint.id,
                step_id=hint.step_id,
                puzzle_id=hint.puzzle_id,
                message=hint.message,
                sent_at=hint.created_at,
                status=hint.status,
            )
        )

    # Pushed only after the session block has committed the hint.
    await svc.notify_hint(hint)
    return response


@router.get("/hint", response_model=HintListResponse)
async def get_user_hints(
    request: Request,
    user_id: str | None = Query(None, alias="userId"),
    actor: ActorIdentity = Depends(require_identity),
):
    svc = _get_service(request)
    db = _get_db()
    async with db.get_session() as session:
        hints = await svc.list_hints(session, actor, target_user_id=user_id)
        return HintListResponse(
            hints=[HintDetail.model_validate(h) for h in hints]
        )


@router.post("/hint/view/{hint_id}", response_model=HintViewedResponse)
async def mark_hint_as_viewed(
    hint_id: str,
    request: Request,
    actor: ActorIdentity = Depends(require_identity),
):
    svc = _get_service(request)
    db = _get_db()
    async with db.get_session() as session:
        hint = await svc.mark_viewed(session, actor, hint_id)
        return HintViewedResponse(
            hint=HintViewState(
                id=hint.id, status=hint.status, viewed_at=hint.viewed_at,
            )
        )
