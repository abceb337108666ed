"""Progress viewer API router."""

from fastapi import APIRouter, Depends

from hintline.common.security import ActorIdentity, require_identity
from hintline.progress.schemas import (
    ProgressLogEntry,
    ProgressResponse,
    ProgressUser,
    StuckStep,
    SupportRequestSummary,
)

router = APIRouter()


def _get_service():
    from hintline.deps import get_progress_service
    return get_progress_service()


def _get_db():
    from hintline.deps import get_db
    return get_db()


@router.get("/progress/{user_id}", response_model=ProgressResponse)
async def get_user_progress(
    user_id: str, actor: ActorIdentity = Depends(require_identity),
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        view = await svc.view_progress(session, actor, user_id)
        user = view["user"]
        stuck = view["stuck"]
        return ProgressResponse(
            user=ProgressUser(id=user.id, username=user.username),
            support_request=SupportRequestSummary(
                id=view["support_request"].id,
                created_at=view["support_request"].created_at,
            ),
            progress_logs=[
                ProgressLogEntry(
                    id=log.id, step_id=log.step_id, puzzle_id=log.puzzle_id,
                    status=log.status, updated_at=log.updated_at,
                    details=log.details or {},
                )
                for log in view["progress_logs"]
            ],
            stuck_step_or_puzzle=StuckStep(
                step_id=stuck.step_id, puzzle_id=stuck.puzzle_id,
                status=stuck.status, updated_at=stuck.updated_at,
                details=stuck.details or {},
            ) if stuck else None,
        )
