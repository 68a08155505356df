from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from app.api.deps import get_current_user, get_qa_service
from app.services.auth_service import AuthenticatedUser
from app.services.qa_service import QAService, VoteOutcome

router = APIRouter(prefix="/answers", tags=["answers"])


class VoteRequest(BaseModel):
    # Strict, so JSON true or 1.0 is not taken as an upvote.
    vote: Annotated[Literal[1, -1], Field(strict=True)]


@router.post("/{answer_id}/vote")
async def vote(
    answer_id: int,
    body: VoteRequest,
    response: Response,
    qa: QAService = Depends(get_qa_service),
    user: AuthenticatedUser = Depends(get_current_user),
):
    outcome = qa.vote(answer_id, body.vote, user)
    response.status_code = 201 if outcome is VoteOutcome.CREATED else 200
    return {"detail": f"Vote {outcome.value}"}
