from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_current_user, get_qa_service
from app.services.auth_service import AuthenticatedUser
from app.services.qa_service import QAService

router = APIRouter(prefix="/questions", tags=["questions"])


# --- Pydantic models ---


class QuestionRequest(BaseModel):
    title: str
    category_id: int
    description: str = ""


class AnswerRequest(BaseModel):
    content: str


class QuestionResponse(BaseModel):
    id: int
    title: str
    category_id: int
    description: str
    user_id: int
    username: str
    created_at: datetime
    edited_at: datetime | None


class QuestionSummaryResponse(QuestionResponse):
    answers_count: int


class AnswerResponse(BaseModel):
    id: int
    question_id: int
    user_id: int
    content: str
    created_at: datetime
    upvotes: int
    downvotes: int


class QuestionDetailResponse(BaseModel):
    question: QuestionResponse
    answers: list[AnswerResponse]


# --- Endpoints ---


@router.get("", response_model=list[QuestionSummaryResponse])
async def list_questions(qa: QAService = Depends(get_qa_service)):
    return [
        QuestionSummaryResponse(
            **item.question.model_dump(),
            username=item.username,
            answers_count=item.answers_count,
        )
        for item in qa.list_questions()
    ]


@router.get("/{question_id}", response_model=QuestionDetailResponse)
async def get_question(question_id: int, qa: QAService = Depends(get_qa_service)):
    detail = qa.get_question_detail(question_id)
    return QuestionDetailResponse(
        question=QuestionResponse(
            **detail.question.model_dump(), username=detail.username
        ),
        answers=[
            AnswerResponse(
                **tally.answer.model_dump(),
                upvotes=tally.upvotes,
                downvotes=tally.downvotes,
            )
            for tally in detail.answers
        ],
    )


@router.post("", status_code=201)
async def add_question(
    body: QuestionRequest,
    qa: QAService = Depends(get_qa_service),
    user: AuthenticatedUser = Depends(get_current_user),
):
    question = qa.add_question(body.title, body.category_id, body.description, user)
    return {"detail": "Question created", "id": question.id}


@router.put("/{question_id}")
async def update_question(
    question_id: int,
    body: QuestionRequest,
    qa: QAService = Depends(get_qa_service),
    user: AuthenticatedUser = Depends(get_current_user),
):
    qa.update_question(
        question_id, body.title, body.category_id, body.description, user
    )
    return {"detail": "Question updated"}


@router.delete("/{question_id}")
async def delete_question(
    question_id: int,
    qa: QAService = Depends(get_qa_service),
    user: AuthenticatedUser = Depends(get_current_user),
):
    qa.delete_question(question_id, user)
    return {"detail": "Question deleted"}


@router.post("/{question_id}/answers", status_code=201)
async def submit_answer(
    question_id: int,
    body: AnswerRequest,
    qa: QAService = Depends(get_qa_service),
    user: AuthenticatedUser = Depends(get_current_user),
):
    answer = qa.submit_answer(question_id, body.content, user)
    return {"detail": "Answer submitted", "id": answer.id}
