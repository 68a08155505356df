import enum
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy import case
from sqlmodel import Session, col, func, select

from app.database import committing
from app.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.models.question import Answer, Category, Question, Vote
from app.models.user import User
from app.policy import Actor, can_modify

logger = logging.getLogger(__name__)

VOTE_VALUES = (1, -1)


class VoteOutcome(enum.Enum):
    CREATED = "created"
    REMOVED = "removed"
    CHANGED = "changed"


@dataclass
class QuestionSummary:
    question: Question
    username: str
    answers_count: int


@dataclass
class AnswerTally:
    answer: Answer
    upvotes: int
    downvotes: int


@dataclass
class QuestionDetail:
    question: Question
    username: str
    answers: list[AnswerTally]


class QAService:
    def __init__(self, session: Session):
        self.session = session

    # --- Reads ---

    def list_questions(self) -> list[QuestionSummary]:
        answers_count = (
            select(func.count(Answer.id))
            .where(Answer.question_id == Question.id)
            .scalar_subquery()
        )
        rows = self.session.exec(
            select(Question, User.username, answers_count)
            .join(User, Question.user_id == User.id)
            .order_by(Question.id)
        ).all()
        return [
            QuestionSummary(question=q, username=username, answers_count=count or 0)
            for q, username, count in rows
        ]

    def get_categories(self) -> list[Category]:
        return list(self.session.exec(select(Category).order_by(Category.id)).all())

    def get_question_detail(self, question_id: int) -> QuestionDetail:
        row = self.session.exec(
            select(Question, User.username)
            .join(User, Question.user_id == User.id)
            .where(Question.id == question_id)
        ).first()
        if not row:
            raise NotFoundError("Question not found")
        question, username = row

        upvotes = func.coalesce(func.sum(case((Vote.vote == 1, 1), else_=0)), 0)
        downvotes = func.coalesce(func.sum(case((Vote.vote == -1, 1), else_=0)), 0)
        rows = self.session.exec(
            select(Answer, upvotes, downvotes)
            .outerjoin(Vote, Vote.answer_id == Answer.id)
            .where(Answer.question_id == question_id)
            .group_by(Answer.id)
            .order_by(Answer.id)
        ).all()
        answers = [
            AnswerTally(answer=answer, upvotes=int(up), downvotes=int(down))
            for answer, up, down in rows
        ]
        return QuestionDetail(question=question, username=username, answers=answers)

    # --- Writes ---

    def submit_answer(self, question_id: int, content: str, actor: Actor) -> Answer:
        # A missing question surfaces as a foreign-key failure from the store.
        answer = Answer(question_id=question_id, user_id=actor.id, content=content)
        with committing(self.session):
            self.session.add(answer)
        self.session.refresh(answer)
        logger.info(f"User {actor.id} answered question {question_id}")
        return answer

    def vote(self, answer_id: int, value: int, actor: Actor) -> VoteOutcome:
        """Cast, flip or withdraw the actor's vote on an answer.

        Repeating the current vote withdraws it; the opposite value
        overwrites it in place.
        """
        if type(value) is not int or value not in VOTE_VALUES:
            raise ValidationError("Vote must be 1 or -1")

        existing = self.session.get(Vote, (answer_id, actor.id))
        with committing(self.session):
            if existing is None:
                self.session.add(Vote(answer_id=answer_id, user_id=actor.id, vote=value))
                outcome = VoteOutcome.CREATED
            elif existing.vote == value:
                self.session.delete(existing)
                outcome = VoteOutcome.REMOVED
            else:
                existing.vote = value
                self.session.add(existing)
                outcome = VoteOutcome.CHANGED
        logger.info(f"Vote {outcome.value} on answer {answer_id} by user {actor.id}")
        return outcome

    def add_question(
        self, title: str, category_id: int, description: str, actor: Actor
    ) -> Question:
        question = Question(
            title=title,
            category_id=category_id,
            description=description,
            user_id=actor.id,
        )
        with committing(self.session):
            self.session.add(question)
        self.session.refresh(question)
        logger.info(f"User {actor.id} asked question {question.id}")
        return question

    def update_question(
        self,
        question_id: int,
        title: str,
        category_id: int,
        description: str,
        actor: Actor,
    ) -> Question:
        question = self._get_modifiable_question(question_id, actor)

        question.title = title
        question.category_id = category_id
        question.description = description
        question.edited_at = datetime.now(UTC)
        with committing(self.session):
            self.session.add(question)
        self.session.refresh(question)
        logger.info(f"User {actor.id} edited question {question_id}")
        return question

    def delete_question(self, question_id: int, actor: Actor) -> None:
        """Delete a question with its answers and their votes.

        Children go first: votes, then answers, then the question. All three
        stages share one transaction.
        """
        question = self._get_modifiable_question(question_id, actor)

        answer_ids = select(Answer.id).where(Answer.question_id == question_id)
        with committing(self.session):
            votes = self.session.exec(
                select(Vote).where(col(Vote.answer_id).in_(answer_ids))
            ).all()
            for vote in votes:
                self.session.delete(vote)
            self.session.flush()

            answers = self.session.exec(
                select(Answer).where(Answer.question_id == question_id)
            ).all()
            for answer in answers:
                self.session.delete(answer)
            self.session.flush()

            self.session.delete(question)
        logger.info(
            f"User {actor.id} deleted question {question_id} "
            f"({len(answers)} answers, {len(votes)} votes)"
        )

    # --- Helpers ---

    def _get_modifiable_question(self, question_id: int, actor: Actor) -> Question:
        question = self.session.get(Question, question_id)
        if not question:
            raise NotFoundError("Question not found")
        if not can_modify(actor, question.user_id):
            logger.warning(
                f"User {actor.id} denied modifying question {question_id}"
            )
            raise ForbiddenError()
        return question
