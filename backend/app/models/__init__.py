from app.models.question import Answer, Category, Question, Vote
from app.models.session import UserSession
from app.models.user import User

__all__ = [
    "Answer",
    "Category",
    "Question",
    "User",
    "UserSession",
    "Vote",
]
