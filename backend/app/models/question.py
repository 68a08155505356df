from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    description: str = Field(default="")


class Question(SQLModel, table=True):
    __tablename__ = "questions"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    category_id: int = Field(foreign_key="categories.id", index=True)
    description: str = Field(default="")
    user_id: int = Field(foreign_key="users.id", index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    edited_at: datetime | None = Field(default=None)


class Answer(SQLModel, table=True):
    __tablename__ = "answers"

    id: int | None = Field(default=None, primary_key=True)
    question_id: int = Field(foreign_key="questions.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class Vote(SQLModel, table=True):
    __tablename__ = "votes"

    # One vote per (answer, user); the pair is the key.
    answer_id: int = Field(foreign_key="answers.id", primary_key=True)
    user_id: int = Field(foreign_key="users.id", primary_key=True)
    vote: int  # 1 | -1
