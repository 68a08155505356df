from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


class UserSession(SQLModel, table=True):
    """A token issued at login. Expiry is carried by the token itself."""

    __tablename__ = "sessions"

    id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    token: str = Field(index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
