import logging

from jose import JWTError
from pydantic import BaseModel
from sqlmodel import Session, select

from app.auth import create_access_token, decode_token, hash_password, verify_password
from app.database import committing
from app.exceptions import InternalError, UnauthorizedError
from app.models.session import UserSession
from app.models.user import User

logger = logging.getLogger(__name__)


class AuthenticatedUser(BaseModel):
    """Identity carried by a verified bearer token."""

    id: int
    username: str
    role: str


class AuthService:
    def __init__(
        self,
        session: Session,
        secret_key: str,
        expire_minutes: int = 60,
        bcrypt_rounds: int = 10,
    ):
        self.session = session
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, username: str, email: str, password: str) -> User:
        try:
            password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        except ValueError:
            logger.exception("Error hashing password")
            raise InternalError()

        # No duplicate check: the unique columns reject a repeat at insert time.
        user = User(username=username, email=email, password_hash=password_hash)
        with committing(self.session):
            self.session.add(user)
        self.session.refresh(user)
        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def login(self, email: str, password: str) -> str:
        user = self.session.exec(select(User).where(User.email == email)).first()
        if not user or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for {email}")
            raise UnauthorizedError("Invalid credentials")

        token = create_access_token(
            user.id,
            user.username,
            user.role,
            self.secret_key,
            expire_minutes=self.expire_minutes,
        )
        with committing(self.session):
            self.session.add(UserSession(user_id=user.id, token=token))
        logger.info(f"User {user.id} logged in")
        return token

    def authenticate(self, token: str | None) -> AuthenticatedUser:
        """Resolve a bearer token to its user.

        The token must have been issued by ``login`` (it is present in the
        session store) and must also carry a valid signature and unexpired
        ``exp`` claim. Either check failing is ``UnauthorizedError``.
        """
        if not token:
            raise UnauthorizedError("Missing token")

        stored = self.session.exec(
            select(UserSession).where(UserSession.token == token)
        ).first()
        if not stored:
            raise UnauthorizedError("Invalid token")

        try:
            payload = decode_token(token, self.secret_key)
            return AuthenticatedUser(
                id=int(payload["id"]),
                username=payload["username"],
                role=payload["role"],
            )
        except (JWTError, KeyError, TypeError, ValueError):
            raise UnauthorizedError("Invalid token")
