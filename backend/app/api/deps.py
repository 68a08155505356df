from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from app.config import settings
from app.database import get_session
from app.exceptions import ForbiddenError
from app.policy import is_admin
from app.services.auth_service import AuthenticatedUser, AuthService
from app.services.qa_service import QAService

# auto_error=False so a missing or malformed header is a 401, not FastAPI's 403.
security = HTTPBearer(auto_error=False)


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(
        session,
        settings.secret_key,
        expire_minutes=settings.access_token_expire_minutes,
        bcrypt_rounds=settings.bcrypt_rounds,
    )


def get_qa_service(session: Session = Depends(get_session)) -> QAService:
    return QAService(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    auth: AuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    return auth.authenticate(credentials.credentials if credentials else None)


async def get_admin_user(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    if not is_admin(user):
        raise ForbiddenError("Admin required")
    return user
