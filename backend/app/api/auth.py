from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_auth_service
from app.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


class RegisterRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str


@router.post("/register", status_code=201)
async def register(
    body: RegisterRequest,
    auth: AuthService = Depends(get_auth_service),
):
    auth.register(body.username, body.email, body.password)
    return {"detail": "User registered"}


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    return TokenResponse(token=auth.login(body.email, body.password))
