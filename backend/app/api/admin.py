from fastapi import APIRouter, Depends

from app.api.deps import get_admin_user
from app.services.auth_service import AuthenticatedUser

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("")
async def admin_panel(_admin: AuthenticatedUser = Depends(get_admin_user)):
    return {"message": "Welcome to the admin panel"}
