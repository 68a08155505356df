from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.deps import get_qa_service
from app.services.qa_service import QAService

router = APIRouter(prefix="/categories", tags=["categories"])


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str


@router.get("", response_model=list[CategoryResponse])
async def list_categories(qa: QAService = Depends(get_qa_service)):
    return qa.get_categories()
