from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from poster.api.deps import get_current_user
from poster.core.errors import ValidationError
from poster.models import User
from poster.schemas.project import DeleteResult
from poster.schemas.text_summary import TextSummaryOut, TextSummaryRequest
from poster.services.summary_service import SummaryService
from poster.services.xai_service import XAIClient, get_xai_client

router = APIRouter(prefix="/text-summaries", tags=["Text summaries"])


@router.get("", response_model=List[TextSummaryOut])
async def list_summaries(
    project_id: Optional[int] = Query(None, alias="projectId"),
    user: User = Depends(get_current_user),
):
    if project_id is None:
        raise ValidationError("Project ID is required")
    return await SummaryService.list_summaries(user, project_id)


@router.post("", response_model=TextSummaryOut)
async def create_summary(
    data: TextSummaryRequest,
    user: User = Depends(get_current_user),
    client: XAIClient = Depends(get_xai_client),
):
    return await SummaryService.create_summary(user, data, client)


@router.put("/{summary_id}", response_model=TextSummaryOut)
async def update_summary(
    summary_id: int,
    data: TextSummaryRequest,
    user: User = Depends(get_current_user),
    client: XAIClient = Depends(get_xai_client),
):
    return await SummaryService.update_summary(user, summary_id, data, client)


@router.delete("/{summary_id}", response_model=DeleteResult)
async def delete_summary(summary_id: int, user: User = Depends(get_current_user)):
    await SummaryService.delete_summary(user, summary_id)
    return DeleteResult()
