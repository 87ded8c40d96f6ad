from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from poster.api.deps import get_current_user
from poster.core.errors import ValidationError
from poster.models import User
from poster.schemas.image_generation import ImageGenerationCreate, ImageGenerationOut
from poster.schemas.project import DeleteResult
from poster.services.image_generation_service import ImageGenerationService
from poster.services.xai_service import XAIClient, get_xai_client

router = APIRouter(prefix="/image-generations", tags=["Image generations"])


@router.get("", response_model=List[ImageGenerationOut])
async def list_image_generations(
    project_id: Optional[int] = Query(None, alias="projectId"),
    user: User = Depends(get_current_user),
):
    if project_id is None:
        raise ValidationError("Project ID is required")
    requests = await ImageGenerationService.list_requests(user, project_id)
    return [await ImageGenerationOut.from_orm(request) for request in requests]


@router.post("", response_model=ImageGenerationOut)
async def create_image_generation(
    data: ImageGenerationCreate,
    user: User = Depends(get_current_user),
    client: XAIClient = Depends(get_xai_client),
):
    request = await ImageGenerationService.create_request(user, data, client)
    return await ImageGenerationOut.from_orm(request)


@router.put("/{request_id}", response_model=ImageGenerationOut)
async def update_image_generation(
    request_id: int,
    data: ImageGenerationCreate,
    user: User = Depends(get_current_user),
    client: XAIClient = Depends(get_xai_client),
):
    """Regenerates the images; previous images survive a failed call"""
    request = await ImageGenerationService.update_request(user, request_id, data, client)
    return await ImageGenerationOut.from_orm(request)


@router.delete("/{request_id}", response_model=DeleteResult)
async def delete_image_generation(request_id: int, user: User = Depends(get_current_user)):
    await ImageGenerationService.delete_request(user, request_id)
    return DeleteResult()
