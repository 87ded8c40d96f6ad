from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from poster.api.deps import get_current_user
from poster.core.errors import ValidationError
from poster.models import User
from poster.schemas.character_generation import CharacterGenerationForm, CharacterGenerationOut
from poster.schemas.project import DeleteResult
from poster.services.blob_service import BlobStorageClient, get_blob_client
from poster.services.character_service import CharacterService, ReferenceImage
from poster.services.leonardo_service import LeonardoClient, get_leonardo_client
from poster.services.xai_service import XAIClient, get_xai_client

router = APIRouter(prefix="/character-consistent-generations", tags=["Character consistent generations"])


async def character_form(
    project_id: Optional[int] = Form(None, alias="projectId"),
    prompt: Optional[str] = Form(None),
    strength_type: Optional[str] = Form(None, alias="strengthType"),
    model_id: Optional[str] = Form(None, alias="modelId"),
    width: Optional[int] = Form(None),
    height: Optional[int] = Form(None),
    number_of_images: Optional[int] = Form(None, alias="numberOfImages"),
    photo_real: Optional[bool] = Form(None, alias="photoReal"),
    alchemy: Optional[bool] = Form(None),
    preset_style: Optional[str] = Form(None, alias="presetStyle"),
    style_uuid: Optional[str] = Form(None, alias="styleUuid"),
    contrast: Optional[float] = Form(None),
) -> CharacterGenerationForm:
    return CharacterGenerationForm(
        project_id=project_id,
        prompt=prompt,
        strength_type=strength_type,
        model_id=model_id,
        width=width,
        height=height,
        number_of_images=number_of_images,
        photo_real=photo_real,
        alchemy=alchemy,
        preset_style=preset_style,
        style_uuid=style_uuid,
        contrast=contrast,
    )


async def read_reference(upload: Optional[UploadFile]) -> Optional[ReferenceImage]:
    if upload is None:
        return None
    content = await upload.read()
    return ReferenceImage(
        filename=upload.filename or "reference.jpg",
        content=content,
        content_type=upload.content_type,
    )


@router.get("", response_model=List[CharacterGenerationOut])
async def list_character_generations(
    project_id: Optional[int] = Query(None, alias="projectId"),
    user: User = Depends(get_current_user),
):
    if project_id is None:
        raise ValidationError("Project ID is required")
    requests = await CharacterService.list_requests(user, project_id)
    return [await CharacterGenerationOut.from_orm(request) for request in requests]


@router.post("", response_model=CharacterGenerationOut)
async def create_character_generation(
    form: CharacterGenerationForm = Depends(character_form),
    reference_image: Optional[UploadFile] = File(None, alias="referenceImage"),
    user: User = Depends(get_current_user),
    xai: XAIClient = Depends(get_xai_client),
    leonardo: LeonardoClient = Depends(get_leonardo_client),
    blob: BlobStorageClient = Depends(get_blob_client),
):
    """
    Multipart form: `referenceImage` file plus the generation fields.
    Waits for the Leonardo job before answering.
    """
    reference = await read_reference(reference_image)
    request = await CharacterService.create_request(user, form, reference, xai, leonardo, blob)
    return await CharacterGenerationOut.from_orm(request)


@router.put("/{request_id}", response_model=CharacterGenerationOut)
async def update_character_generation(
    request_id: int,
    form: CharacterGenerationForm = Depends(character_form),
    reference_image: Optional[UploadFile] = File(None, alias="referenceImage"),
    user: User = Depends(get_current_user),
    xai: XAIClient = Depends(get_xai_client),
    leonardo: LeonardoClient = Depends(get_leonardo_client),
    blob: BlobStorageClient = Depends(get_blob_client),
):
    reference = await read_reference(reference_image)
    request = await CharacterService.update_request(user, request_id, form, reference, xai, leonardo, blob)
    return await CharacterGenerationOut.from_orm(request)


@router.delete("/{request_id}", response_model=DeleteResult)
async def delete_character_generation(request_id: int, user: User = Depends(get_current_user)):
    await CharacterService.delete_request(user, request_id)
    return DeleteResult()
