from datetime import datetime
from typing import List, Optional

from poster.models import CharacterConsistentImageRequest, StrengthType
from poster.schemas.base import CamelModel


class CharacterGenerationForm(CamelModel):
    """Fields of the multipart create/update form (the file travels separately)."""
    project_id: Optional[int] = None
    prompt: Optional[str] = None
    strength_type: Optional[str] = None
    model_id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    number_of_images: Optional[int] = None
    photo_real: Optional[bool] = None
    alchemy: Optional[bool] = None
    preset_style: Optional[str] = None
    style_uuid: Optional[str] = None
    contrast: Optional[float] = None


class CharacterGeneratedImageOut(CamelModel):
    id: int
    character_consistent_image_request_id: int
    image_url: str
    created_at: datetime
    updated_at: datetime


class CharacterGenerationOut(CamelModel):
    id: int
    project_id: int
    user_id: int
    name: Optional[str] = None
    prompt: str
    reference_image_url: str
    leonardo_image_id: str
    strength_type: StrengthType
    model_id: Optional[str] = None
    width: int
    height: int
    photo_real: bool
    alchemy: bool
    number_of_images: int
    preset_style: Optional[str] = None
    style_uuid: Optional[str] = None
    contrast: Optional[float] = None
    created_at: datetime
    updated_at: datetime
    character_consistent_generated_images: List[CharacterGeneratedImageOut] = []

    @classmethod
    async def from_orm(cls, obj: CharacterConsistentImageRequest) -> "CharacterGenerationOut":
        images = await obj.character_consistent_generated_images.all().order_by("id")
        data = {
            field: getattr(obj, field)
            for field in cls.model_fields
            if field != "character_consistent_generated_images"
        }
        return cls(
            **data,
            character_consistent_generated_images=[
                CharacterGeneratedImageOut.model_validate(image) for image in images
            ],
        )
