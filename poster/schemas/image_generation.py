from datetime import datetime
from typing import List, Optional

from poster.models import ImageGenerationRequest
from poster.schemas.base import CamelModel


class ImageGenerationCreate(CamelModel):
    project_id: Optional[int] = None
    prompt: Optional[str] = None
    number_of_images: Optional[int] = None


class GeneratedImageOut(CamelModel):
    id: int
    image_generation_request_id: int
    image_url: str
    created_at: datetime
    updated_at: datetime


class ImageGenerationOut(CamelModel):
    id: int
    project_id: int
    user_id: int
    name: Optional[str] = None
    prompt: str
    number_of_images: int
    created_at: datetime
    updated_at: datetime
    generated_images: List[GeneratedImageOut] = []

    @classmethod
    async def from_orm(cls, obj: ImageGenerationRequest) -> "ImageGenerationOut":
        images = await obj.generated_images.all().order_by("id")
        return cls(
            id=obj.id,
            project_id=obj.project_id,
            user_id=obj.user_id,
            name=obj.name,
            prompt=obj.prompt,
            number_of_images=obj.number_of_images,
            created_at=obj.created_at,
            updated_at=obj.updated_at,
            generated_images=[GeneratedImageOut.model_validate(image) for image in images],
        )
