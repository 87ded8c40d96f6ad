import logging
from typing import List, Optional

from tortoise.transactions import in_transaction

from poster.core.errors import ValidationError
from poster.models import GeneratedImage, ImageGenerationRequest, User
from poster.schemas.image_generation import ImageGenerationCreate
from poster.services import naming_service
from poster.services.ownership import get_owned_or_404, update_owned
from poster.services.project_service import ProjectService
from poster.services.xai_service import XAIClient

logger = logging.getLogger("image_generation_service")

LABEL = "Image generation request"
MIN_IMAGES = 1
MAX_IMAGES = 10


def validate_request(prompt: Optional[str], number_of_images: Optional[int]) -> tuple[str, int]:
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt is required")
    if not number_of_images or not MIN_IMAGES <= number_of_images <= MAX_IMAGES:
        raise ValidationError(f"Number of images must be between {MIN_IMAGES} and {MAX_IMAGES}")
    return prompt, number_of_images


async def _store_images(request_id: int, urls: List[str]) -> None:
    if urls:
        await GeneratedImage.bulk_create(
            [GeneratedImage(image_generation_request_id=request_id, image_url=url) for url in urls]
        )


class ImageGenerationService:
    @staticmethod
    async def list_requests(user: User, project_id: int) -> List[ImageGenerationRequest]:
        return await ImageGenerationRequest.filter(project_id=project_id, user_id=user.id).order_by(
            "-updated_at", "-id"
        )

    @staticmethod
    async def create_request(user: User, data: ImageGenerationCreate, client: XAIClient) -> ImageGenerationRequest:
        prompt, number_of_images = validate_request(data.prompt, data.number_of_images)
        project = await ProjectService.require_owned_project(user, data.project_id)

        name = await naming_service.title_for_images(client, prompt)
        request = await ImageGenerationRequest.create(
            project=project,
            user=user,
            name=name,
            prompt=prompt,
            number_of_images=number_of_images,
        )

        # A failed call leaves the request without images
        urls = await client.generate_images(prompt, number_of_images)
        await _store_images(request.id, urls)
        logger.info("Image request %s stored %s image(s)", request.id, len(urls))
        return request

    @staticmethod
    async def update_request(
        user: User,
        request_id: int,
        data: ImageGenerationCreate,
        client: XAIClient,
    ) -> ImageGenerationRequest:
        """
        Regenerate the images of an existing request.

        The previous images are only replaced once the new call succeeded.
        """
        prompt, number_of_images = validate_request(data.prompt, data.number_of_images)
        existing = await get_owned_or_404(ImageGenerationRequest, request_id, user, LABEL)

        name = existing.name
        if prompt != existing.prompt:
            name = await naming_service.title_for_images(client, prompt)

        urls = await client.generate_images(prompt, number_of_images)

        async with in_transaction():
            await update_owned(
                ImageGenerationRequest,
                request_id,
                user,
                LABEL,
                name=name,
                prompt=prompt,
                number_of_images=number_of_images,
            )
            await GeneratedImage.filter(image_generation_request_id=request_id).delete()
            await _store_images(request_id, urls)

        logger.info("Image request %s regenerated with %s image(s)", request_id, len(urls))
        return await ImageGenerationRequest.get(id=request_id)

    @staticmethod
    async def delete_request(user: User, request_id: int) -> None:
        await get_owned_or_404(ImageGenerationRequest, request_id, user, LABEL)
        async with in_transaction():
            await GeneratedImage.filter(image_generation_request_id=request_id).delete()
            await ImageGenerationRequest.filter(id=request_id, user_id=user.id).delete()
