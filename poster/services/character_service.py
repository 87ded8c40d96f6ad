"""
Character-consistent (reference-conditioned) generation.

Flow per request: store the reference image, hand it to Leonardo, name the
record, build the model-specific payload, submit the job, wait for it and
persist the returned image URLs.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from tortoise.transactions import in_transaction

from poster.core.errors import PosterError, ValidationError
from poster.models import (
    CharacterConsistentGeneratedImage,
    CharacterConsistentImageRequest,
    LeonardoModel,
    StrengthType,
    User,
)
from poster.schemas.character_generation import CharacterGenerationForm
from poster.services import naming_service
from poster.services.blob_service import BlobStorageClient, reference_image_key
from poster.services.leonardo_payloads import GenerationParams, build_generation_payload
from poster.services.leonardo_service import LeonardoClient
from poster.services.ownership import get_owned_or_404, update_owned
from poster.services.project_service import ProjectService
from poster.services.xai_service import XAIClient

logger = logging.getLogger("character_service")

LABEL = "Character consistent image request"
DEFAULT_SIZE = 1024
STRENGTH_VALUES = {strength.value for strength in StrengthType}


@dataclass(frozen=True)
class ReferenceImage:
    filename: str
    content: bytes
    content_type: Optional[str] = None


@dataclass(frozen=True)
class StoredReference:
    url: str
    leonardo_image_id: str


def validate_form(form: CharacterGenerationForm) -> tuple[str, StrengthType]:
    if not form.prompt or not form.prompt.strip():
        raise ValidationError("Prompt is required")
    if form.strength_type not in STRENGTH_VALUES:
        raise ValidationError("Invalid strength type")
    return form.prompt, StrengthType(form.strength_type)


async def resolve_model(model_id: Optional[str]) -> LeonardoModel:
    """
    The requested model, or the first active one by display order.
    """
    if model_id:
        model = await LeonardoModel.get_or_none(model_id=model_id)
        if model is None:
            raise ValidationError("Invalid model selected")
        return model

    model = await LeonardoModel.filter(is_active=True).order_by("display_order", "id").first()
    if model is None:
        raise PosterError("No active models available")
    return model


async def store_reference(
    user: User,
    reference: ReferenceImage,
    blob: BlobStorageClient,
    leonardo: LeonardoClient,
) -> StoredReference:
    url = await blob.put(reference_image_key(user.id, reference.filename), reference.content, reference.content_type)
    image_id = await leonardo.upload_init_image(reference.filename, reference.content, reference.content_type)
    return StoredReference(url=url, leonardo_image_id=image_id)


def _image_urls(images: List[Dict[str, Any]]) -> List[str]:
    return [image.get("url") or "" for image in images]


async def _store_images(request_id: int, urls: List[str]) -> None:
    if urls:
        await CharacterConsistentGeneratedImage.bulk_create(
            [
                CharacterConsistentGeneratedImage(character_consistent_image_request_id=request_id, image_url=url)
                for url in urls
            ]
        )


def _param_columns(params: GenerationParams) -> Dict[str, Any]:
    return {
        "prompt": params.prompt,
        "leonardo_image_id": params.init_image_id,
        "strength_type": params.strength_type,
        "width": params.width,
        "height": params.height,
        "photo_real": params.photo_real,
        "alchemy": params.alchemy,
        "number_of_images": params.number_of_images,
        "preset_style": params.preset_style,
        "style_uuid": params.style_uuid,
        "contrast": params.contrast,
    }


class CharacterService:
    @staticmethod
    async def list_requests(user: User, project_id: int) -> List[CharacterConsistentImageRequest]:
        return await CharacterConsistentImageRequest.filter(project_id=project_id, user_id=user.id).order_by(
            "-updated_at", "-id"
        )

    @staticmethod
    async def create_request(
        user: User,
        form: CharacterGenerationForm,
        reference: Optional[ReferenceImage],
        xai: XAIClient,
        leonardo: LeonardoClient,
        blob: BlobStorageClient,
    ) -> CharacterConsistentImageRequest:
        prompt, strength_type = validate_form(form)
        if reference is None or not reference.content:
            raise ValidationError("Reference image is required")
        project = await ProjectService.require_owned_project(user, form.project_id)

        stored = await store_reference(user, reference, blob, leonardo)
        name = await naming_service.title_for_character(xai, prompt)
        model = await resolve_model(form.model_id)

        params = GenerationParams(
            prompt=prompt,
            init_image_id=stored.leonardo_image_id,
            strength_type=strength_type,
            width=form.width or DEFAULT_SIZE,
            height=form.height or DEFAULT_SIZE,
            number_of_images=form.number_of_images or 1,
            photo_real=bool(form.photo_real),
            alchemy=bool(form.alchemy),
            preset_style=form.preset_style or None,
            style_uuid=form.style_uuid or None,
            contrast=form.contrast,
        )
        payload, resolved = build_generation_payload(model, params)

        request = await CharacterConsistentImageRequest.create(
            project=project,
            user=user,
            name=name,
            reference_image_url=stored.url,
            model_id=model.model_id,
            **_param_columns(resolved),
        )

        images = await leonardo.generate(payload)
        urls = _image_urls(images)
        await _store_images(request.id, urls)
        logger.info("Character request %s stored %s image(s)", request.id, len(urls))
        return request

    @staticmethod
    async def update_request(
        user: User,
        request_id: int,
        form: CharacterGenerationForm,
        reference: Optional[ReferenceImage],
        xai: XAIClient,
        leonardo: LeonardoClient,
        blob: BlobStorageClient,
    ) -> CharacterConsistentImageRequest:
        """
        Regenerate an existing request. Fields missing from the form keep
        their stored values; the reference is only replaced when a new file
        is sent. Previous images are replaced only after the new job completed.
        """
        prompt, strength_type = validate_form(form)
        existing = await get_owned_or_404(CharacterConsistentImageRequest, request_id, user, LABEL)

        reference_url = existing.reference_image_url
        leonardo_image_id = existing.leonardo_image_id
        if reference is not None and reference.content:
            stored = await store_reference(user, reference, blob, leonardo)
            reference_url = stored.url
            leonardo_image_id = stored.leonardo_image_id

        name = existing.name
        if prompt != existing.prompt:
            name = await naming_service.title_for_character(xai, prompt)

        model = await resolve_model(form.model_id or existing.model_id)

        def pick(value, stored):
            return stored if value is None else value

        params = GenerationParams(
            prompt=prompt,
            init_image_id=leonardo_image_id,
            strength_type=strength_type,
            width=pick(form.width, existing.width),
            height=pick(form.height, existing.height),
            number_of_images=pick(form.number_of_images, existing.number_of_images),
            photo_real=pick(form.photo_real, existing.photo_real),
            alchemy=pick(form.alchemy, existing.alchemy),
            preset_style=pick(form.preset_style, existing.preset_style) or None,
            style_uuid=pick(form.style_uuid, existing.style_uuid) or None,
            contrast=pick(form.contrast, existing.contrast),
        )
        payload, resolved = build_generation_payload(model, params)

        images = await leonardo.generate(payload)
        urls = _image_urls(images)

        async with in_transaction():
            await update_owned(
                CharacterConsistentImageRequest,
                request_id,
                user,
                LABEL,
                name=name,
                reference_image_url=reference_url,
                model_id=model.model_id,
                **_param_columns(resolved),
            )
            await CharacterConsistentGeneratedImage.filter(character_consistent_image_request_id=request_id).delete()
            await _store_images(request_id, urls)

        logger.info("Character request %s regenerated with %s image(s)", request_id, len(urls))
        return await CharacterConsistentImageRequest.get(id=request_id)

    @staticmethod
    async def delete_request(user: User, request_id: int) -> None:
        await get_owned_or_404(CharacterConsistentImageRequest, request_id, user, LABEL)
        async with in_transaction():
            await CharacterConsistentGeneratedImage.filter(character_consistent_image_request_id=request_id).delete()
            await CharacterConsistentImageRequest.filter(id=request_id, user_id=user.id).delete()
