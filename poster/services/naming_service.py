"""
Short display titles for new or edited records.
"""
import logging
from typing import Optional

from poster.services.xai_service import XAIClient

logger = logging.getLogger("naming_service")

TITLE_SYSTEM_PROMPT = (
    "You are a helpful assistant that creates very short, descriptive titles. "
    "Return ONLY the title text, nothing else. Maximum 20 characters."
)

PROMPT_PREFIX_LENGTH = 200
MAX_TITLE_LENGTH = 50

SUMMARY_FALLBACK = "Summary"
IMAGE_FALLBACK = "Generated Image"
CHARACTER_FALLBACK = "Character Image"


async def generate_title(client: XAIClient, request_text: str, fallback: str, model: Optional[str] = None) -> str:
    """
    Ask the naming model for a title; clamp it and fall back when empty.
    Provider errors propagate.
    """
    title = await client.chat(TITLE_SYSTEM_PROMPT, request_text, model=model or client.naming_model)
    title = (title or "").strip() or fallback
    return title[:MAX_TITLE_LENGTH]


async def title_for_summary(client: XAIClient, website: Optional[str], text: Optional[str]) -> str:
    request_text = "Create a brief, descriptive title (20 characters or less) for this content: "
    if website and text:
        request_text += f"Website: {website}, Text: {text[:PROMPT_PREFIX_LENGTH]}"
    elif website:
        request_text += f"Website: {website}"
    else:
        request_text += (text or "")[:PROMPT_PREFIX_LENGTH]
    # Summary titles come from the text model
    return await generate_title(client, request_text, SUMMARY_FALLBACK, model=client.text_model)


async def title_for_images(client: XAIClient, prompt: str) -> str:
    request_text = (
        "Create a brief, descriptive title (20 characters or less) for images that will be "
        f"generated from this prompt: {prompt[:PROMPT_PREFIX_LENGTH]}"
    )
    return await generate_title(client, request_text, IMAGE_FALLBACK)


async def title_for_character(client: XAIClient, prompt: str) -> str:
    request_text = (
        "Create a brief, descriptive title (20 characters or less) for a character-consistent "
        f"image generation with this prompt: {prompt[:PROMPT_PREFIX_LENGTH]}"
    )
    return await generate_title(client, request_text, CHARACTER_FALLBACK)
