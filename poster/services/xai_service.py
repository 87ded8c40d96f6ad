import logging
from typing import Any, Dict, List, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError

from poster.core.config import Settings, settings
from poster.core.errors import UpstreamError

logger = logging.getLogger("xai_service")


class XAIError(UpstreamError):
    """Failed call to the xAI chat or image endpoints."""


class XAIClient:
    """
    Client for the xAI API: chat completions through the OpenAI SDK and image
    generation through a direct HTTP call.
    """

    def __init__(self, config: Settings = settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = config.xai_api_key
        self.base_url = config.xai_base_url.rstrip("/")
        self.text_model = config.xai_text_model
        self.naming_model = config.xai_naming_model
        self.image_model = config.xai_image_model
        self.timeout = config.http_timeout
        self._transport = transport

        if self.api_key:
            self.client_openai: Optional[AsyncOpenAI] = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
            )
        else:
            self.client_openai = None
            logger.warning("XAI_API_KEY is not set. xAI features will be unavailable.")

    async def chat(
        self,
        system_prompt: str,
        user_content: str,
        *,
        model: Optional[str] = None,
        extra_body: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """
        Run one non-streaming completion and return the first choice's text.
        """
        if not self.client_openai:
            raise XAIError("XAI_API_KEY is not configured")

        model_to_use = model or self.text_model
        logger.info("xAI chat completion (model: %s)", model_to_use)
        try:
            response = await self.client_openai.chat.completions.create(
                model=model_to_use,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content},
                ],
                stream=False,
                extra_body=extra_body,
            )
        except OpenAIError as exc:
            logger.error("xAI chat completion failed: %s", exc)
            raise XAIError(str(exc)) from exc

        if not response.choices:
            return None
        return response.choices[0].message.content

    async def generate_images(self, prompt: str, n: int) -> List[str]:
        """
        Request `n` images and return their URLs.
        """
        if not self.api_key:
            raise XAIError("XAI_API_KEY is not configured")

        payload = {
            "model": self.image_model,
            "prompt": prompt,
            "n": n,
            "response_format": "url",
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logger.info("xAI image generation (model: %s, n: %s)", self.image_model, n)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, http2=True, transport=self._transport) as client:
                response = await client.post(f"{self.base_url}/images/generations", headers=headers, json=payload)
        except httpx.HTTPError as exc:
            logger.error("xAI image request failed: %s", exc)
            raise XAIError(f"Image generation failed: {exc}") from exc

        if response.status_code >= 400:
            logger.error("xAI image error %s: %s", response.status_code, response.text)
            raise XAIError(f"Image generation failed: {response.text}")

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("xAI returned invalid JSON: %s", response.text)
            raise XAIError("Image generation returned invalid JSON") from exc

        return [item.get("url") or "" for item in data.get("data", [])]


xai_client = XAIClient()


def get_xai_client() -> XAIClient:
    return xai_client
