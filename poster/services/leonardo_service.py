import json
import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from poster.core.config import Settings, settings
from poster.core.errors import UpstreamError
from poster.core.polling import poll_until
from poster.models import JobStatus

logger = logging.getLogger("leonardo_service")


class LeonardoError(UpstreamError):
    """Failed call to the Leonardo REST API."""


class LeonardoClient:
    """
    Client for Leonardo reference-conditioned generation: init-image upload,
    job submission and status polling.
    """

    def __init__(self, config: Settings = settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = config.leonardo_api_key
        self.base_url = config.leonardo_base_url.rstrip("/")
        self.poll_interval = config.leonardo_poll_interval
        self.max_poll_attempts = config.leonardo_max_poll_attempts
        self.timeout = config.http_timeout
        self._transport = transport

        if not self.api_key:
            logger.warning("LEONARDO_API_KEY is not set. Character-consistent generation is unavailable.")

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "accept": "application/json",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, http2=True, transport=self._transport)

    async def _request(self, method: str, path: str, error_message: str, **kwargs: Any) -> Dict[str, Any]:
        if not self.api_key:
            raise LeonardoError("LEONARDO_API_KEY is not configured")

        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            async with self._client() as client:
                response = await client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            logger.error("Leonardo request %s %s failed: %s", method, path, exc)
            raise LeonardoError(f"{error_message}: {exc}") from exc

        if response.status_code >= 400:
            logger.error("Leonardo error %s: %s", response.status_code, response.text)
            raise LeonardoError(f"{error_message}: {response.text}")

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Leonardo returned invalid JSON: %s", response.text)
            raise LeonardoError(f"{error_message}: invalid JSON response") from exc

    async def upload_init_image(self, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
        """
        Upload a reference image and return Leonardo's image id.

        Leonardo hands out a presigned S3 form (url + fields); the bytes go
        there directly, and generations reference the returned id.
        """
        extension = os.path.splitext(filename)[1].lstrip(".").lower() or "jpg"
        data = await self._request(
            "POST",
            "/init-image",
            "Failed to get presigned URL",
            json={"extension": extension},
        )

        upload = data.get("uploadInitImage") or {}
        image_id = upload.get("id")
        presigned_url = upload.get("url")
        fields = upload.get("fields") or "{}"
        if not image_id or not presigned_url:
            raise LeonardoError("Failed to get presigned URL: incomplete response")
        if isinstance(fields, str):
            fields = json.loads(fields)

        files = {"file": (filename, content, content_type or "application/octet-stream")}
        try:
            async with self._client() as client:
                response = await client.post(presigned_url, data=fields, files=files)
        except httpx.HTTPError as exc:
            logger.error("Presigned upload failed: %s", exc)
            raise LeonardoError(f"Failed to upload image to S3: {exc}") from exc

        if response.status_code >= 400:
            logger.error("Presigned upload error %s: %s", response.status_code, response.text)
            raise LeonardoError(f"Failed to upload image to S3: {response.reason_phrase}")

        logger.info("Uploaded init image %s", image_id)
        return image_id

    async def create_generation(self, payload: Dict[str, Any]) -> str:
        logger.info(
            "Submitting Leonardo generation (model: %s, images: %s)",
            payload.get("modelId"),
            payload.get("num_images"),
        )
        data = await self._request("POST", "/generations", "Image generation request failed", json=payload)
        generation_id = (data.get("sdGenerationJob") or {}).get("generationId")
        if not generation_id:
            raise LeonardoError("Image generation request failed: no generation id returned")
        return generation_id

    async def get_generation(self, generation_id: str) -> Dict[str, Any]:
        data = await self._request("GET", f"/generations/{generation_id}", "Failed to check generation status")
        return data.get("generations_by_pk") or {}

    async def wait_for_generation(self, generation_id: str) -> List[Dict[str, Any]]:
        """
        Poll the job until COMPLETE and return its generated image descriptors.
        """
        generation = await poll_until(
            lambda: self.get_generation(generation_id),
            interval=self.poll_interval,
            max_attempts=self.max_poll_attempts,
            is_complete=lambda g: g.get("status") == JobStatus.COMPLETE.value,
            is_failed=lambda g: g.get("status") == JobStatus.FAILED.value,
        )
        return generation.get("generated_images") or []

    async def generate(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        generation_id = await self.create_generation(payload)
        return await self.wait_for_generation(generation_id)


leonardo_client = LeonardoClient()


def get_leonardo_client() -> LeonardoClient:
    return leonardo_client
