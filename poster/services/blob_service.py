import logging
import os
import time
from typing import Optional

import httpx

from poster.core.config import Settings, settings
from poster.core.errors import UpstreamError

logger = logging.getLogger("blob_service")


class BlobStorageError(UpstreamError):
    """Failed upload to object storage."""


def reference_image_key(user_id: int, filename: str) -> str:
    safe_name = os.path.basename(filename or "reference.jpg").replace("..", "_")
    return f"character-reference/{user_id}/{int(time.time() * 1000)}-{safe_name}"


class BlobStorageClient:
    """
    Public-access uploads to Vercel Blob through its REST API.
    """

    def __init__(self, config: Settings = settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.token = config.blob_token
        self.base_url = config.blob_base_url.rstrip("/")
        self.timeout = config.http_timeout
        self._transport = transport

    async def put(self, pathname: str, content: bytes, content_type: Optional[str] = None) -> str:
        """
        Store `content` under `pathname` and return its public URL.
        """
        if not self.token:
            raise BlobStorageError("BLOB_READ_WRITE_TOKEN is not configured")

        headers = {
            "Authorization": f"Bearer {self.token}",
            "x-api-version": "7",
            "x-content-type": content_type or "application/octet-stream",
        }
        url = f"{self.base_url}/{pathname.lstrip('/')}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, http2=True, transport=self._transport) as client:
                response = await client.put(url, headers=headers, content=content)
        except httpx.HTTPError as exc:
            logger.error("Blob upload failed: %s", exc)
            raise BlobStorageError(f"Failed to store reference image: {exc}") from exc

        if response.status_code >= 400:
            logger.error("Blob upload error %s: %s", response.status_code, response.text)
            raise BlobStorageError(f"Failed to store reference image: {response.text}")

        try:
            blob_url = response.json()["url"]
        except (ValueError, KeyError) as exc:
            raise BlobStorageError("Failed to store reference image: no URL returned") from exc

        logger.info("Stored blob %s", pathname)
        return blob_url


blob_client = BlobStorageClient()


def get_blob_client() -> BlobStorageClient:
    return blob_client
