import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("config")


class Settings:
    """
    Process-wide configuration read once from the environment (and `.env`).
    """

    def __init__(self) -> None:
        self.database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.port = int(os.getenv("PORT", "8000"))

        # JWT
        self.jwt_secret_key = os.getenv("JWT_SECRET_KEY", "change-this-secret-in-production")
        self.jwt_algorithm = "HS256"
        self.access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

        # xAI (chat completions + image generation)
        self.xai_api_key = os.getenv("XAI_API_KEY")
        self.xai_base_url = os.getenv("XAI_BASE_URL", "https://api.x.ai/v1")
        self.xai_text_model = os.getenv("XAI_TEXT_MODEL", "grok-4-fast-reasoning")
        self.xai_naming_model = os.getenv("XAI_NAMING_MODEL", "grok-4-fast-non-reasoning")
        self.xai_image_model = os.getenv("XAI_IMAGE_MODEL", "grok-2-image")

        # Leonardo (reference-conditioned generation)
        self.leonardo_api_key = os.getenv("LEONARDO_API_KEY")
        self.leonardo_base_url = os.getenv("LEONARDO_BASE_URL", "https://cloud.leonardo.ai/api/rest/v1")
        self.leonardo_poll_interval = float(os.getenv("LEONARDO_POLL_INTERVAL", "3.0"))
        self.leonardo_max_poll_attempts = int(os.getenv("LEONARDO_MAX_POLL_ATTEMPTS", "40"))

        # Blob storage
        self.blob_token = os.getenv("BLOB_READ_WRITE_TOKEN")
        self.blob_base_url = os.getenv("BLOB_BASE_URL", "https://blob.vercel-storage.com")

        self.http_timeout = float(os.getenv("HTTP_TIMEOUT_SECONDS", "60"))

    def warn_missing_keys(self) -> None:
        if not self.xai_api_key:
            logger.warning("XAI_API_KEY is not set. Naming, summaries and text-to-image are unavailable.")
        if not self.leonardo_api_key:
            logger.warning("LEONARDO_API_KEY is not set. Character-consistent generation is unavailable.")
        if not self.blob_token:
            logger.warning("BLOB_READ_WRITE_TOKEN is not set. Reference image uploads are unavailable.")


settings = Settings()
