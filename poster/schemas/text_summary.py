from datetime import datetime
from typing import Optional

from pydantic import model_validator

from poster.schemas.base import CamelModel


class TextSummaryRequest(CamelModel):
    project_id: Optional[int] = None
    website: Optional[str] = None
    text_to_summarize: Optional[str] = None
    target_word_count: Optional[int] = None

    @model_validator(mode="after")
    def require_source(self) -> "TextSummaryRequest":
        if not (self.website or "").strip() and not (self.text_to_summarize or "").strip():
            raise ValueError("Either website or text to summarize must be provided")
        return self


class TextSummaryOut(CamelModel):
    id: int
    project_id: int
    user_id: int
    name: Optional[str] = None
    website: Optional[str] = None
    text_to_summarize: Optional[str] = None
    target_word_count: Optional[int] = None
    summary: Optional[str] = None
    created_at: datetime
    updated_at: datetime
