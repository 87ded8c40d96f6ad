from datetime import datetime
from typing import Optional

from pydantic import Field

from poster.schemas.base import CamelModel


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class ProjectUpdate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class ProjectOut(CamelModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DeleteResult(CamelModel):
    success: bool = True
