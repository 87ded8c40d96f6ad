from pydantic import EmailStr, Field
from datetime import datetime
from typing import Optional

from poster.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6)
    name: Optional[str] = None
    email: Optional[EmailStr] = None


class UserLogin(CamelModel):
    username: str
    password: str


class UserResponse(CamelModel):
    id: int
    username: str
    name: Optional[str]
    email: Optional[str]
    is_active: bool
    created_at: datetime
    last_login: Optional[datetime]


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
