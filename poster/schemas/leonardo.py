from typing import Optional

from poster.models import StyleControl
from poster.schemas.base import CamelModel


class LeonardoModelOut(CamelModel):
    id: int
    name: str
    model_id: str
    preprocessor_id: int
    photo_real_available: bool
    photo_real_default: bool
    photo_real_version: Optional[str] = None
    alchemy_available: bool
    alchemy_default: bool
    style_control: StyleControl
    is_active: bool
    display_order: int


class LeonardoStyleControlOut(CamelModel):
    id: int
    style_control_param: str
    style_option: str
    style_uuid: Optional[str] = None
    display_order: int


class ToolOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
