from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from poster.api.deps import get_current_user
from poster.models import User
from poster.schemas.leonardo import LeonardoModelOut, LeonardoStyleControlOut, ToolOut
from poster.services.reference_service import ReferenceDataService

router = APIRouter(tags=["Catalog"])


@router.get("/leonardo-models", response_model=List[LeonardoModelOut])
async def list_leonardo_models():
    """Active Leonardo models in display order (public)"""
    return await ReferenceDataService.list_active_models()


@router.get("/leonardo-style-controls", response_model=List[LeonardoStyleControlOut])
async def list_style_controls(
    style_control_param: Optional[str] = Query(None, alias="styleControlParam"),
    _: User = Depends(get_current_user),
):
    return await ReferenceDataService.list_style_controls(style_control_param)


@router.get("/tools", response_model=List[ToolOut])
async def list_tools(_: User = Depends(get_current_user)):
    return await ReferenceDataService.list_tools()
