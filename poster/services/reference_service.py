import logging
from typing import List, Optional

from poster.core.errors import ValidationError
from poster.models import LeonardoModel, LeonardoStyleControl, StyleControl, Tool

logger = logging.getLogger("reference_service")


class ReferenceDataService:
    """Tool catalog and Leonardo model/style configuration"""

    DEFAULT_TOOLS = [
        {"name": "Text summarizer", "description": "Summarize text content"},
        {"name": "Text to Image", "description": "Generate images from text prompts using AI"},
        {
            "name": "Character Consistent Image",
            "description": "Generate images with consistent character appearance using reference image",
        },
    ]

    # SDXL family: Character Reference preprocessor 133, PhotoReal v2
    _SDXL = {
        "preprocessor_id": 133,
        "photo_real_available": True,
        "photo_real_default": True,
        "photo_real_version": "v2",
        "alchemy_available": True,
        "alchemy_default": True,
        "style_control": StyleControl.PRESET_STYLE,
        "is_active": True,
    }

    DEFAULT_LEONARDO_MODELS = [
        {"name": "Leonardo Lightning XL", "model_id": "b24e16ff-06e3-43eb-8d33-4416c2d75876", "display_order": 1, **_SDXL},
        {"name": "Leonardo Kino XL", "model_id": "aa77f04e-3eec-4034-9c07-d0f619684628", "display_order": 2, **_SDXL},
        {"name": "Leonardo Vision XL", "model_id": "5c232a9e-9061-4777-980a-ddc8e65647c6", "display_order": 3, **_SDXL},
        {"name": "Leonardo Anime XL", "model_id": "e71a1c2f-4f80-4800-934f-2c68979d8cc8", "display_order": 4, **_SDXL},
        {
            "name": "Leonardo Phoenix 1.0",
            "model_id": "de7d3faf-762f-48e0-b3b7-9d0ac3a3fcf3",
            "preprocessor_id": 397,
            "photo_real_available": False,
            "photo_real_default": False,
            "photo_real_version": None,
            "alchemy_available": True,
            "alchemy_default": True,
            "style_control": StyleControl.STYLE_UUID,
            "is_active": True,
            "display_order": 5,
        },
    ]

    DEFAULT_STYLE_CONTROLS = [
        ("presetStyle", "CINEMATIC", None),
        ("presetStyle", "CREATIVE", None),
        ("presetStyle", "VIBRANT", None),
        ("presetStyle", "DYNAMIC", None),
        ("presetStyle", "PORTRAIT", None),
        ("presetStyle", "ANIME", None),
        ("presetStyle", "NONE", None),
        ("styleUUID", "Cinematic", "a5632c7c-ddbb-4e2f-ba34-8456ab3ac436"),
        ("styleUUID", "Creative", "6fedbf1f-4a17-45ec-84fb-92fe524a29ef"),
        ("styleUUID", "Dynamic", "111dc692-d470-4eec-b791-3475abac4c46"),
        ("styleUUID", "Vibrant", "dee282d3-891f-4f73-ba02-7f8131e5541b"),
        ("styleUUID", "None", "556c1ee5-ec38-42e8-955a-1e82dad0ffa1"),
    ]

    @classmethod
    async def initialize_defaults(cls) -> None:
        """Insert missing catalog rows; existing rows are left untouched"""
        for tool in cls.DEFAULT_TOOLS:
            _, created = await Tool.get_or_create(name=tool["name"], defaults={"description": tool["description"]})
            if created:
                logger.info("Created tool: %s", tool["name"])

        for model in cls.DEFAULT_LEONARDO_MODELS:
            defaults = {key: value for key, value in model.items() if key != "model_id"}
            _, created = await LeonardoModel.get_or_create(model_id=model["model_id"], defaults=defaults)
            if created:
                logger.info("Created Leonardo model: %s", model["name"])

        for order, (param, option, style_uuid) in enumerate(cls.DEFAULT_STYLE_CONTROLS, start=1):
            await LeonardoStyleControl.get_or_create(
                style_control_param=param,
                style_option=option,
                defaults={"style_uuid": style_uuid, "display_order": order},
            )

    @staticmethod
    async def list_active_models() -> List[LeonardoModel]:
        return await LeonardoModel.filter(is_active=True).order_by("display_order", "id")

    @staticmethod
    async def list_style_controls(style_control_param: Optional[str]) -> List[LeonardoStyleControl]:
        if not style_control_param:
            raise ValidationError("Style control parameter is required")
        return await LeonardoStyleControl.filter(style_control_param=style_control_param).order_by(
            "display_order", "id"
        )

    @staticmethod
    async def list_tools() -> List[Tool]:
        return await Tool.all().order_by("id")
