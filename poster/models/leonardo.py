from tortoise import fields
from tortoise.models import Model

from .enums import StyleControl


class LeonardoModel(Model):
    """
    Provider model catalog; `style_control` selects the payload family
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255)
    model_id = fields.CharField(max_length=255, unique=True)
    preprocessor_id = fields.IntField()

    photo_real_available = fields.BooleanField(default=False)
    photo_real_default = fields.BooleanField(default=False)
    photo_real_version = fields.CharField(max_length=20, null=True)
    alchemy_available = fields.BooleanField(default=False)
    alchemy_default = fields.BooleanField(default=False)
    style_control = fields.CharEnumField(StyleControl, max_length=20, default=StyleControl.PRESET_STYLE)

    is_active = fields.BooleanField(default=True)
    display_order = fields.IntField(default=0)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "leonardo_models"


class LeonardoStyleControl(Model):
    id = fields.IntField(pk=True)
    style_control_param = fields.CharField(max_length=20)
    style_option = fields.CharField(max_length=100)
    # Only set for styleUUID (Phoenix) options
    style_uuid = fields.CharField(max_length=255, null=True)
    display_order = fields.IntField(default=0)

    class Meta:
        table = "leonardo_style_controls"
        unique_together = (("style_control_param", "style_option"),)
