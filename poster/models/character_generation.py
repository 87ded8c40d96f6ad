from tortoise import fields
from tortoise.models import Model

from .enums import StrengthType


class CharacterConsistentImageRequest(Model):
    """
    Reference-conditioned run. `leonardo_image_id` is the provider-side id of
    the uploaded reference; `reference_image_url` is our durable copy.
    """
    id = fields.IntField(pk=True)
    project = fields.ForeignKeyField(
        "models.Project",
        related_name="character_consistent_image_requests",
        on_delete=fields.CASCADE,
    )
    user = fields.ForeignKeyField(
        "models.User",
        related_name="character_consistent_image_requests",
        on_delete=fields.CASCADE,
    )

    name = fields.CharField(max_length=255, null=True)
    prompt = fields.TextField()
    reference_image_url = fields.TextField()
    leonardo_image_id = fields.CharField(max_length=255)
    strength_type = fields.CharEnumField(StrengthType, max_length=10, default=StrengthType.MID)
    model_id = fields.CharField(max_length=255, null=True)
    width = fields.IntField(default=1024)
    height = fields.IntField(default=1024)
    photo_real = fields.BooleanField(default=False)
    alchemy = fields.BooleanField(default=False)
    number_of_images = fields.IntField(default=1)
    preset_style = fields.CharField(max_length=100, null=True)
    style_uuid = fields.CharField(max_length=255, null=True)
    contrast = fields.FloatField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "character_consistent_image_requests"


class CharacterConsistentGeneratedImage(Model):
    id = fields.IntField(pk=True)
    character_consistent_image_request = fields.ForeignKeyField(
        "models.CharacterConsistentImageRequest",
        related_name="character_consistent_generated_images",
        on_delete=fields.CASCADE,
    )
    image_url = fields.TextField()

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "character_consistent_generated_images"
