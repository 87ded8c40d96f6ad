from tortoise import fields
from tortoise.models import Model


class ImageGenerationRequest(Model):
    """
    Text-to-image run; owns one GeneratedImage per returned URL
    """
    id = fields.IntField(pk=True)
    project = fields.ForeignKeyField("models.Project", related_name="image_generation_requests", on_delete=fields.CASCADE)
    user = fields.ForeignKeyField("models.User", related_name="image_generation_requests", on_delete=fields.CASCADE)

    name = fields.CharField(max_length=255, null=True)
    prompt = fields.TextField()
    number_of_images = fields.IntField(default=1)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "image_generation_requests"


class GeneratedImage(Model):
    id = fields.IntField(pk=True)
    image_generation_request = fields.ForeignKeyField(
        "models.ImageGenerationRequest",
        related_name="generated_images",
        on_delete=fields.CASCADE,
    )
    image_url = fields.TextField()

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "generated_images"
