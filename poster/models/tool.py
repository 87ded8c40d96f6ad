from tortoise import fields
from tortoise.models import Model


class Tool(Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255, unique=True)
    description = fields.TextField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "tools"

    def __str__(self):
        return self.name
