from tortoise import fields
from tortoise.models import Model


class Project(Model):
    """
    Container for all tool runs of a user; deleting it cascades to them
    """
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="projects", on_delete=fields.CASCADE)

    name = fields.CharField(max_length=255)
    description = fields.TextField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "projects"
