from tortoise import fields
from tortoise.models import Model


class TextSummary(Model):
    id = fields.IntField(pk=True)
    project = fields.ForeignKeyField("models.Project", related_name="text_summaries", on_delete=fields.CASCADE)
    user = fields.ForeignKeyField("models.User", related_name="text_summaries", on_delete=fields.CASCADE)

    name = fields.CharField(max_length=255, null=True)
    website = fields.TextField(null=True)
    text_to_summarize = fields.TextField(null=True)
    target_word_count = fields.IntField(null=True)
    # Stays null until the completion call succeeds
    summary = fields.TextField(null=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "text_summaries"
