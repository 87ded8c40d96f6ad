from typing import Type, TypeVar

from tortoise import timezone
from tortoise.models import Model

from poster.core.errors import NotFoundError, OwnershipError
from poster.models import User

M = TypeVar("M", bound=Model)


async def get_owned_or_404(model: Type[M], record_id: int, user: User, label: str) -> M:
    """
    Load `record_id` and check it belongs to `user`.

    404 when the row does not exist, 403 when another user owns it.
    """
    record = await model.get_or_none(id=record_id)
    if record is None:
        raise NotFoundError(f"{label} not found")
    if record.user_id != user.id:
        raise OwnershipError()
    return record


async def update_owned(model: Type[M], record_id: int, user: User, label: str, **values) -> None:
    """
    Apply `values` only if the row still exists and is still owned by `user`.

    The ownership check and the write are one UPDATE, so a concurrent delete
    turns into a 404 instead of a write against a vanished row.
    """
    if "updated_at" in model._meta.fields_map:
        values.setdefault("updated_at", timezone.now())
    updated = await model.filter(id=record_id, user_id=user.id).update(**values)
    if not updated:
        raise NotFoundError(f"{label} not found")
