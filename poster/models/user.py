from tortoise import fields
from tortoise.models import Model
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class User(Model):
    """
    Account that owns projects and every generation record
    """
    id = fields.IntField(pk=True)
    username = fields.CharField(255, unique=True, index=True)
    password_hash = fields.CharField(255)
    name = fields.CharField(255, null=True)
    email = fields.CharField(255, null=True, unique=True)

    is_active = fields.BooleanField(default=True)

    created_at = fields.DatetimeField(auto_now_add=True)
    last_login = fields.DatetimeField(null=True)

    class Meta:
        table = "users"

    @classmethod
    def hash_password(cls, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, password: str) -> bool:
        return pwd_context.verify(password, self.password_hash)
