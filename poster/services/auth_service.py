from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional

from jose import JWTError, jwt
from tortoise import timezone

from poster.core.config import settings
from poster.core.errors import AuthError, ValidationError
from poster.models import User
from poster.schemas.user import UserCreate


class AuthService:
    """Accounts, password checks and bearer tokens"""

    @staticmethod
    async def create_user(data: UserCreate) -> User:
        existing = await User.filter(username=data.username).first()
        if existing:
            raise ValidationError("Username already exists")
        if data.email and await User.filter(email=data.email).exists():
            raise ValidationError("Email already registered")

        return await User.create(
            username=data.username,
            password_hash=User.hash_password(data.password),
            name=data.name,
            email=data.email,
        )

    @staticmethod
    async def authenticate(username: str, password: str) -> Optional[User]:
        user = await User.filter(username=username, is_active=True).first()

        if not user:
            return None

        if not user.verify_password(password):
            return None

        user.last_login = timezone.now()
        await user.save(update_fields=["last_login"])

        return user

    @staticmethod
    def create_access_token(user_id: int) -> str:
        expire = datetime.now(dt_timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
        to_encode = {
            "sub": str(user_id),
            "exp": expire,
        }
        return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    @staticmethod
    async def get_current_user(token: str) -> User:
        """Resolve the user behind a bearer token or raise AuthError"""
        try:
            payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
            user_id = payload.get("sub")
            if user_id is None:
                raise AuthError()
            user_id = int(user_id)
        except (JWTError, ValueError):
            raise AuthError()

        user = await User.filter(id=user_id, is_active=True).first()
        if user is None:
            raise AuthError()

        return user
