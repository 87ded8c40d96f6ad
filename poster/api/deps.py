from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from poster.core.errors import AuthError
from poster.models import User
from poster.services.auth_service import AuthService

security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    """Dependency resolving the signed-in user from the bearer token"""
    if credentials is None or not credentials.credentials:
        raise AuthError()
    return await AuthService.get_current_user(credentials.credentials)
