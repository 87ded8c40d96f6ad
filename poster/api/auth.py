from fastapi import APIRouter, Depends

from poster.api.deps import get_current_user
from poster.core.errors import AuthError
from poster.models import User
from poster.schemas.user import Token, UserCreate, UserLogin, UserResponse
from poster.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=UserResponse)
async def register(data: UserCreate):
    return await AuthService.create_user(data)


@router.post("/login", response_model=Token)
async def login(data: UserLogin):
    user = await AuthService.authenticate(data.username, data.password)

    if not user:
        raise AuthError("Incorrect username or password")

    access_token = AuthService.create_access_token(user.id)
    return Token(access_token=access_token)


@router.get("/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    return user
