from fastapi import APIRouter, Depends, status
from app.features.auth.schemas import RegisterRequest, LoginRequest, AuthResponse, UserResponse
from app.features.auth.service import AuthService
from app.features.auth.dependencies import get_current_user
from app.features.auth.models import User


router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(register_data: RegisterRequest):
    """
    Create a new account.

    - **name**: User's full name
    - **email**: User's email address
    - **password**: Strong password (min 8 chars, 1 uppercase, 1 lowercase, 1 digit)
    """
    user, access_token = await AuthService.register(register_data)

    return AuthResponse(
        access_token=access_token,
        token_type="bearer",
        user=AuthService.to_response(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(login_data: LoginRequest):
    """
    Authenticate user and return access token.

    - **email**: User's email address
    - **password**: User's password
    """
    user, access_token = await AuthService.login(login_data)

    return AuthResponse(
        access_token=access_token,
        token_type="bearer",
        user=AuthService.to_response(user),
    )


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """
    Get current authenticated user's information.

    Requires authentication.
    """
    return AuthService.to_response(current_user)
