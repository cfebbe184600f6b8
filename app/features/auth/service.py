from typing import Optional
from app.features.auth.models import User
from app.features.auth.schemas import RegisterRequest, LoginRequest, UserResponse
from app.core.security import verify_password, get_password_hash, create_access_token
from app.shared.exceptions import CredentialsException, ConflictException
from app.core.logging import logger


class AuthService:
    """Authentication service for handling auth business logic."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            email=user.email,
            name=user.name,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    async def register(register_data: RegisterRequest) -> tuple[User, str]:
        """
        Register a new user.

        Returns:
            tuple: (user, access_token)
        """
        existing_user = await User.find_one(User.email == register_data.email)
        if existing_user:
            raise ConflictException("Email already registered")

        user = User(
            email=register_data.email,
            password_hash=get_password_hash(register_data.password),
            name=register_data.name,
        )
        await user.insert()

        logger.info(f"Registered user {user.email}")

        access_token = create_access_token(data={"sub": user.email, "user_id": str(user.id)})
        return user, access_token

    @staticmethod
    async def login(login_data: LoginRequest) -> tuple[User, str]:
        """
        Authenticate user and return access token.

        Returns:
            tuple: (user, access_token)
        """
        user = await User.find_one(User.email == login_data.email)
        if not user:
            raise CredentialsException("Invalid email or password")

        if not verify_password(login_data.password, user.password_hash):
            raise CredentialsException("Invalid email or password")

        if not user.is_active:
            raise CredentialsException("Account is inactive")

        access_token = create_access_token(data={"sub": user.email, "user_id": str(user.id)})
        return user, access_token

    @staticmethod
    async def get_user_by_email(email: str) -> Optional[User]:
        """Get user by email."""
        return await User.find_one(User.email == email)
