from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.features.auth.models import User
from app.features.auth.service import AuthService
from app.core.security import decode_token
from app.shared.exceptions import CredentialsException


# HTTP Bearer security scheme
security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> User:
    """
    Dependency to get current authenticated user.

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        User: Current authenticated user

    Raises:
        CredentialsException: If credentials are invalid
    """
    payload = decode_token(credentials.credentials)
    if payload is None:
        raise CredentialsException("Invalid authentication credentials")

    email: str = payload.get("sub")
    if email is None:
        raise CredentialsException("Invalid authentication credentials")

    user = await AuthService.get_user_by_email(email)
    if user is None:
        raise CredentialsException("User not found")

    if not user.is_active:
        raise CredentialsException("Inactive user")

    return user
