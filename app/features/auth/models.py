from beanie import Document, Indexed
from pydantic import EmailStr
from app.shared.models import TimestampMixin


class User(Document, TimestampMixin):
    """User document model."""

    email: Indexed(EmailStr, unique=True)
    password_hash: str
    name: str
    is_active: bool = True

    class Settings:
        name = "users"
        use_state_management = True

    class Config:
        json_schema_extra = {
            "example": {
                "email": "ayesha@example.com",
                "name": "Ayesha Khan",
            }
        }
