# app/schemas/user.py
from pydantic import BaseModel, Field


class AdminLoginSchema(BaseModel):
    """Schema for admin login."""

    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class UserResponseSchema(BaseModel):
    """Schema for user responses."""

    id: int
    username: str
    role: str

    @classmethod
    def from_orm_user(cls, user) -> "UserResponseSchema":
        """
        Create schema from User ORM model.

        Args:
            user: User model instance

        Returns:
            UserResponseSchema instance
        """
        return cls(
            id=user.id,
            username=user.username,
            role=getattr(user.role, "value", user.role)
        )


class AdminLoginResponseSchema(BaseModel):
    message: str = "Admin login successful"
    user: UserResponseSchema
