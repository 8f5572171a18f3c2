# app/models/user.py
from enum import Enum
from tortoise import Model, fields
from datetime import datetime, timezone


class UserRole(str, Enum):
    """Enum for user roles."""

    ADMIN = "admin"


class User(Model):
    """
    User model for canteen staff accounts.
    """

    id = fields.IntField(pk=True)
    username = fields.CharField(max_length=100, unique=True, index=True)
    password_hash = fields.CharField(max_length=255)
    role = fields.CharEnumField(UserRole, max_length=20, default=UserRole.ADMIN)
    is_active = fields.BooleanField(default=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    sessions: fields.ReverseRelation["Session"]

    class Meta:
        table = "users"
        ordering = ["-created_at"]

    @property
    def is_admin(self) -> bool:
        return UserRole(self.role) == UserRole.ADMIN

    def __str__(self) -> str:
        return f"User {self.username} ({self.role})"


class Session(Model):
    """
    Session model for managing admin sessions.
    """

    id = fields.UUIDField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="sessions")
    session_token_hash = fields.CharField(max_length=64, unique=True, index=True)
    expires_at = fields.DatetimeField()
    created_at = fields.DatetimeField(auto_now_add=True)
    last_activity = fields.DatetimeField(auto_now=True)
    user_agent = fields.TextField(null=True)
    ip_address = fields.CharField(max_length=45, null=True)

    class Meta:
        table = "sessions"
        ordering = ["-created_at"]

    def is_expired(self) -> bool:
        """
        Check if session is expired.

        Returns:
            True if session is expired, False otherwise
        """
        now = datetime.now(timezone.utc)
        expires_at = self.expires_at

        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        return now > expires_at

    def __str__(self) -> str:
        return f"Session for user {self.user_id} (expires: {self.expires_at})"
