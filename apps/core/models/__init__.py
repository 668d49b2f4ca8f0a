from .base import TimestampModel, BaseModel
from .user import User, UserManager

__all__ = [
    "TimestampModel",
    "BaseModel",
    "User",
    "UserManager",
]
