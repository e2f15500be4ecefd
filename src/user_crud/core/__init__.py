"""Core abstractions and shared errors for user-crud."""

from user_crud.core.errors import (
    ConfigurationError,
    UserCrudError,
    ValidationError,
)
from user_crud.core.protocols import UserView

__all__ = [
    "UserView",
    "ConfigurationError",
    "UserCrudError",
    "ValidationError",
]
