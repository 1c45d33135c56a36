"""Entity package: User."""

from .entity import User, UserPayload
from .table import UserTable
from .validation import UserConstraints, validate_user

__all__ = ["User", "UserPayload", "UserTable", "UserConstraints", "validate_user"]
