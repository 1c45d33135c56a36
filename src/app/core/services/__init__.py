"""Core services exports."""

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .database.db_utils import transactional

# User Services
from .user.user_service import UserService

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    "transactional",
    # User Services
    "UserService",
]
