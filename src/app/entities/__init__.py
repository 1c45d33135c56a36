"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: API-facing models
- table.py: Database persistence model
- validation.py: Field constraints checked before writes
"""

from .service.user import User, UserPayload, UserTable, validate_user

__all__ = [
    "User",
    "UserPayload",
    "UserTable",
    "validate_user",
]
