"""Shared CLI helpers."""

from rich.console import Console

from src.app.core.services import DbSessionService
from src.app.runtime.context import get_config

console = Console()


def get_database_service(database_url: str | None = None) -> DbSessionService:
    """Database service for the configured database, or for an explicit URL."""
    db_config = get_config().database
    if database_url:
        db_config = db_config.model_copy(update={"url": database_url})
    return DbSessionService(db_config)
