"""Database management CLI commands."""

import typer
from rich.prompt import Confirm

from src.app.core.services import DbManageService

from .utils import console, get_database_service

db_app = typer.Typer(help="Manage the user database schema")

DatabaseUrlOption = typer.Option(
    None, "--database-url", "-d", help="Override the configured database URL"
)


@db_app.command("init")
def init_db(database_url: str | None = DatabaseUrlOption) -> None:
    """Create all tables that do not exist yet."""
    database_service = get_database_service(database_url)
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()
    console.print("[green]Database tables created[/green]")


@db_app.command("reset")
def reset_db(
    database_url: str | None = DatabaseUrlOption,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Drop and recreate all tables. Every stored user is lost."""
    if not yes and not Confirm.ask("Drop all tables and recreate them?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    database_service = get_database_service(database_url)
    try:
        manage = DbManageService(database_service.engine)
        manage.drop_all()
        manage.create_all()
    finally:
        database_service.dispose()
    console.print("[green]Database tables recreated[/green]")
