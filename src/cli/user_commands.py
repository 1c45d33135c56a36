"""User inspection CLI commands."""

import typer
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from src.app.core.services import UserService

from .utils import console, get_database_service

users_app = typer.Typer(help="Inspect stored users")


@users_app.command("list")
def list_users(
    database_url: str | None = typer.Option(
        None, "--database-url", "-d", help="Override the configured database URL"
    ),
) -> None:
    """List all users in the database."""
    database_service = get_database_service(database_url)

    try:
        with database_service.session_scope() as session:
            users = UserService(session).find_all()

            if not users:
                console.print("[yellow]No users found[/yellow]")
                return

            table = Table(title="Users")
            table.add_column("ID", style="cyan")
            table.add_column("First Name", style="magenta")
            table.add_column("Last Name", style="magenta")
            table.add_column("Email", style="blue")
            table.add_column("Birthday", style="green")

            for user in users:
                table.add_row(
                    str(user.id),
                    user.firstname,
                    user.lastname,
                    user.email,
                    user.birthday.isoformat() if user.birthday else "",
                )

            console.print(table)
            console.print(f"\n[green]Found {len(users)} users[/green]")

    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to list users: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()
