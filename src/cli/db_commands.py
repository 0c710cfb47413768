"""Database management CLI commands."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm
from sqlalchemy.exc import SQLAlchemyError

from src.book_manager.core.services import DbManageService, DbSessionService

console = Console()

db_app = typer.Typer(help="🗄️  Manage the books database")


def get_manage_service() -> tuple[DbSessionService, DbManageService]:
    """Build a database service from the current configuration."""
    database_service = DbSessionService()
    return database_service, DbManageService(database_service.engine)


@db_app.command("init")
def init() -> None:
    """Create the books table if it does not exist."""
    database_service, manage_service = get_manage_service()
    try:
        manage_service.create_all()
        console.print("[green]✅ Database tables created[/green]")
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create tables: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()


@db_app.command("clear")
def clear(
    reset_sequence: bool = typer.Option(
        False, "--reset-sequence", help="Restart book ids at 1"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Delete every book from the database."""
    if not yes and not Confirm.ask("Delete all books?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=0)

    database_service, manage_service = get_manage_service()
    try:
        removed = manage_service.clear_books(reset_sequence=reset_sequence)
        console.print(f"[green]✅ Removed {removed} books[/green]")
        if reset_sequence:
            console.print("[blue]Book ids restart at 1[/blue]")
    except (SQLAlchemyError, NotImplementedError) as e:
        console.print(f"[red]❌ Failed to clear books: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        database_service.dispose()
