"""Farm Stand CLI."""

import logging

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from farmstand.core.config import settings
from farmstand.core.database import create_tables
from farmstand.core.logging import configure_logging
from farmstand.models import CATEGORIES

app = typer.Typer(help="Farm Stand CLI")

console = Console()
logger = logging.getLogger(__name__)


@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Create tables and start the web server."""
    configure_logging()
    create_tables()
    logger.info(f"Database ready at {settings.database_url}")

    console.print(f"[green]✓[/green] Listening on port {port}!")
    uvicorn.run(
        "farmstand.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db():
    """Create the database tables."""
    create_tables()
    console.print(f"[green]✓[/green] Tables created in {settings.database_url}")


@app.command("categories")
def list_categories():
    """Show the product categories the store accepts."""
    table = Table(title="Product categories")
    table.add_column("Category", style="cyan")

    for category in CATEGORIES:
        table.add_row(category)

    console.print(table)


if __name__ == "__main__":
    app()
