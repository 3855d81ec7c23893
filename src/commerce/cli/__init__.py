"""Main CLI application module."""

import typer

from .auth_commands import token
from .db_commands import init_db, seed
from .server_commands import serve

app = typer.Typer(
    help="Geeta commerce backend: database, tokens and server",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command("init-db")(init_db)
app.command("seed")(seed)
app.command("token")(token)
app.command("serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
