"""Development token minting."""

import typer
from rich.console import Console

from src.commerce.core.models.principal import Role
from src.commerce.core.services import JwtService
from src.commerce.runtime.context import get_config

console = Console()


def token(
    sub: str = typer.Option(..., "--sub", "-s", help="Subject (user id) of the token"),
    role: list[Role] = typer.Option(..., "--role", "-r", help="Role to grant; repeatable"),
    name: str = typer.Option("", "--name", "-n", help="Display name claim"),
    ttl: int = typer.Option(0, "--ttl", help="Lifetime in seconds; 0 uses the configured default"),
) -> None:
    """Print a signed bearer token for local testing."""
    config = get_config()
    if config.app.environment == "production":
        console.print("[red]❌ Refusing to mint tokens in production[/red]")
        raise typer.Exit(code=1)

    signed = JwtService(config.auth).generate_token(
        sub, roles=role, expires_in_seconds=ttl or None, name=name or None
    )
    # Plain print so the token can be piped
    print(signed)
