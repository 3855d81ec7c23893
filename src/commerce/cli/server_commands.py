"""API server command."""

import typer

from src.commerce.runtime.context import get_config


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address; defaults to app.host"),
    port: int | None = typer.Option(None, "--port", help="Port; defaults to app.port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.commerce.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,  # Requests are logged by the app middleware
    )
