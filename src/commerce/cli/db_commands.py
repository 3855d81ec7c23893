"""Database setup commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.commerce.core.services import DbManageService, DbSessionService
from src.commerce.entities import (
    AppSettingsRepository,
    Banner,
    BannerRepository,
    DealsConfigRepository,
    VideoFind,
    VideoFindRepository,
)
from src.commerce.entities.marketing.banner import BannerPosition, ResourceType
from src.commerce.runtime.context import get_config

console = Console()

DEFAULT_BANNERS = [
    Banner(
        position=BannerPosition.MAIN,
        resource_type=ResourceType.CATEGORY,
        resource_name="Furniture",
        category_name="Furniture",
        image_url="https://images.unsplash.com/photo-1618220179428-22790b461013?auto=format&fit=crop&q=80&w=1600",
    ),
    Banner(
        position=BannerPosition.MAIN,
        category_name="No Category Selected",
        image_url="https://images.unsplash.com/photo-1616486338812-3dadae4b4f9d?auto=format&fit=crop&q=80&w=1600",
    ),
    Banner(
        position=BannerPosition.POPUP,
        category_name="No Category Selected",
        image_url="https://images.unsplash.com/photo-1607083206869-4c7672e72a8a?auto=format&fit=crop&q=80&w=800",
    ),
]

SAMPLE_VIDEO_FINDS = [
    VideoFind(
        title="Steel water bottle, 1L",
        price=349,
        original_price=499,
        video_url="https://videos.example.com/finds/steel-bottle.mp4",
    ),
    VideoFind(
        title="Cotton kurta set",
        price=899,
        original_price=1299,
        video_url="https://videos.example.com/finds/kurta-set.mp4",
    ),
]


def init_db(
    drop: bool = typer.Option(False, "--drop", help="Drop every table first"),
) -> None:
    """Create the database tables."""
    manager = DbManageService()
    if drop:
        if not typer.confirm("Drop all tables and their data?"):
            raise typer.Exit(code=1)
        manager.drop_all()
    manager.create_all()
    console.print(f"[green]✅ Tables ready at {get_config().database.url}[/green]")


def seed() -> None:
    """Insert default banners, deals, settings and sample video finds."""
    DbManageService().create_all()
    service = DbSessionService()
    with service.session_scope() as session:
        banners = BannerRepository(session)
        videos = VideoFindRepository(session)

        created_banners = 0
        if not banners.list_all():
            for banner in DEFAULT_BANNERS:
                banners.create(banner.model_copy())
                created_banners += 1

        created_videos = 0
        if not videos.list_all():
            for video in SAMPLE_VIDEO_FINDS:
                videos.create(video.model_copy())
                created_videos += 1

        DealsConfigRepository(session).get_or_create(
            get_config().deals.flash_deal_default_hours
        )
        AppSettingsRepository(session).get_or_create()

    table = Table(title="Seed data")
    table.add_column("Record", style="cyan")
    table.add_column("Created", style="green")
    table.add_row("Banners", str(created_banners))
    table.add_row("Video finds", str(created_videos))
    table.add_row("Deals config", "ensured")
    table.add_row("App settings", "ensured")
    console.print(table)
