"""Entity package: AppSettings."""

from .entity import (
    AppSettings,
    BarcodeSettings,
    BarcodeSettingsUpdate,
    DisplayField,
    DisplaySection,
    default_display_sections,
)
from .repository import AppSettingsRepository
from .table import AppSettingsTable

__all__ = [
    "AppSettings",
    "AppSettingsRepository",
    "AppSettingsTable",
    "BarcodeSettings",
    "BarcodeSettingsUpdate",
    "DisplayField",
    "DisplaySection",
    "default_display_sections",
]
