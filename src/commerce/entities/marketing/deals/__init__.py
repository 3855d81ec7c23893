"""Entity package: DealsConfig."""

from .entity import Countdown, DealsConfig, DealsConfigUpdate, countdown
from .repository import DealsConfigRepository
from .table import DealsConfigTable

__all__ = [
    "Countdown",
    "DealsConfig",
    "DealsConfigRepository",
    "DealsConfigTable",
    "DealsConfigUpdate",
    "countdown",
]
