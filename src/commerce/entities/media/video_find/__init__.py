"""Entity package: VideoFind."""

from .entity import VideoFind, VideoFindUpdate
from .repository import VideoFindRepository
from .table import VideoFindTable

__all__ = ["VideoFind", "VideoFindRepository", "VideoFindTable", "VideoFindUpdate"]
