"""Data models for harvester."""

from harvester.models.enums import ActionType, MediaKind
from harvester.models.media import (
    Garbage,
    MediaRecord,
    Movie,
    ScannedEntry,
    ShowEpisode,
)

__all__ = [
    "ActionType",
    "Garbage",
    "MediaKind",
    "MediaRecord",
    "Movie",
    "ScannedEntry",
    "ShowEpisode",
]
