"""Enumerations for harvester models."""

from enum import Enum, auto


class MediaKind(Enum):
    """
    The kind of media a classified file holds.

    Declaration order doubles as the sort rank of MediaRecord values:
    - MOVIE: A feature film, optionally with a release year
    - SHOW_EPISODE: One episode of a series
    - GARBAGE: A recognized non-media file (subtitles, artwork, disc metadata)
    """
    MOVIE = auto()
    SHOW_EPISODE = auto()
    GARBAGE = auto()

    @property
    def is_media(self) -> bool:
        """Check if files of this kind are linked into the library."""
        return self in (MediaKind.MOVIE, MediaKind.SHOW_EPISODE)


class ActionType(Enum):
    """A filesystem mutation performed (or previewed) by an executor."""
    CREATE_DIR = auto()
    REMOVE_FILE = auto()
    REMOVE_DIR = auto()
    HARD_LINK = auto()
