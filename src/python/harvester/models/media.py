"""
MediaRecord and ScannedEntry models.

A MediaRecord is what the classifier infers from a filename: a Movie, a
ShowEpisode, or Garbage (a recognized file that carries no media).

A ScannedEntry ties one file found under the incoming directory to its
classification and to the (device, inode) identity used to recognize the
hardlinks created from it in the library.

Records of different kinds compare by kind first (movies, then episodes,
then garbage) so inventories can be sorted for deterministic output.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Tuple

from harvester.models.enums import MediaKind


@dataclass(frozen=True)
class MediaRecord:
    """Base class for classification results."""

    kind: ClassVar[MediaKind]

    @property
    def is_media(self) -> bool:
        """True if this record is linked into the library."""
        return self.kind.is_media

    def sort_key(self) -> tuple:
        return (self.kind.value,)

    def __lt__(self, other: "MediaRecord") -> bool:
        if not isinstance(other, MediaRecord):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "MediaRecord") -> bool:
        if not isinstance(other, MediaRecord):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: "MediaRecord") -> bool:
        if not isinstance(other, MediaRecord):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: "MediaRecord") -> bool:
        if not isinstance(other, MediaRecord):
            return NotImplemented
        return self.sort_key() >= other.sort_key()


@dataclass(frozen=True)
class Movie(MediaRecord):
    """
    A movie.

    Attributes:
        title: Normalized (lower-case) title, e.g. "some movie"
        year: Release year, or None when the filename carries none
    """
    title: str
    year: Optional[int] = None

    kind: ClassVar[MediaKind] = MediaKind.MOVIE

    def sort_key(self) -> tuple:
        # None sorts before any year
        return (self.kind.value, self.title, self.year is not None, self.year or 0)


@dataclass(frozen=True)
class ShowEpisode(MediaRecord):
    """
    One episode of a series.

    Attributes:
        series_name: Normalized (lower-case) series name
        season: Season number, 1 or greater
        episode: Episode number, 0 or greater
    """
    series_name: str
    season: int
    episode: int

    kind: ClassVar[MediaKind] = MediaKind.SHOW_EPISODE

    def __post_init__(self):
        if self.season < 1:
            raise ValueError(f"season must be >= 1, got {self.season}")
        if self.episode < 0:
            raise ValueError(f"episode must be >= 0, got {self.episode}")

    def sort_key(self) -> tuple:
        return (self.kind.value, self.series_name, self.season, self.episode)


@dataclass(frozen=True)
class Garbage(MediaRecord):
    """A recognized non-media file."""

    kind: ClassVar[MediaKind] = MediaKind.GARBAGE


@dataclass(frozen=True)
class ScannedEntry:
    """
    A regular file found under the incoming directory.

    Attributes:
        path: Path of the file at scan time
        classification: Inferred record, or None if the file was not recognized
        inode: Inode number of the file
        device: Device number the inode belongs to
    """
    path: Path
    classification: Optional[MediaRecord]
    inode: int
    device: int = 0

    @property
    def identity(self) -> Tuple[int, int]:
        """(device, inode) pair shared by the file and all of its hardlinks."""
        return (self.device, self.inode)

    @property
    def is_media(self) -> bool:
        """True if this entry should be linked into the library."""
        return self.classification is not None and self.classification.is_media

    def to_dict(self) -> dict:
        """Convert to dictionary for pandas DataFrame."""
        record = self.classification
        return {
            "path": str(self.path),
            "kind": record.kind.name if record is not None else None,
            "title": getattr(record, "title", None),
            "year": getattr(record, "year", None),
            "series_name": getattr(record, "series_name", None),
            "season": getattr(record, "season", None),
            "episode": getattr(record, "episode", None),
            "device": self.device,
            "inode": self.inode,
        }
