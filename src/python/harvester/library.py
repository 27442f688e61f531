"""
Canonical library layout.

    <library>/shows/<series>/Season <N>/episode <E>.<ext>
    <library>/movies/<title> (<year>)/movie.<ext>
    <library>/movies/<title>/movie.<ext>

``<ext>`` is the source file's extension, unchanged.
"""

import re
from pathlib import Path
from typing import Optional

from harvester.models.media import MediaRecord, Movie, ScannedEntry, ShowEpisode
from harvester.utils import safe_int

SHOWS_DIR = "shows"
MOVIES_DIR = "movies"

_SEASON_DIR = re.compile(r"Season (\d+)", re.ASCII)
_EPISODE_FILE = re.compile(r"episode (\d+)\.[^.]+", re.ASCII)
_MOVIE_FILE = re.compile(r"movie\.[^.]+")
_MOVIE_DIR_YEAR = re.compile(r"(.+) \((\d+)\)", re.ASCII)


def record_path(library: Path, record: MediaRecord, extension: str) -> Optional[Path]:
    """
    Compute where a record lives in the library.

    Args:
        library: Library root
        record: The classified record
        extension: File extension without the leading dot

    Returns:
        The target path, or None for records that are not linked
    """
    if isinstance(record, ShowEpisode):
        return (
            library
            / SHOWS_DIR
            / record.series_name
            / f"Season {record.season}"
            / f"episode {record.episode}.{extension}"
        )
    if isinstance(record, Movie):
        folder = record.title if record.year is None else f"{record.title} ({record.year})"
        return library / MOVIES_DIR / folder / f"movie.{extension}"
    return None


def library_path(library: Path, entry: ScannedEntry) -> Optional[Path]:
    """Target path of a scanned entry, or None if it is not linked."""
    if entry.classification is None:
        return None
    return record_path(library, entry.classification, entry.path.suffix.lstrip("."))


def parse_library_path(library: Path, path: Path) -> Optional[MediaRecord]:
    """
    Read back the record a library path encodes.

    This is the inverse of record_path(). Paths that do not follow the
    layout (files the tool would never create) give None.

    Examples:
        >>> parse_library_path(Path("/lib"), Path("/lib/shows/dark/Season 2/episode 5.mkv"))
        ShowEpisode(series_name='dark', season=2, episode=5)
        >>> parse_library_path(Path("/lib"), Path("/lib/movies/notes.txt")) is None
        True
    """
    try:
        parts = path.relative_to(library).parts
    except ValueError:
        return None

    if len(parts) == 4 and parts[0] == SHOWS_DIR:
        _, series, season_dir, filename = parts
        season_match = _SEASON_DIR.fullmatch(season_dir)
        episode_match = _EPISODE_FILE.fullmatch(filename)
        if not season_match or not episode_match:
            return None
        season = safe_int(season_match[1])
        episode = safe_int(episode_match[1])
        if season is None or episode is None or season < 1:
            return None
        return ShowEpisode(series_name=series, season=season, episode=episode)

    if len(parts) == 3 and parts[0] == MOVIES_DIR:
        _, folder, filename = parts
        if not _MOVIE_FILE.fullmatch(filename):
            return None
        year_match = _MOVIE_DIR_YEAR.fullmatch(folder)
        if year_match:
            return Movie(title=year_match[1], year=safe_int(year_match[2]))
        return Movie(title=folder)

    return None
