"""
Filename classification for incoming media files.

This module infers a MediaRecord from a file path, without touching the
filesystem. Files are dispatched by extension:

1. Garbage extensions (subtitles, audio, artwork, Blu-ray structure files,
   torrent/checksum/info sidecars) are always Garbage.
2. Video extensions have their stem normalized and run through RULES, an
   ordered cascade where the first matching rule wins:
   a. Explicit marker:   "show name s02e05 1080p"     -> episode 5 of season 2
   b. Dash episode:      "show name - 13v2 end"       -> episode 13
   c. Quoted title:      "show name e07 'the title'"  -> episode 7
   d. Trailing number:   "show name 12 (bd) v2"       -> episode 12
   e. Release year:      "some movie 1999 remastered" -> movie from 1999
3. Anything else is not recognized.

The order of RULES is a disambiguation contract: episode-shaped rules are
tried from most to least specific before the year rule, so reordering them
changes classification output.
"""

import re
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple, Union

from harvester.models.media import Garbage, MediaRecord, Movie, ShowEpisode
from harvester.utils import safe_int

VIDEO_EXTENSIONS = frozenset({"mkv", "mp4"})

GARBAGE_EXTENSIONS = frozenset({
    # Subtitles
    "srt", "sub", "idx",
    # Audio
    "ogg", "mp3",
    # Artwork
    "jpg", "png",
    # Blu-ray disc structure
    "ts", "bdjo", "clpi", "mpls", "m2ts", "bdmv",
    # Release sidecars
    "torrent", "meta", "exe", "nfo", "txt", "md5",
})

_FLAGS = re.IGNORECASE | re.ASCII

# "[group]" tags along with the separators around them
_RELEASE_TAG = re.compile(r"[. _]*\[[^\]]+\][. _]*")

_SEASON_EPISODE = re.compile(r"(.*) s(\d+)e(\d+) (.*)", _FLAGS)
_DASH_EPISODE = re.compile(r"^(.*) - (\d+)(v\d)?( end)?( .*)?$", _FLAGS)
_QUOTED_EPISODE = re.compile(r"^(.*) e(\d+)( end)? '.*'?$", _FLAGS)
_TRAILING_EPISODE = re.compile(r"^(.*) (\d+)( end)?( \((.*)\))?( v2)?$", _FLAGS)
_MOVIE_YEAR = re.compile(r"(.*[^-]) (\d{4})( [^-]|$)", _FLAGS)

# Bare trailing numbers in this range are release years, not episodes
_YEAR_LIKE = re.compile(r"(19|20)\d{2}", _FLAGS)

Rule = Callable[[str], Optional[MediaRecord]]


def normalize_stem(stem: str) -> str:
    """
    Normalize a filename stem for rule matching.

    Lower-cases, drops "[...]" release tags, and turns "_" and "." into spaces.

    Examples:
        >>> normalize_stem("[Group] Show_Name - 01 [1080p]")
        'show name - 01'
        >>> normalize_stem("Some.Movie.1999.BluRay")
        'some movie 1999 bluray'
    """
    name = stem.lower()
    name = _RELEASE_TAG.sub(" ", name)
    name = name.replace("_", " ").replace(".", " ")
    return name.strip()


def _episode(name: str, season: Optional[int], episode: Optional[int]) -> Optional[ShowEpisode]:
    name = name.strip()
    if not name or season is None or episode is None:
        return None
    if season < 1 or episode < 0:
        return None
    return ShowEpisode(series_name=name, season=season, episode=episode)


def match_season_episode(name: str) -> Optional[MediaRecord]:
    """Rule a: "<name> s<season>e<episode> <rest>"."""
    match = _SEASON_EPISODE.match(name)
    if not match:
        return None
    return _episode(match[1], safe_int(match[2]), safe_int(match[3]))


def match_dash_episode(name: str) -> Optional[MediaRecord]:
    """Rule b: "<name> - <episode>[vN][ end][ <rest>]", season 1."""
    match = _DASH_EPISODE.match(name)
    if not match:
        return None
    return _episode(match[1], 1, safe_int(match[2]))


def match_quoted_episode(name: str) -> Optional[MediaRecord]:
    """Rule c: "<name> e<episode>[ end] '<title>'", season 1."""
    match = _QUOTED_EPISODE.match(name)
    if not match:
        return None
    return _episode(match[1], 1, safe_int(match[2]))


def match_trailing_episode(name: str) -> Optional[MediaRecord]:
    """Rule d: "<name> <episode>[ end][ (<rest>)][ v2]", season 1."""
    match = _TRAILING_EPISODE.match(name)
    if not match:
        return None
    if _YEAR_LIKE.fullmatch(match[2]):
        return None
    return _episode(match[1], 1, safe_int(match[2]))


def match_movie_year(name: str) -> Optional[MediaRecord]:
    """Rule e: "<title> <year>[ <rest>]"."""
    match = _MOVIE_YEAR.match(name)
    if not match:
        return None
    title = match[1].strip()
    year = safe_int(match[2])
    if not title or year is None:
        return None
    return Movie(title=title, year=year)


RULES: Tuple[Rule, ...] = (
    match_season_episode,
    match_dash_episode,
    match_quoted_episode,
    match_trailing_episode,
    match_movie_year,
)


def _normalize_extensions(extensions: Optional[Iterable[str]], default: frozenset) -> frozenset:
    if extensions is None:
        return default
    return frozenset(ext.lower().lstrip(".") for ext in extensions)


def get_extension(filename: Union[str, Path]) -> str:
    """
    Get the final extension of a filename, lower-cased and without the dot.

    Examples:
        >>> get_extension("Show - 01.MKV")
        'mkv'
        >>> get_extension("README")
        ''
    """
    return Path(filename).suffix.lower().lstrip(".")


def is_video_file(filename: Union[str, Path], video_extensions: Optional[Iterable[str]] = None) -> bool:
    """Check if a file has a video extension."""
    return get_extension(filename) in _normalize_extensions(video_extensions, VIDEO_EXTENSIONS)


def is_garbage_file(filename: Union[str, Path], garbage_extensions: Optional[Iterable[str]] = None) -> bool:
    """Check if a file has an extension recognized as non-media."""
    return get_extension(filename) in _normalize_extensions(garbage_extensions, GARBAGE_EXTENSIONS)


def classify_name(name: str) -> Optional[MediaRecord]:
    """
    Run a normalized name through RULES.

    Args:
        name: Output of normalize_stem()

    Returns:
        The record produced by the first matching rule, or None
    """
    for rule in RULES:
        record = rule(name)
        if record is not None:
            return record
    return None


def classify_with_reason(
    path: Union[str, Path],
    video_extensions: Optional[Iterable[str]] = None,
    garbage_extensions: Optional[Iterable[str]] = None,
) -> Tuple[Optional[MediaRecord], Optional[str]]:
    """
    Classify a file path.

    Args:
        path: The file to classify (only its name is used)
        video_extensions: Extensions treated as video; defaults to VIDEO_EXTENSIONS
        garbage_extensions: Extensions treated as garbage; defaults to GARBAGE_EXTENSIONS

    Returns:
        Tuple of (record, reason)
        - record: The inferred MediaRecord, or None if not recognized
        - reason: Diagnostic text when record is None, else None

    Examples:
        >>> classify_with_reason("Show Name S02E05 extra.mkv")
        (ShowEpisode(series_name='show name', season=2, episode=5), None)
        >>> classify_with_reason("cover.jpg")
        (Garbage(), None)
    """
    path = Path(path)

    if is_garbage_file(path, garbage_extensions):
        return Garbage(), None

    if is_video_file(path, video_extensions):
        name = normalize_stem(path.stem)
        record = classify_name(name)
        if record is None:
            return None, f"unknown filename pattern: {name!r}"
        return record, None

    return None, f"unknown extension: {str(path)!r}"


def classify(
    path: Union[str, Path],
    video_extensions: Optional[Iterable[str]] = None,
    garbage_extensions: Optional[Iterable[str]] = None,
) -> Optional[MediaRecord]:
    """Classify a file path, discarding the diagnostic. See classify_with_reason()."""
    record, _ = classify_with_reason(path, video_extensions, garbage_extensions)
    return record
