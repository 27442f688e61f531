"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def incoming(tmp_path: Path) -> Path:
    """An empty incoming (downloads) directory."""
    path = tmp_path / "incoming"
    path.mkdir()
    return path


@pytest.fixture
def library(tmp_path: Path) -> Path:
    """An empty library directory on the same filesystem as incoming."""
    path = tmp_path / "library"
    path.mkdir()
    return path


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Create a file (and its parent directories) with some content."""
    def _make(path: Path, content: str = "data") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _make


@pytest.fixture
def sample_downloads(incoming: Path, make_file) -> dict[str, Path]:
    """A typical downloads directory: episodes, a movie and some sidecars."""
    return {
        "episode": make_file(incoming / "Show Name S02E05 720p.mkv"),
        "dash": make_file(incoming / "[Group] Series Name - 13 [1080p].mkv"),
        "movie": make_file(incoming / "Some.Movie.1999.BluRay" / "Some.Movie.1999.BluRay.mp4"),
        "subtitle": make_file(incoming / "Some.Movie.1999.BluRay" / "Some.Movie.1999.BluRay.srt"),
        "unknown": make_file(incoming / "readme.xyz"),
    }
