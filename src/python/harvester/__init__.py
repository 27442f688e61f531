"""
harvester - keep a movies/shows library of hardlinks in sync with a downloads directory.

Incoming files are classified from their names alone, then hardlinked into
a canonical layout:

    <library>/shows/<series>/Season <N>/episode <E>.<ext>
    <library>/movies/<title> (<year>)/movie.<ext>

Links whose source disappeared are reclaimed by inode, and directories left
empty are pruned.

Usage:
    from pathlib import Path
    from harvester import organize_library

    result = organize_library(Path("/srv/downloads"), Path("/srv/media"), dry_run=True)
    print(result)
"""

from harvester.__version__ import __version__
from harvester.executor import DryRunExecutor, FilesystemExecutor, make_executor
from harvester.models import Garbage, MediaKind, MediaRecord, Movie, ScannedEntry, ShowEpisode
from harvester.organizer import organize_library
from harvester.pruner import prune_empty_directories
from harvester.scanner import analyze_directory, classify, find_all_files
from harvester.synchronizer import SyncResult, synchronize

__all__ = [
    "__version__",
    # Models
    "Garbage",
    "MediaKind",
    "MediaRecord",
    "Movie",
    "ScannedEntry",
    "ShowEpisode",
    # Scanner
    "analyze_directory",
    "classify",
    "find_all_files",
    # Library sync
    "DryRunExecutor",
    "FilesystemExecutor",
    "SyncResult",
    "make_executor",
    "organize_library",
    "prune_empty_directories",
    "synchronize",
]
