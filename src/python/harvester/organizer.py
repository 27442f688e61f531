"""
Run a full harvest: scan the incoming directory, sync the library, prune it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from harvester.config import get_extensions
from harvester.executor import ActionExecutor, make_executor
from harvester.pruner import prune_empty_directories
from harvester.scanner.analyzer import analyze_directory
from harvester.synchronizer import SyncResult, synchronize

logger = logging.getLogger(__name__)


def organize_library(
    incoming: Path,
    library: Path,
    config: Optional[Dict[str, Any]] = None,
    dry_run: bool = False,
    executor: Optional[ActionExecutor] = None,
) -> SyncResult:
    """
    Hardlink the media under ``incoming`` into ``library``.

    Phases run strictly in sequence: the scan completes before any stale
    link is reclaimed, reclaim completes before links are created, and
    empty directories are pruned last.

    Args:
        incoming: Directory holding arbitrarily named media files
        library: Root of the canonical library layout; must exist
        config: Loaded configuration (see harvester.config)
        dry_run: If True, only log actions without touching the library
        executor: Executor to use instead of the one dry_run selects

    Returns:
        SyncResult with stats.

    Raises:
        FileNotFoundError, NotADirectoryError, OSError: On any filesystem
            failure; nothing is retried or rolled back.
        ValueError: If the config is malformed.
    """
    video_extensions, garbage_extensions = get_extensions(config or {})

    if executor is None:
        executor = make_executor(dry_run)

    if not library.exists():
        raise FileNotFoundError(f"Library directory not found: {library}")
    if not library.is_dir():
        raise NotADirectoryError(f"Not a directory: {library}")

    entries = analyze_directory(incoming, video_extensions, garbage_extensions)

    result = SyncResult(dry_run=executor.dry_run)
    synchronize(executor, entries, library, result)
    result.pruned.extend(prune_empty_directories(executor, library))
    result.entries = entries
    result.actions = list(executor.actions)

    logger.info("%s", result)
    return result
