"""
Remove directories left empty in the library.
"""

import logging
from pathlib import Path
from typing import List

from harvester.executor import ActionExecutor

logger = logging.getLogger(__name__)


def prune_empty_directories(executor: ActionExecutor, directory: Path) -> List[Path]:
    """
    Recursively remove empty directories below a root.

    Children are resolved before their parent, so a directory holding only
    empty directories is removed in the same pass. The root itself is kept.

    Args:
        executor: Executor performing (or previewing) the removals
        directory: Root directory to clean up

    Returns:
        Removed directories, deepest first
    """
    removed: List[Path] = []
    _prune(executor, directory, removed)
    return removed


def _prune(executor: ActionExecutor, directory: Path, removed: List[Path]) -> bool:
    """Prune below ``directory`` and report whether it is now empty."""
    is_empty = True

    for child in executor.list_dir(directory):
        if not executor.is_dir(child):
            is_empty = False
        elif _prune(executor, child, removed):
            prefix = "[DRY RUN] " if executor.dry_run else ""
            logger.info("%sRemoving empty directory: %s", prefix, child)
            executor.remove_dir(child)
            removed.append(child)
        else:
            is_empty = False

    return is_empty
