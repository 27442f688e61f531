"""
Keep the library's hardlinks in sync with the incoming inventory.

A run has two phases, always in this order:

1. Reclaim: library files laid out like links this tool creates, whose
   inode no longer belongs to any media entry of the inventory, are stale
   and get removed. Other files are left alone.
2. Create: every media entry is hardlinked to its canonical library path,
   unless something already exists there.

Library files that survive both phases without sitting at a computed
target path are reported as extra files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Set, Tuple

from harvester.executor import Action, ActionExecutor
from harvester.library import library_path, parse_library_path
from harvester.models.media import ScannedEntry
from harvester.scanner.analyzer import media_identities
from harvester.scanner.directory import file_identity, find_all_files

logger = logging.getLogger(__name__)


class SyncResult:
    """Track results of a synchronization run."""
    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run
        self.created: List[Tuple[Path, Path]] = []
        self.removed: List[Path] = []
        self.extra: List[Path] = []
        self.pruned: List[Path] = []
        self.skipped = 0
        # Filled in by organize_library() for reporting
        self.entries: List[ScannedEntry] = []
        self.actions: List[Action] = []

    def __str__(self):
        prefix = "[DRY RUN] Would have created" if self.dry_run else "Created"
        return (
            f"{prefix} {len(self.created)} links. "
            f"Removed {len(self.removed)} stale links. "
            f"Skipped {self.skipped} existing targets. "
            f"Pruned {len(self.pruned)} directories. "
            f"Extra files: {len(self.extra)}"
        )


def _prefix(executor: ActionExecutor) -> str:
    return "[DRY RUN] " if executor.dry_run else ""


def reclaim_stale_links(
    executor: ActionExecutor,
    entries: List[ScannedEntry],
    library: Path,
    result: SyncResult,
) -> List[Path]:
    """
    Remove library links whose source is gone from the inventory.

    Args:
        executor: Executor performing the removals
        entries: Current inventory of the incoming directory
        library: Library root
        result: Result to record removals in

    Returns:
        The library files that were kept
    """
    protected = media_identities(entries)
    kept = []

    for path in find_all_files(library):
        if file_identity(path) in protected:
            kept.append(path)
        elif parse_library_path(library, path) is not None:
            logger.info("%sRemoving stale link: %s", _prefix(executor), path)
            executor.remove_file(path)
            result.removed.append(path)
        else:
            kept.append(path)

    return kept


def create_links(
    executor: ActionExecutor,
    entries: List[ScannedEntry],
    library: Path,
    result: SyncResult,
) -> Set[Path]:
    """
    Hardlink every media entry to its library path.

    When several entries map to the same path the first one wins and the
    rest are skipped, as is any entry whose path already exists.

    Returns:
        The set of computed target paths
    """
    targets: Set[Path] = set()

    for entry in entries:
        link = library_path(library, entry)
        if link is None:
            continue
        targets.add(link)

        if executor.exists(link):
            logger.debug("Target exists, skipping: %s", link)
            result.skipped += 1
            continue

        logger.info("%sCreating hard link: %s -> %s", _prefix(executor), entry.path, link)
        executor.create_dir_all(link.parent)
        executor.hard_link(entry.path, link)
        result.created.append((entry.path, link))

    return targets


def synchronize(
    executor: ActionExecutor,
    entries: List[ScannedEntry],
    library: Path,
    result: Optional[SyncResult] = None,
) -> SyncResult:
    """
    Reclaim stale links, then create missing ones.

    Args:
        executor: Executor performing (or previewing) the mutations
        entries: Inventory of the incoming directory
        library: Library root; must exist
        result: Result to extend, a new one if None

    Returns:
        SyncResult with created, removed, skipped and extra files

    Raises:
        FileNotFoundError: If the library does not exist.
        OSError: On any filesystem failure, including cross-device links.
    """
    if result is None:
        result = SyncResult(dry_run=executor.dry_run)

    kept = reclaim_stale_links(executor, entries, library, result)
    targets = create_links(executor, entries, library, result)

    for path in kept:
        if path not in targets:
            logger.warning("Extra file found: %s", path)
            result.extra.append(path)

    return result
