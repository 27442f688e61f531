"""
Build the labeled inventory of an incoming directory.

Each regular file becomes a ScannedEntry holding its classification and
its (device, inode) identity.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from harvester.models.media import ScannedEntry
from harvester.scanner.directory import file_identity, find_all_files
from harvester.scanner.patterns import classify_with_reason

logger = logging.getLogger(__name__)


def analyze_file(
    path: Path,
    video_extensions: Optional[Iterable[str]] = None,
    garbage_extensions: Optional[Iterable[str]] = None,
) -> ScannedEntry:
    """
    Classify a single file and resolve its identity.

    Classification misses are logged and leave the classification empty.
    """
    record, reason = classify_with_reason(path, video_extensions, garbage_extensions)
    if reason is not None:
        logger.warning("%s", reason)

    device, inode = file_identity(path)
    return ScannedEntry(path=path, classification=record, inode=inode, device=device)


def analyze_directory(
    directory: Path,
    video_extensions: Optional[Iterable[str]] = None,
    garbage_extensions: Optional[Iterable[str]] = None,
) -> List[ScannedEntry]:
    """
    Scan a directory and classify every file found under it.

    Args:
        directory: The incoming directory
        video_extensions: Extensions treated as video (classifier default if None)
        garbage_extensions: Extensions treated as garbage (classifier default if None)

    Returns:
        List of ScannedEntry, in scan order

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        OSError: If listing a directory or reading a file's metadata fails.
    """
    logger.info("Scanning %s...", directory)

    entries = [
        analyze_file(path, video_extensions, garbage_extensions)
        for path in find_all_files(directory)
    ]

    logger.info("Found %d files.", len(entries))
    return entries


def media_identities(entries: Iterable[ScannedEntry]) -> Set[Tuple[int, int]]:
    """
    Identities of the entries that are linked into the library.

    Garbage and unrecognized entries are left out, so library files sharing
    their inode are not protected from reclaim.
    """
    return {entry.identity for entry in entries if entry.is_media}
