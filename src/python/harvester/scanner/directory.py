"""
Directory scanning for discovering files and their inode identities.

Any filesystem error raised here is fatal for a run: roots that do not
exist, unreadable directories and failed stat calls all propagate.
"""

import os
from pathlib import Path
from typing import List, Tuple


def _check_root(directory: Path) -> None:
    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")


def find_all_files(directory: Path) -> List[Path]:
    """
    Recursively list the regular files under a directory, depth-first.

    Directories are traversed but never returned. Entries of each directory
    are visited in name order, and symbolic links are followed.

    Args:
        directory: Root directory to scan

    Returns:
        List of file paths

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        OSError: If a directory cannot be listed.
    """
    _check_root(directory)

    files: List[Path] = []
    _collect_files(directory, files)
    return files


def _collect_files(directory: Path, output: List[Path]) -> None:
    for path in sorted(directory.iterdir()):
        if path.is_dir():
            _collect_files(path, output)
        else:
            output.append(path)


def file_identity(path: Path) -> Tuple[int, int]:
    """
    Get the (device, inode) pair identifying a file's data.

    All hardlinks to the same data share this pair.

    Args:
        path: The file to look up (symbolic links are followed)

    Returns:
        Tuple of (st_dev, st_ino)
    """
    stats = os.stat(path)
    return stats.st_dev, stats.st_ino
