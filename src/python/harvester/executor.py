"""
Executors performing (or previewing) library mutations.

The synchronizer and pruner never touch the filesystem directly: they ask
an executor to create directories, remove files and directories, and
create hardlinks. Every request is journaled in ``executor.actions``.

Executors also answer ``exists``, ``is_dir`` and ``list_dir`` as if every
journaled mutation had been applied. For FilesystemExecutor that is simply
the real filesystem; DryRunExecutor overlays its journal on it, so the
decision logic runs identically in both modes and a dry run reports exactly
the actions a real run would perform.

Example:
    >>> executor = make_executor(dry_run=True)
    >>> executor.create_dir_all(Path("/library/movies/heat (1995)"))
    >>> executor.exists(Path("/library/movies/heat (1995)"))
    True
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Set

from harvester.models.enums import ActionType


@dataclass(frozen=True)
class Action:
    """
    A journaled filesystem mutation.

    Attributes:
        type: What was done
        path: The path created or removed (the link path for HARD_LINK)
        source: The link source for HARD_LINK, else None
    """
    type: ActionType
    path: Path
    source: Optional[Path] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for pandas DataFrame."""
        return {
            "action": self.type.name,
            "path": str(self.path),
            "source": str(self.source) if self.source is not None else None,
        }


class ActionExecutor:
    """Base executor: journals mutations and keeps the post-mutation view."""

    dry_run = False

    def __init__(self):
        self.actions: List[Action] = []
        # Paths created by this executor, mapped to whether they are directories
        self._created: Dict[Path, bool] = {}
        self._removed: Set[Path] = set()

    # Read side

    def exists(self, path: Path) -> bool:
        if path in self._created:
            return True
        if path in self._removed:
            return False
        return os.path.lexists(path)

    def is_dir(self, path: Path) -> bool:
        """True for directories, False for files and symbolic links."""
        if path in self._created:
            return self._created[path]
        if path in self._removed:
            return False
        return path.is_dir() and not path.is_symlink()

    def list_dir(self, path: Path) -> List[Path]:
        """Children of a directory, sorted by name."""
        children: Set[Path] = set()
        if path not in self._removed and path.is_dir():
            children.update(path.iterdir())
        children.difference_update(self._removed)
        children.update(p for p in self._created if p.parent == path)
        return sorted(children)

    # Mutations

    def create_dir_all(self, path: Path) -> None:
        """Create a directory and any missing parents."""
        if self.exists(path):
            return

        missing = [path]
        for parent in path.parents:
            if self.exists(parent):
                break
            missing.append(parent)

        self._record(Action(ActionType.CREATE_DIR, path))
        self._create_dir_all(path)
        for created in missing:
            self._removed.discard(created)
            self._created[created] = True

    def remove_file(self, path: Path) -> None:
        self._record(Action(ActionType.REMOVE_FILE, path))
        self._remove_file(path)
        self._forget(path)

    def remove_dir(self, path: Path) -> None:
        """Remove an empty directory."""
        self._record(Action(ActionType.REMOVE_DIR, path))
        self._remove_dir(path)
        self._forget(path)

    def hard_link(self, source: Path, link: Path) -> None:
        """Create ``link`` as a hardlink to ``source``."""
        self._record(Action(ActionType.HARD_LINK, link, source))
        self._hard_link(source, link)
        self._removed.discard(link)
        self._created[link] = False

    def _forget(self, path: Path) -> None:
        self._created.pop(path, None)
        self._removed.add(path)

    def _record(self, action: Action) -> None:
        self.actions.append(action)

    # Filesystem primitives, overridden by subclasses

    def _create_dir_all(self, path: Path) -> None:
        raise NotImplementedError

    def _remove_file(self, path: Path) -> None:
        raise NotImplementedError

    def _remove_dir(self, path: Path) -> None:
        raise NotImplementedError

    def _hard_link(self, source: Path, link: Path) -> None:
        raise NotImplementedError


class FilesystemExecutor(ActionExecutor):
    """Applies mutations to the filesystem. OSError propagates unchanged."""

    def _create_dir_all(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def _remove_file(self, path: Path) -> None:
        path.unlink()

    def _remove_dir(self, path: Path) -> None:
        path.rmdir()

    def _hard_link(self, source: Path, link: Path) -> None:
        os.link(source, link)


class DryRunExecutor(ActionExecutor):
    """Journals mutations without applying them."""

    dry_run = True

    def _create_dir_all(self, path: Path) -> None:
        pass

    def _remove_file(self, path: Path) -> None:
        pass

    def _remove_dir(self, path: Path) -> None:
        pass

    def _hard_link(self, source: Path, link: Path) -> None:
        pass


def make_executor(dry_run: bool = False) -> ActionExecutor:
    """Get the executor for a run."""
    if dry_run:
        return DryRunExecutor()
    return FilesystemExecutor()
