"""Discover git repositories under a directory and register them."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from placefolder.errors import ScanRootError
from placefolder.registry.model import Registry
from placefolder.registry.updater import add_project

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Repositories found by a scan and what happened to each."""

    added: list[tuple[str, str]] = field(default_factory=list)
    skipped: list[tuple[str, str]] = field(default_factory=list)
    clashes: list[tuple[str, str]] = field(default_factory=list)

    def summary(self) -> str:
        found = len(self.added) + len(self.skipped) + len(self.clashes)
        lines = [f"Found {found} git repositories"]
        for name, path in self.added:
            lines.append(f"  + {name:<20} {path}")
        for name, path in self.skipped:
            lines.append(f"  = {name:<20} {path} (name already registered)")
        for name, path in self.clashes:
            lines.append(f"  = {name:<20} {path} (name taken by another repository in this scan)")
        skipped = len(self.skipped) + len(self.clashes)
        lines.append(f"{len(self.added)} added, {skipped} skipped")
        return "\n".join(lines)


def discover_repos(root: Path | str) -> list[Path]:
    """Walk ``root`` and find every directory that holds a ``.git`` entry.

    Hidden directories are not entered, and neither is a repository once
    found. ``root`` itself counts if it is a repository.

    Returns:
        Sorted list of absolute repository paths.

    Raises:
        ScanRootError: If ``root`` is not a directory.
    """
    base = Path(root).expanduser().resolve()
    if not base.is_dir():
        raise ScanRootError(f"Not a directory: {base}")

    repos: list[Path] = []
    for dirpath, dirnames, _ in os.walk(base):
        current = Path(dirpath)
        if (current / ".git").exists():
            repos.append(current)
            dirnames.clear()
            continue
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]

    return sorted(repos)


def scan_into(registry: Registry, root: Path | str) -> ScanResult:
    """Register every repository under ``root`` by its directory name.

    Names that are already registered are left alone. When two repositories
    share a directory name, the first in sorted order wins.

    Args:
        registry: Registry (mutated in place).
        root: Directory to scan.

    Returns:
        ScanResult listing added and skipped repositories.

    Raises:
        ScanRootError: If ``root`` is not a directory.
    """
    result = ScanResult()
    for repo in discover_repos(root):
        name, path = repo.name, str(repo)
        if any(name == added for added, _ in result.added):
            result.clashes.append((name, path))
            continue
        if name in registry.projects:
            result.skipped.append((name, path))
            continue
        add_project(registry, name, path)
        result.added.append((name, path))
    logger.debug("Scan of %s added %d project(s)", root, len(result.added))
    return result
