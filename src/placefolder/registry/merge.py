"""Merge an imported registry into the active one.

Policies, applied in order:

1. Projects: every incoming mapping is inserted; incoming wins on a name
   collision.
2. Favorites: every incoming favorite is marked on the target, even when
   neither registry has a project by that name.
3. Recent: incoming names are recorded one by one in the order they appear
   in the incoming list, through the usual front-insert and truncate rule.
4. ``goto_path`` is never merged.

The merge is neither commutative nor symmetric.
"""

import logging
from dataclasses import dataclass, field

from placefolder.errors import InvalidNameError
from placefolder.registry.model import Registry
from placefolder.registry.updater import add_project, record_recent, set_favorite

logger = logging.getLogger(__name__)


@dataclass
class MergeResult:
    """What an import changed in the target registry."""

    added: list[str] = field(default_factory=list)
    overwritten: list[str] = field(default_factory=list)
    favorites: list[str] = field(default_factory=list)
    recent: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def summary(self) -> str:
        lines = [
            f"Projects: {len(self.added)} added, {len(self.overwritten)} overwritten",
            f"Favorites: {len(self.favorites)} marked",
            f"Recent: {len(self.recent)} recorded",
        ]
        if self.overwritten:
            lines.append(f"Overwritten: {', '.join(self.overwritten)}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        return "\n".join(lines)


def merge_registry(target: Registry, incoming: Registry) -> MergeResult:
    """Combine ``incoming`` into ``target`` in place.

    A project entry that cannot be added is recorded as a warning and
    skipped; it never aborts the rest of the merge. Favorites without a
    matching project are kept and reported.

    Args:
        target: Active registry (mutated in place).
        incoming: Registry read from the import file.

    Returns:
        MergeResult describing the changes.
    """
    result = MergeResult()

    for name, path in incoming.projects.items():
        previous = target.projects.get(name)
        try:
            add_project(target, name, path)
        except InvalidNameError as e:
            result.warnings.append(f"skipped project {name!r}: {e}")
            continue
        if previous is None:
            result.added.append(name)
        elif previous != path:
            result.overwritten.append(name)

    for name in incoming.favorites:
        set_favorite(target, name, True, require_project=False)
        result.favorites.append(name)
        if name not in target.projects:
            result.warnings.append(f"favorite '{name}' has no matching project")

    for name in incoming.recent:
        record_recent(target, name)
        result.recent.append(name)

    logger.debug(
        "Merged %d project(s), %d favorite(s), %d recent",
        len(incoming.projects), len(result.favorites), len(result.recent),
    )
    return result
