"""Query operations on the registry."""

from typing import Iterator, NamedTuple

from placefolder.registry.model import Registry

SORT_KEYS = ("name", "path")


class ProjectEntry(NamedTuple):
    name: str
    path: str
    favorite: bool


def find_project(registry: Registry, name: str) -> str | None:
    """Return the path registered under ``name``, or None."""
    return registry.projects.get(name)


def list_projects(
    registry: Registry,
    filter_text: str | None = None,
    favorites_only: bool = False,
    recent_only: bool = False,
    sort: str = "name",
) -> Iterator[ProjectEntry]:
    """List projects with optional filters.

    Args:
        registry: Loaded registry.
        filter_text: Case-insensitive substring matched against name or path.
        favorites_only: Only include favorites.
        recent_only: Only include projects in the recent list.
        sort: "name" or "path". Any other value keeps registry order.

    Yields:
        ProjectEntry for every project matching the filters.
    """
    needle = filter_text.lower() if filter_text else None
    recent = set(registry.recent)

    items = list(registry.projects.items())
    if sort == "name":
        items.sort(key=lambda item: item[0])
    elif sort == "path":
        items.sort(key=lambda item: (item[1], item[0]))

    for name, path in items:
        if needle and needle not in name.lower() and needle not in path.lower():
            continue
        favorite = registry.is_favorite(name)
        if favorites_only and not favorite:
            continue
        if recent_only and name not in recent:
            continue
        yield ProjectEntry(name, path, favorite)


def recent_projects(registry: Registry) -> Iterator[tuple[str, str]]:
    """Yield (name, path) for recent names that are still projects, newest first."""
    for name in registry.recent:
        path = registry.projects.get(name)
        if path is not None:
            yield name, path
