"""Registry mutations that keep favorites and recent consistent."""

from placefolder.errors import InvalidNameError, ProjectNotFoundError
from placefolder.registry.model import RECENT_LIMIT, Registry


def add_project(registry: Registry, name: str, path: str) -> None:
    """Insert or overwrite the mapping ``name -> path``.

    Favorite and recent status of an existing name are left as they are.
    Whether ``path`` exists on disk is the caller's concern.

    Raises:
        InvalidNameError: If ``name`` is empty.
    """
    if not name:
        raise InvalidNameError("Project name must not be empty")
    registry.projects[name] = path


def remove_project(registry: Registry, name: str) -> bool:
    """Remove a project and its favorite flag.

    Recent history keeps the name. Removing an unknown name is a no-op.

    Returns:
        True if a mapping was removed.
    """
    removed = registry.projects.pop(name, None) is not None
    set_favorite(registry, name, False)
    return removed


def rename_project(registry: Registry, old_name: str, new_name: str) -> None:
    """Move a project's path to a new name.

    The favorite flag is dropped rather than transferred; recent history
    still refers to ``old_name``.

    Raises:
        ProjectNotFoundError: If ``old_name`` is not registered.
        InvalidNameError: If ``new_name`` is empty.
    """
    if old_name not in registry.projects:
        raise ProjectNotFoundError(old_name)
    if not new_name:
        raise InvalidNameError("Project name must not be empty")
    path = registry.projects.pop(old_name)
    registry.projects[new_name] = path
    set_favorite(registry, old_name, False)


def set_favorite(
    registry: Registry,
    name: str,
    is_favorite: bool,
    require_project: bool = True,
) -> None:
    """Mark or unmark a project as favorite.

    Unsetting never fails, even for names that are no longer projects.
    Setting an existing favorite keeps its position.

    Args:
        registry: Registry (mutated in place).
        name: Project name.
        is_favorite: Whether the name should be a favorite.
        require_project: Reject setting a favorite for an unknown name.

    Raises:
        ProjectNotFoundError: If setting and ``name`` is not a project while
            ``require_project`` is true.
    """
    if not is_favorite:
        registry.favorites = [n for n in registry.favorites if n != name]
        return
    if require_project and name not in registry.projects:
        raise ProjectNotFoundError(name)
    if name not in registry.favorites:
        registry.favorites.append(name)


def record_recent(registry: Registry, name: str) -> None:
    """Move ``name`` to the front of the recent list, capped at RECENT_LIMIT.

    Repeated names already in the list are collapsed to their first entry.
    """
    recent = [n for n in dict.fromkeys(registry.recent) if n != name]
    recent.insert(0, name)
    registry.recent = recent[:RECENT_LIMIT]


def resolve_goto(registry: Registry, name: str) -> str:
    """Resolve a project for navigation.

    Sets ``goto_path`` and counts as a use of the project.

    Raises:
        ProjectNotFoundError: If ``name`` is not registered.
    """
    path = registry.projects.get(name)
    if path is None:
        raise ProjectNotFoundError(name)
    registry.goto_path = path
    record_recent(registry, name)
    return path
