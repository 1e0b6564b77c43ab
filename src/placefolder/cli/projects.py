"""Project CLI commands."""

from pathlib import Path

from placefolder.cli.commands import (
    AddCommand,
    FavoriteCommand,
    GoCommand,
    ListCommand,
    OpenCommand,
    RecentCommand,
    RemoveCommand,
    RenameCommand,
)
from placefolder.editor import open_in_editor
from placefolder.errors import ProjectNotFoundError
from placefolder.registry.loader import load_registry, save_registry
from placefolder.registry.query import list_projects, recent_projects
from placefolder.registry.updater import (
    add_project,
    record_recent,
    remove_project,
    rename_project,
    resolve_goto,
    set_favorite,
)


def cmd_add(command: AddCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    path = str(Path.cwd()) if command.path == "." else command.path
    if not Path(path).expanduser().exists():
        print(f"Warning: Path '{path}' does not exist!")
    add_project(registry, command.name, path)
    save_registry(registry, registry_file)
    print(f"Added project: {command.name} ({path})")
    return 0


def cmd_remove(command: RemoveCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    removed = remove_project(registry, command.name)
    save_registry(registry, registry_file)
    if removed:
        print(f"Removed project: {command.name}")
    else:
        print(f"No project named '{command.name}'")
    return 0


def cmd_list(command: ListCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    entries = list(list_projects(
        registry,
        filter_text=command.filter,
        favorites_only=command.favorites,
        recent_only=command.recent,
        sort=command.sort,
    ))

    if not entries:
        print("No projects match the given filters.")
        return 0

    print(f"{'★':<2} {'PROJECT':<20} PATH")
    for entry in entries:
        mark = "*" if entry.favorite else " "
        print(f"{mark:<2} {entry.name:<20} {entry.path}")
    return 0


def cmd_go(command: GoCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    path = resolve_goto(registry, command.name)
    save_registry(registry, registry_file)
    print(path)
    return 0


def cmd_open(command: OpenCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    path = registry.projects.get(command.name)
    if path is None:
        raise ProjectNotFoundError(command.name)
    record_recent(registry, command.name)
    save_registry(registry, registry_file)

    result = open_in_editor(command.editor, path)
    if result.returncode != 0:
        print(f"ERROR: '{command.editor}' exited with status {result.returncode}")
        return 1
    print(f"Opened '{command.name}' in editor '{command.editor}'")
    return 0


def cmd_rename(command: RenameCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    rename_project(registry, command.old_name, command.new_name)
    save_registry(registry, registry_file)
    print(f"Renamed '{command.old_name}' -> '{command.new_name}'")
    return 0


def cmd_favorite(command: FavoriteCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    set_favorite(registry, command.name, not command.unset)
    save_registry(registry, registry_file)
    print(f"{'Unset' if command.unset else 'Set as'} favorite: {command.name}")
    return 0


def cmd_recent(command: RecentCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    rows = list(recent_projects(registry))
    if not rows:
        print("No recent projects.")
        return 0

    print(f"{'PROJECT':<20} PATH")
    for name, path in rows:
        print(f"{name:<20} {path}")
    return 0
