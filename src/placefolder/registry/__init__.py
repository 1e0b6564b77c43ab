"""Registry module — load, query, mutate, merge and validate the project registry."""

from placefolder.registry.loader import (
    export_registry,
    load_registry,
    read_registry_file,
    save_registry,
)
from placefolder.registry.merge import MergeResult, merge_registry
from placefolder.registry.model import RECENT_LIMIT, Registry
from placefolder.registry.query import ProjectEntry, find_project, list_projects, recent_projects
from placefolder.registry.updater import (
    add_project,
    record_recent,
    remove_project,
    rename_project,
    resolve_goto,
    set_favorite,
)
from placefolder.registry.validator import ValidationResult, validate_registry

__all__ = [
    "RECENT_LIMIT",
    "Registry",
    "load_registry",
    "save_registry",
    "export_registry",
    "read_registry_file",
    "add_project",
    "remove_project",
    "rename_project",
    "set_favorite",
    "record_recent",
    "resolve_goto",
    "ProjectEntry",
    "find_project",
    "list_projects",
    "recent_projects",
    "MergeResult",
    "merge_registry",
    "ValidationResult",
    "validate_registry",
]
