"""Registry-wide CLI commands: export, import, validate."""

from placefolder.cli.commands import ExportCommand, ImportCommand, ValidateCommand
from placefolder.registry.loader import (
    export_registry,
    load_registry,
    read_registry_file,
    save_registry,
)
from placefolder.registry.merge import merge_registry
from placefolder.registry.validator import validate_registry


def cmd_export(command: ExportCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    export_registry(registry, command.file)
    print(f"Config exported to '{command.file}'")
    return 0


def cmd_import(command: ImportCommand, registry_file: str | None) -> int:
    # Read the import first so a bad file never touches the active registry.
    incoming = read_registry_file(command.file)
    registry = load_registry(registry_file)
    result = merge_registry(registry, incoming)
    save_registry(registry, registry_file)
    print(result.summary())
    print(f"Config imported from '{command.file}'")
    return 0


def cmd_validate(command: ValidateCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    result = validate_registry(registry, check_paths=command.check_paths)
    print(result.summary())
    return 0 if result.passed else 1
