"""Scan CLI command."""

from placefolder.cli.commands import ScanCommand
from placefolder.registry.loader import load_registry, save_registry
from placefolder.scan import scan_into


def cmd_scan(command: ScanCommand, registry_file: str | None) -> int:
    registry = load_registry(registry_file)
    result = scan_into(registry, command.directory)

    print(result.summary())
    if result.added:
        save_registry(registry, registry_file)
    return 0
