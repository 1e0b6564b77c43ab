"""Typed commands built from parsed arguments.

Every CLI command is one frozen dataclass; ``Command`` is the closed union
of them that the dispatcher matches on.
"""

import argparse
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AddCommand:
    name: str
    path: str


@dataclass(frozen=True)
class RemoveCommand:
    name: str


@dataclass(frozen=True)
class ListCommand:
    sort: str = "name"
    filter: str | None = None
    favorites: bool = False
    recent: bool = False


@dataclass(frozen=True)
class GoCommand:
    name: str


@dataclass(frozen=True)
class OpenCommand:
    name: str
    editor: str


@dataclass(frozen=True)
class RenameCommand:
    old_name: str
    new_name: str


@dataclass(frozen=True)
class FavoriteCommand:
    name: str
    unset: bool = False


@dataclass(frozen=True)
class RecentCommand:
    pass


@dataclass(frozen=True)
class ExportCommand:
    file: str


@dataclass(frozen=True)
class ImportCommand:
    file: str


@dataclass(frozen=True)
class ScanCommand:
    directory: str


@dataclass(frozen=True)
class ValidateCommand:
    check_paths: bool = True


Command = Union[
    AddCommand,
    RemoveCommand,
    ListCommand,
    GoCommand,
    OpenCommand,
    RenameCommand,
    FavoriteCommand,
    RecentCommand,
    ExportCommand,
    ImportCommand,
    ScanCommand,
    ValidateCommand,
]


def command_from_args(args: argparse.Namespace) -> Command:
    """Map a parsed argparse namespace to its command.

    Raises:
        ValueError: If ``args.command`` names no known command.
    """
    match args.command:
        case "add":
            return AddCommand(args.name, args.path)
        case "rm":
            return RemoveCommand(args.name)
        case "ls":
            return ListCommand(
                sort=args.sort,
                filter=args.filter,
                favorites=args.favorites,
                recent=args.recent,
            )
        case "go":
            return GoCommand(args.name)
        case "open":
            return OpenCommand(args.name, args.editor)
        case "rename":
            return RenameCommand(args.old_name, args.new_name)
        case "fav":
            return FavoriteCommand(args.name, unset=args.unset)
        case "recent":
            return RecentCommand()
        case "export":
            return ExportCommand(args.file)
        case "import":
            return ImportCommand(args.file)
        case "scan":
            return ScanCommand(args.dir)
        case "validate":
            return ValidateCommand(check_paths=not args.no_paths)
    raise ValueError(f"Unknown command: {args.command}")
