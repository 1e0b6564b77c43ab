"""Command line for placefolder.

Usage:
    pf add <name> <path>
    pf rm <name>
    pf ls [--sort name|path] [--filter <substr>] [--favorites] [--recent]
    pf go <name>
    pf open <name> [--editor code]
    pf rename <old_name> <new_name>
    pf fav <name> [--unset]
    pf recent
    pf export <file>
    pf import <file>
    pf scan <dir>
    pf validate [--no-paths]
"""

import argparse
import logging
import sys

from placefolder.cli.commands import (
    AddCommand,
    Command,
    ExportCommand,
    FavoriteCommand,
    GoCommand,
    ImportCommand,
    ListCommand,
    OpenCommand,
    RecentCommand,
    RemoveCommand,
    RenameCommand,
    ScanCommand,
    ValidateCommand,
    command_from_args,
)
from placefolder.cli.projects import (
    cmd_add,
    cmd_favorite,
    cmd_go,
    cmd_list,
    cmd_open,
    cmd_recent,
    cmd_remove,
    cmd_rename,
)
from placefolder.cli.registry import cmd_export, cmd_import, cmd_validate
from placefolder.cli.scan import cmd_scan
from placefolder.errors import PlacefolderError
from placefolder.paths import default_editor, log_level
from placefolder.registry.query import SORT_KEYS

LOGO = r"""
     ____
    {o,o}      place_folder
    /)  )
     " "
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pf",
        description=LOGO + "\nProject Folder Manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to the registry file (default: $PF_CONFIG_PATH or ~/.pf.conf.json)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    add = sub.add_parser("add", help="Add a project")
    add.add_argument("name")
    add.add_argument("path", help="Project path ('.' for the current directory)")

    rm = sub.add_parser("rm", help="Remove a project")
    rm.add_argument("name")

    ls = sub.add_parser("ls", help="List projects")
    ls.add_argument(
        "--sort", default="name",
        help=f"Sort by field: {' or '.join(SORT_KEYS)}",
    )
    ls.add_argument("--filter", default=None, help="Filter by substring")
    ls.add_argument("--favorites", action="store_true", help="Show only favorites")
    ls.add_argument("--recent", action="store_true", help="Show only recent")

    go = sub.add_parser("go", help="Go to a project (prints its path)")
    go.add_argument("name")

    opn = sub.add_parser("open", help="Open a project in an editor")
    opn.add_argument("name")
    opn.add_argument(
        "--editor", default=default_editor(),
        help="Editor command (default: $PF_EDITOR or code)",
    )

    ren = sub.add_parser("rename", help="Rename a project")
    ren.add_argument("old_name")
    ren.add_argument("new_name")

    fav = sub.add_parser("fav", help="Mark or unmark a favorite")
    fav.add_argument("name")
    fav.add_argument("--unset", action="store_true", help="Remove the favorite mark")

    sub.add_parser("recent", help="Show recent projects")

    exp = sub.add_parser("export", help="Back up the registry to a file")
    exp.add_argument("file", help="Target file (.json, or .yaml/.yml)")

    imp = sub.add_parser("import", help="Merge a registry file into the current one")
    imp.add_argument("file")

    scan = sub.add_parser("scan", help="Add every git repository found in a directory")
    scan.add_argument("dir")

    val = sub.add_parser("validate", help="Check the registry for stale entries")
    val.add_argument(
        "--no-paths", action="store_true",
        help="Skip checking that project paths exist",
    )

    return parser


def run_command(command: Command, registry_file: str | None) -> int:
    match command:
        case AddCommand():
            return cmd_add(command, registry_file)
        case RemoveCommand():
            return cmd_remove(command, registry_file)
        case ListCommand():
            return cmd_list(command, registry_file)
        case GoCommand():
            return cmd_go(command, registry_file)
        case OpenCommand():
            return cmd_open(command, registry_file)
        case RenameCommand():
            return cmd_rename(command, registry_file)
        case FavoriteCommand():
            return cmd_favorite(command, registry_file)
        case RecentCommand():
            return cmd_recent(command, registry_file)
        case ExportCommand():
            return cmd_export(command, registry_file)
        case ImportCommand():
            return cmd_import(command, registry_file)
        case ScanCommand():
            return cmd_scan(command, registry_file)
        case ValidateCommand():
            return cmd_validate(command, registry_file)
        case _:
            raise TypeError(f"Unhandled command: {command!r}")


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        return run_command(command_from_args(args), args.config)
    except PlacefolderError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
