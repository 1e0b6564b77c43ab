"""Tests for the pf command line.

Covers:
- Parser construction and --help for every command
- Mapping of parsed arguments to typed commands
- Each command against a temporary registry file
- Error reporting and exit codes
"""

import argparse
import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from placefolder.cli import build_parser, main, run_command
from placefolder.cli.commands import (
    AddCommand,
    FavoriteCommand,
    ListCommand,
    ScanCommand,
    ValidateCommand,
    command_from_args,
)

FIXTURES = Path(__file__).parent / "fixtures"


def run_pf(registry_file, *argv):
    with patch("sys.argv", ["pf", "--config", str(registry_file), *argv]):
        return main()


def read_doc(registry_file):
    return json.loads(Path(registry_file).read_text())


# ── Parser construction ──────────────────────────────────────────


class TestParserConstruction:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        with patch("sys.argv", ["pf"]):
            rc = main()
        assert rc == 0
        out = capsys.readouterr().out
        assert "place_folder" in out
        assert "pf" in out

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["add", "--help"],
        ["rm", "--help"],
        ["ls", "--help"],
        ["go", "--help"],
        ["open", "--help"],
        ["rename", "--help"],
        ["fav", "--help"],
        ["recent", "--help"],
        ["export", "--help"],
        ["import", "--help"],
        ["scan", "--help"],
        ["validate", "--help"],
    ])
    def test_help_exits_zero(self, cmd):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(cmd)
        assert exc_info.value.code == 0

    def test_missing_argument_exits_nonzero(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["add", "only-name"])
        assert exc_info.value.code != 0


class TestCommandFromArgs:
    def test_add(self):
        args = build_parser().parse_args(["add", "web", "/srv/web"])
        assert command_from_args(args) == AddCommand("web", "/srv/web")

    def test_ls_defaults(self):
        args = build_parser().parse_args(["ls"])
        assert command_from_args(args) == ListCommand()

    def test_ls_flags(self):
        args = build_parser().parse_args(["ls", "--sort", "path", "--filter", "we", "--favorites"])
        assert command_from_args(args) == ListCommand(
            sort="path", filter="we", favorites=True, recent=False,
        )

    def test_fav_unset(self):
        args = build_parser().parse_args(["fav", "web", "--unset"])
        assert command_from_args(args) == FavoriteCommand("web", unset=True)

    def test_scan_and_validate(self):
        parser = build_parser()
        assert command_from_args(parser.parse_args(["scan", "/code"])) == ScanCommand("/code")
        assert command_from_args(parser.parse_args(["validate", "--no-paths"])) == ValidateCommand(
            check_paths=False,
        )

    def test_open_default_editor_from_env(self, monkeypatch):
        monkeypatch.setenv("PF_EDITOR", "nvim")
        args = build_parser().parse_args(["open", "web"])
        assert command_from_args(args).editor == "nvim"

    def test_unknown_command_rejected(self):
        with pytest.raises(ValueError):
            command_from_args(argparse.Namespace(command="teleport"))

    def test_run_command_rejects_foreign_object(self, registry_file):
        with pytest.raises(TypeError):
            run_command(object(), str(registry_file))


# ── Project commands ─────────────────────────────────────────────


class TestProjectCommands:
    def test_add_creates_registry(self, tmp_path, capsys):
        registry_file = tmp_path / "new" / "reg.json"
        rc = run_pf(registry_file, "add", "here", str(tmp_path))
        assert rc == 0
        assert read_doc(registry_file)["projects"] == {"here": str(tmp_path)}
        out = capsys.readouterr().out
        assert "Added project: here" in out
        assert "Warning" not in out

    def test_add_dot_uses_cwd(self, registry_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert run_pf(registry_file, "add", "cwd", ".") == 0
        assert read_doc(registry_file)["projects"]["cwd"] == str(tmp_path)

    def test_add_missing_path_warns(self, registry_file, capsys):
        assert run_pf(registry_file, "add", "ghost", "/no/such/dir") == 0
        assert "Warning: Path '/no/such/dir' does not exist!" in capsys.readouterr().out
        assert read_doc(registry_file)["projects"]["ghost"] == "/no/such/dir"

    def test_add_empty_name(self, registry_file, capsys):
        before = read_doc(registry_file)
        assert run_pf(registry_file, "add", "", str(registry_file.parent)) == 1
        assert "ERROR: Project name must not be empty" in capsys.readouterr().out
        assert read_doc(registry_file) == before

    def test_add_uses_default_location(self, isolated_config, tmp_path):
        with patch("sys.argv", ["pf", "add", "here", str(tmp_path)]):
            assert main() == 0
        assert read_doc(isolated_config)["projects"]["here"] == str(tmp_path)

    def test_rm_cascades_favorite(self, registry_file, capsys):
        assert run_pf(registry_file, "rm", "web") == 0
        doc = read_doc(registry_file)
        assert "web" not in doc["projects"]
        assert "web" not in doc["favorites"]
        assert "web" in doc["recent"]
        assert "Removed project: web" in capsys.readouterr().out

    def test_rm_missing_is_ok(self, registry_file, capsys):
        assert run_pf(registry_file, "rm", "nope") == 0
        assert "No project named 'nope'" in capsys.readouterr().out

    def test_ls_all(self, registry_file, capsys):
        assert run_pf(registry_file, "ls") == 0
        out = capsys.readouterr().out
        lines = [line for line in out.splitlines() if line.strip()]
        assert "PROJECT" in lines[0]
        assert lines[1].startswith("*") and "Tools" in lines[1]
        assert "api" in lines[2] and not lines[2].startswith("*")
        assert len(lines) == 5

    def test_ls_filter(self, registry_file, capsys):
        assert run_pf(registry_file, "ls", "--filter", "DOC") == 0
        out = capsys.readouterr().out
        assert "docs" in out
        assert "/srv/web" not in out

    def test_ls_unknown_sort_is_lenient(self, registry_file, capsys):
        assert run_pf(registry_file, "ls", "--sort", "size") == 0
        out = capsys.readouterr().out
        assert out.index("web") < out.index("api")

    def test_ls_no_match(self, registry_file, capsys):
        assert run_pf(registry_file, "ls", "--filter", "zzz") == 0
        assert "No projects match" in capsys.readouterr().out

    def test_go(self, registry_file, capsys):
        assert run_pf(registry_file, "go", "docs") == 0
        assert capsys.readouterr().out.strip() == "/home/user/docs"
        doc = read_doc(registry_file)
        assert doc["goto_path"] == "/home/user/docs"
        assert doc["recent"][0] == "docs"

    def test_go_missing(self, registry_file, capsys):
        before = read_doc(registry_file)
        assert run_pf(registry_file, "go", "nope") == 1
        assert "ERROR: Project 'nope' not found" in capsys.readouterr().out
        assert read_doc(registry_file) == before

    def test_rename(self, registry_file, capsys):
        assert run_pf(registry_file, "rename", "web", "site") == 0
        doc = read_doc(registry_file)
        assert doc["projects"]["site"] == "/srv/web"
        assert "web" not in doc["projects"]
        assert "web" not in doc["favorites"]
        assert "site" not in doc["favorites"]
        assert "Renamed 'web' -> 'site'" in capsys.readouterr().out

    def test_rename_missing(self, registry_file, capsys):
        assert run_pf(registry_file, "rename", "nope", "x") == 1
        assert "not found" in capsys.readouterr().out

    def test_rename_to_empty_name(self, registry_file, capsys):
        before = read_doc(registry_file)
        assert run_pf(registry_file, "rename", "web", "") == 1
        assert "ERROR: Project name must not be empty" in capsys.readouterr().out
        assert read_doc(registry_file) == before

    def test_fav_set_and_unset(self, registry_file, capsys):
        assert run_pf(registry_file, "fav", "docs") == 0
        assert "docs" in read_doc(registry_file)["favorites"]
        assert run_pf(registry_file, "fav", "docs", "--unset") == 0
        assert "docs" not in read_doc(registry_file)["favorites"]
        out = capsys.readouterr().out
        assert "Set as favorite: docs" in out
        assert "Unset favorite: docs" in out

    def test_fav_missing(self, registry_file, capsys):
        assert run_pf(registry_file, "fav", "nope") == 1
        assert "not found" in capsys.readouterr().out

    def test_fav_unset_missing_is_ok(self, registry_file):
        assert run_pf(registry_file, "fav", "nope", "--unset") == 0

    def test_recent(self, registry_file, capsys):
        assert run_pf(registry_file, "recent") == 0
        out = capsys.readouterr().out
        assert out.index("api") < out.index("web")
        assert "ghost" not in out

    def test_recent_empty(self, tmp_path, capsys):
        assert run_pf(tmp_path / "reg.json", "recent") == 0
        assert "No recent projects." in capsys.readouterr().out


class TestOpenCommand:
    def test_open_success(self, registry_file, capsys):
        done = subprocess.CompletedProcess(["vim", "/srv/api"], 0)
        with patch("placefolder.cli.projects.open_in_editor", return_value=done) as fake:
            assert run_pf(registry_file, "open", "api", "--editor", "vim") == 0
        fake.assert_called_once_with("vim", "/srv/api")
        assert "Opened 'api' in editor 'vim'" in capsys.readouterr().out
        assert read_doc(registry_file)["recent"][0] == "api"

    def test_open_editor_failure_status(self, registry_file, capsys):
        failed = subprocess.CompletedProcess(["vim", "/srv/web"], 3)
        with patch("placefolder.cli.projects.open_in_editor", return_value=failed):
            assert run_pf(registry_file, "open", "web", "--editor", "vim") == 1
        assert "exited with status 3" in capsys.readouterr().out

    def test_open_editor_not_installed(self, registry_file, capsys):
        rc = run_pf(registry_file, "open", "web", "--editor", "pf-no-such-editor-binary")
        assert rc == 1
        assert "Is it installed?" in capsys.readouterr().out
        assert read_doc(registry_file)["recent"][0] == "web"

    def test_open_missing_project(self, registry_file, capsys):
        assert run_pf(registry_file, "open", "nope") == 1
        assert "not found" in capsys.readouterr().out


# ── Registry commands ────────────────────────────────────────────


class TestRegistryCommands:
    def test_export_then_import_elsewhere(self, registry_file, tmp_path, capsys):
        backup = tmp_path / "backup.yaml"
        assert run_pf(registry_file, "export", str(backup)) == 0
        fresh = tmp_path / "fresh.json"
        assert run_pf(fresh, "import", str(backup)) == 0
        doc = read_doc(fresh)
        assert doc["projects"] == read_doc(registry_file)["projects"]
        assert doc["goto_path"] is None
        out = capsys.readouterr().out
        assert "Config exported to" in out
        assert "Config imported from" in out

    def test_import_merges(self, registry_file, capsys):
        assert run_pf(registry_file, "import", str(FIXTURES / "registry-import.yaml")) == 0
        doc = read_doc(registry_file)
        assert doc["projects"]["web"] == "/mnt/web"
        assert "orphan" in doc["favorites"]
        assert doc["goto_path"] == "/srv/api"
        assert "1 added, 1 overwritten" in capsys.readouterr().out

    def test_import_corrupt_file_leaves_registry(self, registry_file, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{oops")
        before = read_doc(registry_file)
        assert run_pf(registry_file, "import", str(bad)) == 1
        assert "ERROR" in capsys.readouterr().out
        assert read_doc(registry_file) == before

    def test_import_missing_file(self, registry_file, tmp_path, capsys):
        assert run_pf(registry_file, "import", str(tmp_path / "absent.json")) == 1
        assert "ERROR: Failed to read" in capsys.readouterr().out

    def test_corrupt_registry_reported(self, tmp_path, capsys):
        registry_file = tmp_path / "reg.json"
        registry_file.write_text("[1, 2]")
        assert run_pf(registry_file, "ls") == 1
        assert "ERROR: Invalid registry" in capsys.readouterr().out
        assert registry_file.read_text() == "[1, 2]"

    def test_validate_passes(self, registry_file, capsys):
        assert run_pf(registry_file, "validate", "--no-paths") == 0
        out = capsys.readouterr().out
        assert "4 projects checked" in out
        assert "ghost" in out

    def test_validate_fails_on_errors(self, tmp_path, capsys):
        registry_file = tmp_path / "reg.json"
        registry_file.write_text(json.dumps({"projects": {"": "/x"}}))
        assert run_pf(registry_file, "validate", "--no-paths") == 1
        assert "ERRORS" in capsys.readouterr().out

    def test_validate_reports_hand_edited_lists(self, tmp_path, capsys):
        registry_file = tmp_path / "reg.json"
        names = [f"p{i}" for i in range(12)]
        doc = {
            "projects": {n: f"/srv/{n}" for n in names},
            "favorites": ["p0", "p0"],
            "recent": names,
        }
        registry_file.write_text(json.dumps(doc))
        assert run_pf(registry_file, "validate", "--no-paths") == 1
        out = capsys.readouterr().out
        assert "ERRORS (2)" in out
        assert "p0" in out
        assert read_doc(registry_file)["favorites"] == ["p0", "p0"]


class TestScanCommand:
    def test_scan_adds_repos(self, registry_file, tmp_path, capsys):
        code = tmp_path / "code"
        (code / "engine" / ".git").mkdir(parents=True)
        (code / "web" / ".git").mkdir(parents=True)
        assert run_pf(registry_file, "scan", str(code)) == 0
        doc = read_doc(registry_file)
        assert doc["projects"]["engine"] == str((code / "engine").resolve())
        assert doc["projects"]["web"] == "/srv/web"
        out = capsys.readouterr().out
        assert "1 added, 1 skipped" in out

    def test_scan_not_a_directory(self, registry_file, tmp_path, capsys):
        assert run_pf(registry_file, "scan", str(tmp_path / "missing")) == 1
        assert "ERROR: Not a directory" in capsys.readouterr().out

    def test_scan_same_name_twice(self, registry_file, tmp_path, capsys):
        code = tmp_path / "code"
        (code / "one" / "tool" / ".git").mkdir(parents=True)
        (code / "two" / "tool" / ".git").mkdir(parents=True)
        assert run_pf(registry_file, "scan", str(code)) == 0
        doc = read_doc(registry_file)
        assert doc["projects"]["tool"] == str((code / "one" / "tool").resolve())
        out = capsys.readouterr().out
        assert "(name taken by another repository in this scan)" in out
        assert "1 added, 1 skipped" in out
