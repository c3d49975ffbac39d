"""Tests for the robolocopy command line."""

from robolocopy.cli import main
from robolocopy.cli import _helpers


class TestCli:
    def test_copy_directory(self, runner, tmp_path, project, list_tree):
        dest = tmp_path / "out"
        result = runner.invoke(main, [str(project), str(dest)])
        assert result.exit_code == 0, result.output
        assert "Copy completed successfully" in result.output
        assert list_tree(dest) == {"file1.txt", "src/code.ts"}

    def test_exclude_comma_and_repeat(self, runner, tmp_path, make_tree, list_tree):
        src = make_tree(tmp_path / "src", {"a.txt": "", "b.txt": "", "c.txt": "", "d.txt": ""})
        dest = tmp_path / "out"
        result = runner.invoke(main, [str(src), str(dest), "-x", "a.txt, b.txt", "--exclude", "c.txt"])
        assert result.exit_code == 0, result.output
        assert list_tree(dest) == {"d.txt"}

    def test_ignore_defaults(self, runner, tmp_path, make_tree, list_tree):
        src = make_tree(tmp_path / "src", {"dist/bundle.js": "", "file.log": ""})
        dest = tmp_path / "out"
        result = runner.invoke(main, [str(src), str(dest), "-X"])
        assert result.exit_code == 0, result.output
        assert list_tree(dest) == {"dist/bundle.js", "file.log"}

    def test_exclude_from(self, runner, tmp_path, make_tree, list_tree):
        src = make_tree(tmp_path / "src", {"keep.txt": "", "skip.tmp": ""})
        ex = tmp_path / "excludes"
        ex.write_text("# temp files\n*.tmp\n")
        dest = tmp_path / "out"
        result = runner.invoke(main, [str(src), str(dest), "--exclude-from", str(ex)])
        assert result.exit_code == 0, result.output
        assert list_tree(dest) == {"keep.txt"}

    def test_missing_source(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope"), str(tmp_path / "out")])
        assert result.exit_code == 1
        assert "Source path does not exist" in result.output

    def test_uncreatable_destination(self, runner, tmp_path, project):
        blocker = tmp_path / "blocker"
        blocker.write_text("x")
        result = runner.invoke(main, [str(project), str(blocker / "out")])
        assert result.exit_code == 1
        assert "Cannot create destination" in result.output

    def test_verbose(self, runner, tmp_path, project):
        result = runner.invoke(main, [str(project), str(tmp_path / "out"), "-V"])
        assert result.exit_code == 0, result.output
        assert "Copying from:" in result.output
        assert "Excluding patterns:" in result.output
        assert "Successfully copied 3 out of 3 entries" in result.output

    def test_quiet_by_default(self, runner, tmp_path, project):
        result = runner.invoke(main, [str(project), str(tmp_path / "out")])
        assert "Copying from:" not in result.output

    def test_portable_skips_native(self, runner, tmp_path, project, monkeypatch, list_tree):
        import robolocopy.cli._cp as cp_mod
        monkeypatch.setattr(cp_mod, "_native_available", lambda *a: True)

        def boom(*args, **kwargs):
            raise AssertionError("native tool must not run with --portable")

        import subprocess
        monkeypatch.setattr(subprocess, "run", boom)
        dest = tmp_path / "out"
        result = runner.invoke(main, [str(project), str(dest), "--portable"])
        assert result.exit_code == 0, result.output
        assert list_tree(dest) == {"file1.txt", "src/code.ts"}

    def test_help(self, runner):
        result = runner.invoke(main, ["-h"])
        assert result.exit_code == 0
        assert "--exclude" in result.output
        assert "--ignore-defaults" in result.output

    def test_native_available_off_windows(self, monkeypatch):
        monkeypatch.setattr(_helpers.sys, "platform", "linux")
        assert _helpers._native_available() is False


class TestStatusColours:
    def test_colour_follows_kind_not_wording(self):
        from robolocopy.copy import StatusLine
        assert _helpers._style_for(StatusLine("Failed? no, all good", "success")) == "green"
        assert _helpers._style_for(StatusLine("anything", "error")) == "red"
        assert _helpers._style_for(StatusLine("anything", "notice")) == "yellow"
        assert _helpers._style_for("plain text") == "blue"

    def test_unknown_kind_is_blue(self):
        from robolocopy.copy import StatusLine
        assert _helpers._style_for(StatusLine("x", "mystery")) == "blue"


class TestExcludeFrom:
    def test_combined_with_exclude_and_reported(self, runner, tmp_path, make_tree, list_tree):
        src = make_tree(tmp_path / "src", {"a.txt": "", "b.tmp": "", "c.bak": ""})
        ex = tmp_path / "excludes"
        ex.write_text("*.tmp\n")
        dest = tmp_path / "out"
        result = runner.invoke(main, [str(src), str(dest), "-x", "*.bak",
                                      "--exclude-from", str(ex), "-V"])
        assert result.exit_code == 0, result.output
        assert list_tree(dest) == {"a.txt"}
        assert "User exclusions: 2" in result.output

    def test_missing_exclude_file(self, runner, tmp_path, project):
        result = runner.invoke(main, [str(project), str(tmp_path / "out"),
                                      "--exclude-from", str(tmp_path / "nope")])
        assert result.exit_code != 0


class TestEntryPoint:
    def test_missing_click_prints_hint(self, monkeypatch, capsys):
        import sys

        import pytest

        from robolocopy import _cli_entry

        for name in list(sys.modules):
            if name == "robolocopy.cli" or name.startswith("robolocopy.cli."):
                monkeypatch.delitem(sys.modules, name)
        monkeypatch.setitem(sys.modules, "click", None)
        with pytest.raises(SystemExit) as info:
            _cli_entry.main()
        assert info.value.code == 1
        assert "pip install 'robolocopy[cli]'" in capsys.readouterr().err

    def test_runs_cli(self, monkeypatch, tmp_path, project, list_tree):
        import pytest

        from robolocopy import _cli_entry

        dest = tmp_path / "out"
        monkeypatch.setattr("sys.argv", ["robolocopy", str(project), str(dest)])
        with pytest.raises(SystemExit) as info:
            _cli_entry.main()
        assert info.value.code == 0
        assert list_tree(dest) == {"file1.txt", "src/code.ts"}
