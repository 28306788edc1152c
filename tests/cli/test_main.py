"""Unit tests for the CLI main module."""

import os
from unittest.mock import patch

import pytest

from regfind.cli.main import main


@pytest.fixture(autouse=True)
def no_signal_setup():
    """Keep main() from replacing the test process's signal handlers."""
    with patch("regfind.cli.main.setup_signal_handling"):
        yield


def run_main(*argv):
    with patch("sys.argv", ["regfind", *argv]):
        main()


def test_prints_matching_paths(sample_tree, capfd):
    run_main("-r", str(sample_tree), r"\.x$")

    out, err = capfd.readouterr()
    assert out.splitlines() == [
        os.path.join(str(sample_tree), "src", "main.x"),
        os.path.join(str(sample_tree), "src", "util.x"),
    ]
    assert err == ""


def test_ignore_pattern(sample_tree, capfd):
    run_main("-r", str(sample_tree), "-i", "util", r"\.x$")

    out, _ = capfd.readouterr()
    assert out.splitlines() == [os.path.join(str(sample_tree), "src", "main.x")]


def test_full_path_flag(sample_tree, capfd):
    run_main("-r", str(sample_tree), "-p", r"docs.*\.md$")

    out, _ = capfd.readouterr()
    assert out.splitlines() == [os.path.join(str(sample_tree), "docs", "guide.md")]


def test_no_matches_is_success(sample_tree, capfd):
    run_main("-r", str(sample_tree), "no-such-name")

    out, err = capfd.readouterr()
    assert out == ""
    assert err == ""


def test_root_defaults_to_working_directory(sample_tree, capfd, monkeypatch):
    monkeypatch.chdir(sample_tree)
    run_main("README")

    out, _ = capfd.readouterr()
    assert out.splitlines() == [os.path.join(str(sample_tree), "README.md")]


def test_invalid_pattern(sample_tree, capfd):
    with pytest.raises(SystemExit) as info:
        run_main("-r", str(sample_tree), "[unclosed")

    assert info.value.code == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert "Error: Invalid regular expression for PATTERN '[unclosed'" in err
    assert "pydoc re" in err


def test_invalid_ignore_pattern(sample_tree, capfd):
    with pytest.raises(SystemExit) as info:
        run_main("-r", str(sample_tree), "-i", "(", "x")

    assert info.value.code == 1
    _, err = capfd.readouterr()
    assert "--ignore" in err


def test_missing_root(tmp_path, capfd):
    with pytest.raises(SystemExit) as info:
        run_main("-r", str(tmp_path / "missing"), "x")

    assert info.value.code == 1
    out, err = capfd.readouterr()
    assert out == ""
    assert "Error: Root path does not exist" in err


def test_usage_error_exits_with_two(capfd):
    with pytest.raises(SystemExit) as info:
        run_main()

    assert info.value.code == 2


def test_summary_on_stderr(sample_tree, capfd):
    run_main("-r", str(sample_tree), "-s", "stderr", r"\.x$")

    out, err = capfd.readouterr()
    assert len(out.splitlines()) == 2
    assert "Matched: 2" in err
    assert "Pruned: 5" in err


def test_summary_on_stdout(sample_tree, capfd):
    run_main("-r", str(sample_tree), "--summary", "stdout", r"\.x$")

    out, err = capfd.readouterr()
    lines = out.splitlines()
    assert lines[2] == "Directories: 4"
    assert "Matched: 2" in lines
    assert err == ""


def test_traversal_warnings_go_to_stderr(tmp_path, tree_factory, capfd):
    tree_factory(tmp_path, ["locked/a.x", "open/b.x"])
    locked = os.path.join(str(tmp_path), "locked")
    real_scandir = os.scandir

    def failing_scandir(path):
        if path == locked:
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    with patch("regfind.traversal.walker.os.scandir", side_effect=failing_scandir):
        run_main("-r", str(tmp_path), r"\.x$")

    out, err = capfd.readouterr()
    assert out.splitlines() == [os.path.join(str(tmp_path), "open", "b.x")]
    assert err.startswith(f"Warning: {locked}: ")
    assert "Permission denied" in err


def test_broken_pipe_is_silent(sample_tree, capfd):
    with patch("regfind.cli.main.SafeWriter") as mock_writer:
        mock_writer.return_value.__enter__.return_value.write.side_effect = BrokenPipeError()
        run_main("-r", str(sample_tree), r"\.x$")

    _, err = capfd.readouterr()
    assert err == ""


def test_signal_sets_exit_code(sample_tree):
    with patch("regfind.cli.main.signal_handler") as mock_handler:
        mock_handler.interrupted.return_value = True
        mock_handler.exit_code.return_value = 130
        with pytest.raises(SystemExit) as info:
            run_main("-r", str(sample_tree), r"\.x$")

    assert info.value.code == 130


def test_unexpected_error(sample_tree, capfd):
    with patch("regfind.cli.main.Finder") as mock_finder:
        mock_finder.return_value.run.side_effect = RuntimeError("walker exploded")
        with pytest.raises(SystemExit) as info:
            run_main("-r", str(sample_tree), "x")

    assert info.value.code == 1
    _, err = capfd.readouterr()
    assert "Error: walker exploded" in err
