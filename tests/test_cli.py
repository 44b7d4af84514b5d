"""Tests for the blackboard command line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from blackboard_py.cli import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BLACKBOARD_* settings from the outer environment out of the tests."""
    for name in (
        "BLACKBOARD_WIDTH",
        "BLACKBOARD_HEIGHT",
        "BLACKBOARD_SHAPES_FILE",
        "BLACKBOARD_DEBUG",
        "BLACKBOARD_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDraw:
    """Tests for ``blackboard draw``."""

    def test_draw_file(self, runner: CliRunner, shapes_file: Path) -> None:
        """Test drawing a record file prints the full board."""
        result = runner.invoke(cli, ["draw", str(shapes_file)])
        assert result.exit_code == 0, result.output
        lines = result.stdout.rstrip("\n").split("\n")
        assert len(lines) == 25
        assert all(len(line) == 80 for line in lines)
        assert lines[12].startswith("*" * 14 + " ")

    def test_draw_custom_size(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --width and --height change the board size."""
        path = tmp_path / "line.txt"
        path.write_text("add Line 0 1 20\n", encoding="utf-8")
        result = runner.invoke(cli, ["--width", "6", "--height", "3", "draw", str(path)])
        assert result.exit_code == 0, result.output
        assert result.stdout == "      \n******\n      \n"

    def test_draw_size_from_env(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the board size can come from the environment."""
        path = tmp_path / "dot.txt"
        path.write_text("add Circle 1 1 1\n", encoding="utf-8")
        result = runner.invoke(
            cli,
            ["draw", str(path)],
            env={"BLACKBOARD_WIDTH": "3", "BLACKBOARD_HEIGHT": "3"},
        )
        assert result.exit_code == 0, result.output
        assert result.stdout == " * \n***\n * \n"

    def test_draw_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a missing file is reported and the board is still drawn."""
        result = runner.invoke(cli, ["draw", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "not found" in result.stderr
        assert result.stdout == "\n".join([" " * 80] * 25) + "\n"

    def test_draw_requires_a_file(self, runner: CliRunner) -> None:
        """Test draw without files is a usage error."""
        result = runner.invoke(cli, ["draw"])
        assert result.exit_code == 2

    def test_invalid_size(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a non-positive board size is a usage error."""
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        result = runner.invoke(cli, ["--width", "0", "draw", str(path)])
        assert result.exit_code == 2
        assert "must be positive" in result.output


class TestList:
    """Tests for ``blackboard list``."""

    def test_list_file(self, runner: CliRunner, shapes_file: Path) -> None:
        """Test the shape table includes every loaded shape."""
        result = runner.invoke(cli, ["list", str(shapes_file)])
        assert result.exit_code == 0, result.output
        for kind in ("Triangle", "Circle", "Rectangle", "Line"):
            assert kind in result.stdout
        assert "Hexagon" not in result.stdout
        assert "Shapes (4)" in result.stdout

    def test_list_empty(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test listing a file with no valid records prints None."""
        path = tmp_path / "bad.txt"
        path.write_text("add Hexagon abc\n", encoding="utf-8")
        result = runner.invoke(cli, ["list", str(path)])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "None"


class TestShell:
    """Tests for the interactive ``blackboard shell`` menu."""

    def _run(self, runner: CliRunner, *choices: str, args: tuple[str, ...] = ()) -> str:
        result = runner.invoke(cli, ["shell", *args], input="\n".join(choices) + "\n")
        assert result.exit_code == 0, result.output
        return result.stdout

    def test_exit(self, runner: CliRunner) -> None:
        """Test choosing 6 leaves the menu."""
        output = self._run(runner, "6")
        assert "1. Draw blackboard" in output
        assert "Exited" in output

    def test_list_empty(self, runner: CliRunner) -> None:
        """Test listing with no shapes prints None."""
        output = self._run(runner, "2", "6")
        assert "\nNone\n" in output

    def test_add_and_draw(self, runner: CliRunner) -> None:
        """Test adding a line then drawing shows it on the first row."""
        output = self._run(runner, "4", "add Line 0 0 5", "1", "6")
        assert "*****" + " " * 75 in output

    def test_add_invalid_kind(self, runner: CliRunner) -> None:
        """Test an unknown kind prints the invalid type message and adds nothing."""
        output = self._run(runner, "4", "add Hexagon 1 2 3", "2", "6")
        assert "Invalid shape type." in output
        assert "\nNone\n" in output

    def test_add_malformed(self, runner: CliRunner) -> None:
        """Test a known kind with bad numbers is rejected."""
        output = self._run(runner, "4", "add Circle 1 two 3", "6")
        assert "Invalid shape record" in output

    def test_undo(self, runner: CliRunner) -> None:
        """Test undo removes the last added shape."""
        output = self._run(runner, "4", "add Line 0 0 5", "4", "add Circle 10 5 5", "5", "2", "6")
        assert "\nLine\n" in output
        assert "\nCircle\n" not in output

    def test_redo(self, runner: CliRunner) -> None:
        """Test redo restores an undone shape."""
        output = self._run(runner, "4", "add Circle 10 5 5", "5", "7", "2", "6")
        assert "\nCircle\n" in output

    def test_undo_and_redo_with_nothing_to_do(self, runner: CliRunner) -> None:
        """Test undo and redo report when there is nothing to change."""
        output = self._run(runner, "5", "7", "2", "6")
        assert "Nothing to undo" in output
        assert "Nothing to redo" in output
        assert "\nNone\n" in output

    def test_invalid_choice(self, runner: CliRunner) -> None:
        """Test an unknown menu choice is reported."""
        output = self._run(runner, "9", "6")
        assert "Invalid input" in output

    def test_load_from_file(self, runner: CliRunner, shapes_file: Path) -> None:
        """Test menu option 3 loads the configured file."""
        output = self._run(runner, "3", "2", "6", args=("--file", str(shapes_file)))
        assert "\nTriangle\nCircle\nRectangle\nLine\n" in output

    def test_load_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a missing file is reported and the session continues."""
        result = runner.invoke(
            cli,
            ["shell", "--file", str(tmp_path / "missing.txt")],
            input="4\nadd Line 0 0 5\n3\n2\n6\n",
        )
        assert result.exit_code == 0, result.output
        assert "not found" in result.stderr
        assert "\nLine\n" in result.stdout
