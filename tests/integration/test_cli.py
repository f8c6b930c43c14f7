"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pillsplitter import __version__
from pillsplitter.cli import app

runner = CliRunner()


@pytest.fixture
def script_path(tmp_path: Path) -> Path:
    """Write a script that draws a pill and then taps its center."""
    path = tmp_path / "session.json"
    path.write_text(
        json.dumps(
            {
                "events": [
                    {"type": "down", "x": 0, "y": 0, "target": "empty"},
                    {"type": "move", "x": 100, "y": 100},
                    {"type": "up", "x": 100, "y": 100},
                    {"type": "click", "x": 100, "y": 100},
                    {"type": "move", "x": 50, "y": 50},
                    {"type": "down", "x": 50, "y": 50, "target": "pill", "pill_id": 1},
                    {"type": "up", "x": 50, "y": 50},
                    {"type": "click", "x": 50, "y": 50},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


class TestSplitCommand:
    """Tests for the split command."""

    def test_quad_json(self) -> None:
        """Test previewing a center click as JSON."""
        result = runner.invoke(app, ["split", "0", "0", "100", "100", "--at", "50", "50", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["outcome"] == "quad"
        assert len(data["pieces"]) == 4

    def test_shift_json(self) -> None:
        """Test previewing a click on a pill too small to split."""
        result = runner.invoke(app, ["split", "0", "0", "30", "30", "--at", "15", "15", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["outcome"] == "shifted"
        assert data["patch"] == {"x": 17}

    def test_table_output(self) -> None:
        """Test the human-readable preview."""
        result = runner.invoke(app, ["split", "0", "0", "100", "100", "--at", "10", "50"])
        assert result.exit_code == 0
        assert "horizontal" in result.stdout

    def test_invalid_size(self) -> None:
        """Test a zero-width pill is reported as an error."""
        result = runner.invoke(app, ["split", "0", "0", "0", "100", "--at", "10", "50"])
        assert result.exit_code == 1
        assert "Invalid pill" in result.stdout


class TestReplayCommand:
    """Tests for the replay command."""

    def test_replay_json(self, script_path: Path) -> None:
        """Test replaying a draw-then-tap session."""
        result = runner.invoke(app, ["replay", str(script_path), "--json", "--seed", "3"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["mode"] == "idle"
        assert [p["id"] for p in data["pills"]] == [2, 3, 4, 5]
        assert all(p["width"] == 50 and p["height"] == 50 for p in data["pills"])

    def test_replay_table(self, script_path: Path) -> None:
        """Test the human-readable replay summary."""
        result = runner.invoke(app, ["replay", str(script_path), "--verbose"])
        assert result.exit_code == 0
        assert "4 pills" in result.stdout
        assert "1 split" in result.stdout

    def test_missing_script(self, tmp_path: Path) -> None:
        """Test a missing script file exits with an error."""
        result = runner.invoke(app, ["replay", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Script not found" in result.stdout

    def test_malformed_script(self, tmp_path: Path) -> None:
        """Test an unreadable script exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text("[1, 2", encoding="utf-8")
        result = runner.invoke(app, ["replay", str(path), "--quiet"])
        assert result.exit_code == 1
        assert "Could not load script" in result.stdout

    def test_wrongly_shaped_script(self, tmp_path: Path) -> None:
        """Test a script whose events field is not a list exits cleanly."""
        path = tmp_path / "shape.json"
        path.write_text(json.dumps({"events": 5}), encoding="utf-8")
        result = runner.invoke(app, ["replay", str(path), "--quiet"])
        assert result.exit_code == 1
        assert "Could not load script" in result.stdout

    def test_verbose_and_quiet(self, script_path: Path) -> None:
        """Test conflicting output flags are refused."""
        result = runner.invoke(app, ["replay", str(script_path), "-v", "-q"])
        assert result.exit_code == 1


def test_version() -> None:
    """Test --version prints the version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
