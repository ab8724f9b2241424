"""Tests for the churnmap CLI."""

import json

from typer.testing import CliRunner

from churnmap import __version__
from churnmap.cli import app

runner = CliRunner()


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestVisualizeCommand:
    def test_json_output(self, churned_file):
        path, _ = churned_file
        result = runner.invoke(app, ["visualize", str(path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [line["commit_count"] for line in data["lines"]] == [1, 5, 0]
        assert [line["color"] for line in data["lines"]] == ["#33cc00", "#ff0000", "#00ff00"]

    def test_range_argument(self, churned_file):
        path, _ = churned_file
        result = runner.invoke(app, ["visualize", str(path), "2-3", "--json"])
        data = json.loads(result.stdout)
        assert [line["line_number"] for line in data["lines"]] == [2, 3]

    def test_rich_output(self, churned_file):
        path, _ = churned_file
        result = runner.invoke(app, ["visualize", str(path)])

        assert result.exit_code == 0
        assert "b = 4" in result.stdout
        assert "⟶ 5x" in result.stdout
        assert "⟶ 0x" in result.stdout

    def test_prompt_for_range(self, churned_file):
        path, _ = churned_file
        result = runner.invoke(app, ["visualize", str(path), "--prompt", "--json"], input="2\n")

        assert result.exit_code == 0
        payload = result.stdout[result.stdout.index("{"):]
        assert [line["line_number"] for line in json.loads(payload)["lines"]] == [2]

    def test_untracked_file_is_not_an_error(self, tmp_path):
        path = tmp_path / "loose.py"
        path.write_text("x = 1\n")
        result = runner.invoke(app, ["visualize", str(path)])

        assert result.exit_code == 0
        assert "No churn to show" in result.stdout

    def test_missing_config_file_fails(self, tmp_path):
        path = tmp_path / "loose.py"
        path.write_text("x = 1\n")
        result = runner.invoke(
            app, ["visualize", str(path), "--config", str(tmp_path / "nope.toml")]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.stdout


class TestClearCommand:
    def test_prints_plain_file(self, tmp_path):
        path = tmp_path / "f.py"
        path.write_text("alpha\nbeta\n")
        result = runner.invoke(app, ["clear", str(path)])

        assert result.exit_code == 0
        assert "alpha" in result.stdout
        assert "⟶" not in result.stdout
        assert "Removed 0 churn decorations" in result.stdout

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["clear", str(tmp_path / "gone.py")])
        assert result.exit_code == 0
        assert "Nothing to clear" in result.stdout
