"""Tests for the command-line interface."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml
from typer.testing import CliRunner

from surveyinsights.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path, base_config: dict[str, Any]) -> Path:
    """Write the base config to a YAML file."""
    path = tmp_path / "survey.yaml"
    path.write_text(yaml.safe_dump(base_config), encoding="utf-8")
    return path


class TestChartsCommand:
    """Tests for the charts command."""

    def test_writes_chart_files(self, config_file: Path, tmp_path: Path) -> None:
        """Test that one JSON file per chart is written."""
        out = tmp_path / "charts-out"
        result = runner.invoke(app, ["charts", "--config", str(config_file), "-o", str(out)])
        assert result.exit_code == 0, result.output
        written = sorted(p.name for p in out.glob("*.json"))
        assert written == [
            "education-chart.json",
            "employment-chart.json",
            "language-chart.json",
            "remote-chart.json",
            "salary-chart.json",
        ]
        language = json.loads((out / "language-chart.json").read_text())
        assert language["type"] == "bar"
        assert language["data"]["labels"][:2] == ["Go", "Python"]

    def test_missing_survey_file(self, tmp_path: Path) -> None:
        """Test that a source failure exits with code 1."""
        path = tmp_path / "broken.yaml"
        path.write_text(
            yaml.safe_dump({"project": "broken", "data": {"root": str(tmp_path / "nope")}}),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["charts", "--config", str(path)])
        assert result.exit_code == 1
        assert "Failed to load survey data" in result.output


class TestSummaryCommand:
    """Tests for the summary command."""

    def test_single_chart(self, config_file: Path) -> None:
        """Test summarizing one tally chart."""
        result = runner.invoke(
            app, ["summary", "--config", str(config_file), "--chart", "employment-chart"]
        )
        assert result.exit_code == 0, result.output
        assert "Employed" in result.output
        assert "Total: 6" in result.output

    def test_unknown_chart(self, config_file: Path) -> None:
        """Test that an unknown chart id exits with code 1."""
        result = runner.invoke(
            app, ["summary", "--config", str(config_file), "--chart", "nope"]
        )
        assert result.exit_code == 1


class TestValidateCommand:
    """Tests for the validate command."""

    def test_all_fields_present(self, config_file: Path) -> None:
        """Test validation of the sample survey."""
        result = runner.invoke(app, ["validate", "--config", str(config_file)])
        assert result.exit_code == 0, result.output
        assert "All 5 fields present" in result.output


def test_version() -> None:
    """Test the version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "surveyinsights version" in result.output
