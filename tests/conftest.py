"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

SURVEY_CSV = """\
ResponseId,LanguageHaveWorkedWith,Employment,EdLevel,RemoteWork,ConvertedCompYearly
1,Python;Go,Employed,Bachelor's degree,Remote,50000
2,Go;Rust,Employed,Master's degree,Hybrid,120000
3,Python;JavaScript,Student,Bachelor's degree,,NA
4,,Employed,,In-person,-5
5,JavaScript;Python;Go,Independent contractor,Master's degree,Remote,abc
6,Rust,Employed,Bachelor's degree,Hybrid,300000
"""


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Restore default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_records() -> list[dict[str, str | None]]:
    """Create sample survey records for testing."""
    return [
        {
            "LanguageHaveWorkedWith": "Python;Go",
            "Employment": "Employed",
            "EdLevel": "Bachelor's degree",
            "RemoteWork": "Remote",
            "ConvertedCompYearly": "50000",
        },
        {
            "LanguageHaveWorkedWith": "Go;Rust",
            "Employment": "Employed",
            "EdLevel": "Master's degree",
            "RemoteWork": "Hybrid",
            "ConvertedCompYearly": "120000",
        },
        {
            "LanguageHaveWorkedWith": "Python;JavaScript",
            "Employment": "Student",
            "EdLevel": "Bachelor's degree",
            "RemoteWork": "",
            "ConvertedCompYearly": "NA",
        },
        {
            "LanguageHaveWorkedWith": None,
            "Employment": "Employed",
            "EdLevel": None,
            "RemoteWork": "In-person",
            "ConvertedCompYearly": "-5",
        },
    ]


@pytest.fixture
def survey_csv(tmp_path: Path) -> Path:
    """Write a small survey CSV and return its path."""
    path = tmp_path / "data" / "survey_results_public.csv"
    path.parent.mkdir(parents=True)
    path.write_text(SURVEY_CSV, encoding="utf-8")
    return path


@pytest.fixture
def base_config(survey_csv: Path, tmp_path: Path) -> dict[str, Any]:
    """Create a minimal configuration dictionary for testing."""
    return {
        "project": "test-survey",
        "data": {
            "root": str(survey_csv.parent),
            "survey": survey_csv.name,
        },
        "output": {"root": str(tmp_path / "output")},
        "logging": {"level": "WARNING"},
    }
