"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
Minimal configs only need: project (charts default to the survey dashboard).
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from surveyinsights.config.settings import (
    ChartDefinition,
    DataSourceConfig,
    LoggingConfig,
    OutputConfig,
    PipelineConfig,
    StyleConfig,
    default_chart_definitions,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return _process_config_values(data) if data else {}


def _build_data_config(data_data: dict[str, Any]) -> DataSourceConfig:
    """Build the data source config from the 'data' section."""
    kwargs: dict[str, Any] = {}
    if data_data.get("root"):
        kwargs["data_root"] = Path(data_data["root"])
    if data_data.get("survey"):
        kwargs["survey"] = Path(data_data["survey"])
    for key in ("delimiter", "encoding", "na_values"):
        if key in data_data:
            kwargs[key] = data_data[key]
    return DataSourceConfig(**kwargs)


def _build_charts(charts_data: list[dict[str, Any]] | None) -> list[ChartDefinition]:
    """Build chart definitions, falling back to the dashboard defaults."""
    if not charts_data:
        return default_chart_definitions()
    if not isinstance(charts_data, list):
        msg = f"'charts' must be a list of chart definitions, got {type(charts_data).__name__}"
        raise ValueError(msg)
    return [ChartDefinition.model_validate(chart) for chart in charts_data]


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> PipelineConfig:
    """
    Load pipeline configuration from YAML file(s).

    Minimal config requires only:
        - project: str

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated PipelineConfig instance.
    """
    # Load base config if provided
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        # Try to find base.yaml in same directory
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base != config_path:
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    main_data = load_yaml(config_path)

    # Merge configs (main overrides base)
    merged = _deep_merge(base_data, main_data)

    project = merged.get("project")
    if not project:
        msg = "Config must specify 'project' name"
        raise ValueError(msg)

    data = _build_data_config(merged.get("data", {}))
    style = StyleConfig(**merged.get("style", {}))

    output_data = merged.get("output", {})
    output = OutputConfig(
        output_root=Path(output_data.get("root", "./output")),
    )

    logging_data = merged.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        json_output=logging_data.get("json", False),
    )

    return PipelineConfig(
        project=str(project),
        data=data,
        style=style,
        output=output,
        logging=logging_config,
        charts=_build_charts(merged.get("charts")),
    )
