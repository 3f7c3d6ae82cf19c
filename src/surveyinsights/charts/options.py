"""
Display options handed to the rendering surface alongside each dataset.

Options come from the chart definition and style only; nothing here looks
at the data.
"""

from typing import Any

from surveyinsights.config.settings import ChartDefinition, StyleConfig


def _title(definition: ChartDefinition, style: StyleConfig) -> dict[str, Any]:
    return {
        "display": bool(definition.title),
        "text": definition.title,
        "font": {"size": style.title_font_size},
    }


def _axis_title(text: str) -> dict[str, Any]:
    return {"title": {"display": True, "text": text}}


def build_options(definition: ChartDefinition, style: StyleConfig) -> dict[str, Any]:
    """
    Build Chart.js options for a chart definition.

    Bar charts hide the legend, may be horizontal (index axis 'y') and may
    carry axis titles. Pie and doughnut charts show the legend, on the right
    unless configured otherwise.

    Args:
        definition: Chart definition.
        style: Style configuration (title font size).

    Returns:
        Options mapping.
    """
    options: dict[str, Any] = {
        "responsive": True,
        "maintainAspectRatio": False,
    }

    if definition.kind.is_radial:
        legend: dict[str, Any] = {"position": definition.legend_position or "right"}
    elif definition.legend_position is not None:
        legend = {"display": True, "position": definition.legend_position}
    else:
        legend = {"display": False}

    options["plugins"] = {"legend": legend, "title": _title(definition, style)}

    if definition.kind.is_radial:
        return options

    if definition.index_axis is not None:
        options["indexAxis"] = definition.index_axis

    scales: dict[str, Any] = {}
    if definition.x_axis_title:
        scales["x"] = _axis_title(definition.x_axis_title)
    if definition.y_axis_title:
        scales["y"] = _axis_title(definition.y_axis_title)
    if scales:
        options["scales"] = scales

    return options
