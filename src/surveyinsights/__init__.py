"""
Surveyinsights: chart-ready summaries of developer survey results.

This package turns a flat batch of survey records into frequency tallies,
ranked tables and salary histograms, packaged as chart datasets.
"""

from importlib.metadata import version

__version__ = version("surveyinsights")

__all__ = ["__version__"]
