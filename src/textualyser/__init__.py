"""
textualyser package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analyzer import FileAnalyser, analyze_text
from .config import AnalysisOptions, TextualyserConfig, config_from_dict, load_config
from .errors import (
    ConfigurationError,
    FileError,
    InvalidInputError,
    ParseError,
    TextualyserError,
)
from .matching import StringMatcher
from .models import NOT_REQUESTED, Computed, StatisticsReport
from .report import read_report_counts, render_report

__all__ = [
    "AnalysisOptions",
    "Computed",
    "ConfigurationError",
    "FileAnalyser",
    "FileError",
    "InvalidInputError",
    "NOT_REQUESTED",
    "ParseError",
    "StatisticsReport",
    "StringMatcher",
    "TextualyserConfig",
    "TextualyserError",
    "analyze_text",
    "config_from_dict",
    "load_config",
    "read_report_counts",
    "render_report",
]

__version__ = "0.1.0"
