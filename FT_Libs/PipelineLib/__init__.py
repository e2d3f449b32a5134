"""
PipelineLib - Filter selection, output handling and headless runs

This module wires the image source, the filter registry and the
output sink together.
"""

from FT_Libs.PipelineLib.filter_registry import (
    FilterRegistry,
    get_default_registry,
    register_default_filters,
)
from FT_Libs.PipelineLib.output_handler import OutputConfig, OutputHandler
from FT_Libs.PipelineLib.filter_pipeline import FilterRunResult, run_filter

__all__ = [
    "FilterRegistry",
    "get_default_registry",
    "register_default_filters",
    "OutputConfig",
    "OutputHandler",
    "FilterRunResult",
    "run_filter",
]
