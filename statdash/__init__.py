"""Descriptive statistics, correlation, histogram and outlier analysis for tabular data."""
from .dataset import Cell, CellKind, Dataset
from .errors import (
    EmptyDataError,
    InvalidColumnError,
    InvalidInputError,
    LoadError,
    StatdashError,
    UnknownAnalysisError,
    ValidationError,
)
from .pipeline import AnalysisReport, PipelineConfig, dispatch, run_analysis

__version__ = "0.1.0"

__all__ = [
    "AnalysisReport",
    "Cell",
    "CellKind",
    "Dataset",
    "EmptyDataError",
    "InvalidColumnError",
    "InvalidInputError",
    "LoadError",
    "PipelineConfig",
    "StatdashError",
    "UnknownAnalysisError",
    "ValidationError",
    "dispatch",
    "run_analysis",
]
