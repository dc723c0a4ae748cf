from .base import AnalysisBase, AnalysisConfig, AnalysisResult
from .registry import available_kinds, get_analysis, register

__all__ = [
    "AnalysisBase",
    "AnalysisConfig",
    "AnalysisResult",
    "available_kinds",
    "get_analysis",
    "register",
]
