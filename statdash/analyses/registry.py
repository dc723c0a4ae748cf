from typing import Dict, List, Optional, Type

from ..errors import UnknownAnalysisError
from .base import AnalysisBase, AnalysisConfig
from .correlation import CorrelationAnalysis
from .descriptive import DescriptiveAnalysis
from .distribution import DistributionAnalysis
from .outliers import OutlierAnalysis

_REGISTRY: Dict[str, Type[AnalysisBase]] = {}


def register(name: str, analysis_cls):
    _REGISTRY[name] = analysis_cls
    return analysis_cls


def get_analysis(name: str, config: Optional[AnalysisConfig] = None) -> AnalysisBase:
    key = (name or '').strip().lower()
    cls = _REGISTRY.get(key)
    if cls is None:
        raise UnknownAnalysisError(name)
    return cls(config)


def available_kinds() -> List[str]:
    return list(_REGISTRY.keys())


register('descriptive', DescriptiveAnalysis)
register('correlation', CorrelationAnalysis)
register('distribution', DistributionAnalysis)
register('outliers', OutlierAnalysis)
