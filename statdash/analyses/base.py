from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from ..dataset import Dataset
from ..stats import HistogramBin


@dataclass
class AnalysisResult:
    kind: str
    column: str
    report_text: str = ""
    chart: Optional[Dict[str, Any]] = None
    computed: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)


@dataclass
class AnalysisConfig:
    bins: int = 10
    max_listed_outliers: int = 10
    histogram_bar_width: int = 20

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]]) -> "AnalysisConfig":
        sect = (cfg or {}).get('analysis', {}) or {}
        base = cls()
        return cls(
            bins=int(sect.get('bins', base.bins)),
            max_listed_outliers=int(sect.get('max_listed_outliers', base.max_listed_outliers)),
            histogram_bar_width=int(sect.get('histogram_bar_width', base.histogram_bar_width)),
        )


class AnalysisBase:
    kind_name: str = "base"

    def __init__(self, config: Optional[AnalysisConfig] = None):
        self.cfg = config or AnalysisConfig()

    def compute(self, dataset: Dataset, column: str, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
        raise NotImplementedError()


def histogram_chart(kind: str, column: str, bins: List[HistogramBin]) -> Dict[str, Any]:
    return {
        'id': f'{kind}_bar_{column}',
        'chart_type': 'bar',
        'title': f'Distribution of {column}',
        'x_label': column,
        'y_label': 'Frequency',
        'labels': [b.label for b in bins],
        'series': [{
            'label': f'Frequency Distribution - {column}',
            'data': [b.count for b in bins],
        }],
    }
