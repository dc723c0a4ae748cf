from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any, List
import logging
import time
import uuid

from .analyses import AnalysisConfig, AnalysisResult, get_analysis
from .constants import DEFAULT_CONFIG
from .dataset import Dataset
from .errors import InvalidColumnError, StatdashError

log = logging.getLogger("statdash.pipeline")


@dataclass
class PipelineConfig:
    bins: int = DEFAULT_CONFIG['analysis']['bins']
    max_listed_outliers: int = DEFAULT_CONFIG['analysis']['max_listed_outliers']
    histogram_bar_width: int = DEFAULT_CONFIG['analysis']['histogram_bar_width']
    output_dir: str = DEFAULT_CONFIG['report']['output_dir']
    write_artifacts: bool = DEFAULT_CONFIG['report']['write_artifacts']

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]]) -> "PipelineConfig":
        cfg = cfg or {}
        acfg = AnalysisConfig.from_config(cfg)
        rep = cfg.get('report', {}) or {}
        return cls(
            bins=acfg.bins,
            max_listed_outliers=acfg.max_listed_outliers,
            histogram_bar_width=acfg.histogram_bar_width,
            output_dir=rep.get('output_dir', cls.output_dir),
            write_artifacts=bool(rep.get('write_artifacts', cls.write_artifacts)),
        )

    def analysis_config(self, bins: Optional[int] = None) -> AnalysisConfig:
        return AnalysisConfig(
            bins=self.bins if bins is None else bins,
            max_listed_outliers=self.max_listed_outliers,
            histogram_bar_width=self.histogram_bar_width,
        )


@dataclass
class AnalysisReport:
    run_id: str
    kind: str
    column: str
    report_text: str
    chart: Optional[Dict[str, Any]]
    computed: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _now_id() -> str:
    return time.strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]


def dispatch(dataset: Dataset, column: str, kind: str, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Route one analysis request to its engine.

    Raises InvalidColumnError when ``column`` is not in the dataset and
    UnknownAnalysisError for an unregistered ``kind``; nothing is computed in
    either case.
    """
    engine = get_analysis(kind, config)
    if not column or not dataset.has_column(column):
        raise InvalidColumnError(column)
    return engine.compute(dataset, column, config)


def run_analysis(dataset: Dataset, column: str, kind: str, bins: Optional[int] = None, cfg: Optional[PipelineConfig] = None) -> AnalysisReport:
    cfg = cfg or PipelineConfig()
    run_id = _now_id()
    start = time.time()
    meta = {
        'run_id': run_id,
        'source': dataset.source,
        'rows': len(dataset),
        'cols': len(dataset.columns),
        'created_at': time.strftime('%Y-%m-%dT%H:%M:%S'),
    }
    log.info(f"Running {kind} analysis on column={column!r} ({len(dataset)} rows)")

    try:
        res = dispatch(dataset, column, kind, cfg.analysis_config(bins))
    except StatdashError as e:
        log.warning(f"Analysis {kind!r} on {column!r} failed: {e}")
        meta['elapsed_seconds'] = time.time() - start
        return AnalysisReport(
            run_id=run_id,
            kind=kind,
            column=column,
            report_text=str(e),
            chart=None,
            errors=[str(e)],
            meta=meta,
        )

    meta['elapsed_seconds'] = time.time() - start
    return AnalysisReport(
        run_id=run_id,
        kind=res.kind,
        column=column,
        report_text=res.report_text,
        chart=res.chart,
        computed=res.computed,
        warnings=list(res.warnings),
        meta=meta,
    )
