"""Descriptive statistics, correlation, histogram and IQR outlier calculators.

All functions take plain sequences of floats (a column's numeric projection)
and return fresh results; nothing is cached between calls.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Hashable, List, Optional, Sequence

import numpy as np

from .errors import EmptyDataError, InvalidInputError

IQR_FENCE = 1.5


@dataclass
class BasicStats:
    count: int
    sum: float
    mean: float
    median: float
    mode: float
    variance: float
    std_dev: float
    min: float
    max: float
    range: float
    q1: float
    q3: float
    skewness: Optional[float]  # None when std_dev == 0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class HistogramBin:
    label: str
    start: float
    end: float
    count: int


@dataclass
class OutlierSummary:
    q1: float
    q3: float
    iqr: float
    lower: float
    upper: float
    outliers: List[float] = field(default_factory=list)
    outlier_positions: List[int] = field(default_factory=list)
    normal: List[float] = field(default_factory=list)
    normal_positions: List[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.outliers)

    @property
    def fraction(self) -> float:
        total = len(self.outliers) + len(self.normal)
        return len(self.outliers) / total if total else 0.0


def _as_array(xs: Sequence[float]) -> np.ndarray:
    return np.asarray(list(xs), dtype=float)


def _first_most_common(values: Sequence[Hashable]) -> Any:
    # dicts keep first-seen order, and max() keeps the first of equal keys
    counts: Dict[Hashable, int] = {}
    for v in values:
        counts[v] = counts.get(v, 0) + 1
    return max(counts, key=counts.__getitem__)


def quartile_indices(n: int) -> tuple:
    return int(math.floor(n * 0.25)), int(math.floor(n * 0.75))


def basic_stats(xs: Sequence[float]) -> BasicStats:
    arr = _as_array(xs)
    n = int(arr.size)
    if n == 0:
        raise EmptyDataError("basic statistics need at least one value")

    total = float(arr.sum())
    mean = total / n
    srt = np.sort(arr, kind="stable")

    if n % 2 == 0:
        median = float((srt[n // 2 - 1] + srt[n // 2]) / 2)
    else:
        median = float(srt[n // 2])

    mode = float(_first_most_common(arr.tolist()))

    variance = float(((arr - mean) ** 2).sum() / n)
    std_dev = math.sqrt(variance)

    mn = float(srt[0])
    mx = float(srt[-1])

    i1, i3 = quartile_indices(n)
    q1 = float(srt[i1])
    q3 = float(srt[i3])

    skewness: Optional[float] = None
    if std_dev > 0:
        skewness = float((((arr - mean) / std_dev) ** 3).sum() / n)

    return BasicStats(
        count=n,
        sum=total,
        mean=mean,
        median=median,
        mode=mode,
        variance=variance,
        std_dev=std_dev,
        min=mn,
        max=mx,
        range=mx - mn,
        q1=q1,
        q3=q3,
        skewness=skewness,
    )


def most_frequent(values: Sequence[Hashable]) -> Any:
    if not values:
        raise EmptyDataError("no values to count")
    return _first_most_common(values)


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson product-moment correlation of two equal-length sequences.

    Unequal lengths, empty input and constant series all give 0.
    """
    if len(x) != len(y) or len(x) == 0:
        return 0.0
    ax = _as_array(x)
    ay = _as_array(y)
    if ax.min() == ax.max() or ay.min() == ay.max():
        return 0.0

    n = ax.size
    sx = ax.sum()
    sy = ay.sum()
    sxy = (ax * ay).sum()
    sxx = (ax * ax).sum()
    syy = (ay * ay).sum()

    num = n * sxy - sx * sy
    den_sq = (n * sxx - sx * sx) * (n * syy - sy * sy)
    if den_sq <= 0:
        return 0.0
    r = float(num / math.sqrt(den_sq))
    return max(-1.0, min(1.0, r))


def interpret_strength(r: float) -> str:
    a = abs(r)
    if a >= 0.8:
        return "Very Strong"
    if a >= 0.6:
        return "Strong"
    if a >= 0.4:
        return "Moderate"
    if a >= 0.2:
        return "Weak"
    return "Very Weak"


def _bin_edges(mn: float, mx: float, bins: int) -> List[float]:
    size = (mx - mn) / bins
    if math.isfinite(size):
        edges = [mn + i * size for i in range(bins)]
    else:
        # span overflows a double; step in half scale and clamp back into [mn, mx]
        half = mx / 2 / bins - mn / 2 / bins
        edges = [min(max((mn / 2 + i * half) * 2, mn), mx) for i in range(bins)]
        edges[0] = mn
    edges.append(mx)
    return edges


def histogram(xs: Sequence[float], bins: int = 10) -> List[HistogramBin]:
    """Equal-width bins over [min, max].

    Every bin is half-open except the last, which is closed and ends exactly
    at max, so each value lands in exactly one bin.
    """
    if int(bins) < 1:
        raise InvalidInputError(f"bins must be >= 1, got {bins}")
    bins = int(bins)
    arr = _as_array(xs)
    if arr.size == 0:
        return []

    edges = _bin_edges(float(arr.min()), float(arr.max()), bins)
    out: List[HistogramBin] = []
    for i in range(bins):
        start, end = edges[i], edges[i + 1]
        if i == bins - 1:
            mask = (arr >= start) & (arr <= end)
        else:
            mask = (arr >= start) & (arr < end)
        out.append(HistogramBin(
            label=f"{start:.1f}-{end:.1f}",
            start=start,
            end=end,
            count=int(np.count_nonzero(mask)),
        ))
    return out


def detect_outliers(xs: Sequence[float]) -> OutlierSummary:
    """Tukey fences: values strictly outside [q1 - 1.5*iqr, q3 + 1.5*iqr]."""
    arr = _as_array(xs)
    n = int(arr.size)
    if n == 0:
        raise EmptyDataError("outlier detection needs at least one value")

    srt = np.sort(arr, kind="stable")
    i1, i3 = quartile_indices(n)
    q1 = float(srt[i1])
    q3 = float(srt[i3])
    iqr = q3 - q1
    lower = q1 - IQR_FENCE * iqr
    upper = q3 + IQR_FENCE * iqr

    res = OutlierSummary(q1=q1, q3=q3, iqr=iqr, lower=lower, upper=upper)
    for pos, v in enumerate(arr.tolist()):
        if v < lower or v > upper:
            res.outliers.append(v)
            res.outlier_positions.append(pos)
        else:
            res.normal.append(v)
            res.normal_positions.append(pos)
    return res
