from typing import Any, Dict, List, Optional

from .dataset import Cell, Dataset
from .formatting import fixed, format_number
from .schema import numeric_columns, numeric_projection
from .stats import basic_stats, correlation, detect_outliers, interpret_strength


def profile(dataset: Dataset, cfg: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Dataset overview: shape, missingness and a quick look at the numeric columns."""
    cfg = cfg or {}
    top_n = int(cfg.get('top_correlation_columns', 3))
    out: Dict[str, Any] = {}
    if dataset.empty:
        out['shape'] = {'rows': 0, 'cols': 0}
        out['numeric_columns'] = []
        return out

    df = dataset.to_frame()
    out['shape'] = {'rows': int(df.shape[0]), 'cols': int(df.shape[1])}
    miss = df.isna().mean().sort_values(ascending=False).head(20)
    out['missing_top'] = [{'column': k, 'missing': float(v)} for k, v in miss.items() if v > 0]

    num_cols = numeric_columns(dataset)
    out['numeric_columns'] = num_cols
    if not num_cols:
        return out

    first = num_cols[0]
    xs = numeric_projection(dataset, first)
    st = basic_stats(xs)
    out['distribution'] = {
        'column': first,
        'mean': st.mean,
        'std_dev': st.std_dev,
        'skewness': st.skewness,
    }

    pairs: List[Dict[str, Any]] = []
    k = len(num_cols)
    for i in range(min(top_n, k - 1)):
        for j in range(i + 1, min(top_n, k)):
            r = correlation(numeric_projection(dataset, num_cols[i]), numeric_projection(dataset, num_cols[j])) + 0.0
            pairs.append({'left': num_cols[i], 'right': num_cols[j], 'correlation': r, 'strength': interpret_strength(r)})
    out['top_correlations'] = pairs

    res = detect_outliers(xs)
    out['outliers'] = {
        'column': first,
        'count': res.count,
        'percentage': res.fraction * 100,
    }
    return out


def render_profile(p: Dict[str, Any]) -> str:
    shape = p.get('shape', {})
    lines = [
        'Dataset Overview:',
        f"Total Records: {shape.get('rows', 0)}",
        f"Total Columns: {shape.get('cols', 0)}",
        f"Numeric Columns: {len(p.get('numeric_columns', []))}",
    ]
    dist = p.get('distribution')
    if dist:
        lines += [
            '',
            f"{dist['column']}:",
            f"Mean: {fixed(dist['mean'])}",
            f"Std Dev: {fixed(dist['std_dev'])}",
            f"Skewness: {fixed(dist['skewness'])}",
        ]
    if p.get('top_correlations'):
        lines += ['', 'Top Correlations:']
        for c in p['top_correlations']:
            lines.append(f"{c['left']} × {c['right']}: {fixed(c['correlation'], 3)}")
    out = p.get('outliers')
    if out:
        lines += [
            '',
            f"{out['column']}:",
            f"Outliers: {out['count']}",
            f"Percentage: {fixed(out['percentage'], 1)}%",
        ]
    return '\n'.join(lines)


def _preview_cell(cell, max_width: int) -> str:
    if cell.is_absent:
        return ''
    if cell.is_numeric:
        return format_number(cell.value)
    text = str(cell.value)
    if len(text) > max_width:
        return text[:max_width] + '...'
    return text


def preview(dataset: Dataset, max_rows: int = 10, max_width: int = 30) -> Dict[str, Any]:
    """First ``max_rows`` records as display strings, long text cut at ``max_width``."""
    headers = dataset.columns
    shown = dataset.records[:max_rows]
    rows = [[_preview_cell(r.get(h, Cell.absent()), max_width) for h in headers] for r in shown]
    note = None
    if len(dataset) > max_rows:
        note = f"Showing first {max_rows} rows of {len(dataset)} total rows."
    return {'headers': headers, 'rows': rows, 'total': len(dataset), 'note': note}


def render_preview(p: Dict[str, Any]) -> str:
    if not p['rows']:
        return 'No data to display.'
    lines = [' | '.join(p['headers'])]
    lines += [' | '.join(row) for row in p['rows']]
    if p['note']:
        lines += ['', p['note']]
    return '\n'.join(lines)
