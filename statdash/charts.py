from typing import Any, Dict, Optional

from .dataset import Cell, Dataset
from .errors import InvalidColumnError, InvalidInputError

CHART_TYPES = ("bar", "line", "pie", "scatter")


def _num_or_zero(cell: Cell) -> Any:
    return cell.value if cell.is_numeric else 0


def chart_payload(dataset: Dataset, x: str, y: str, chart_type: str = "bar") -> Dict[str, Any]:
    """Chart of ``y`` against ``x`` over every record.

    Non-numeric y cells plot as 0. Scatter charts carry ``{x, y}`` points
    (a non-numeric x is 0 too) and no labels; the other types label each
    point with the raw x value. Pie charts have no axis titles.
    """
    kind = (chart_type or "").strip().lower()
    if kind not in CHART_TYPES:
        raise InvalidInputError(f"Unknown chart type: {chart_type} (choose from {', '.join(CHART_TYPES)})")
    for col in (x, y):
        if not col or not dataset.has_column(col):
            raise InvalidColumnError(col)

    xs = dataset.cells(x)
    ys = dataset.cells(y)
    labels: Optional[list] = None
    if kind == "scatter":
        data = [{'x': _num_or_zero(a), 'y': _num_or_zero(b)} for a, b in zip(xs, ys)]
    else:
        labels = [c.raw for c in xs]
        data = [_num_or_zero(c) for c in ys]

    return {
        'id': f'{kind}_{x}_{y}',
        'chart_type': kind,
        'title': f'{y} vs {x}',
        'x_label': None if kind == 'pie' else x,
        'y_label': None if kind == 'pie' else y,
        'labels': labels,
        'series': [{
            'label': f'{y} vs {x}',
            'data': data,
        }],
    }
