from typing import Any, Dict, List, Tuple

from .dataset import Dataset


def is_numeric_column(dataset: Dataset, col: str) -> bool:
    return any(c.is_numeric for c in dataset.cells(col))


def numeric_columns(dataset: Dataset) -> List[str]:
    if dataset.empty:
        return []
    return [c for c in dataset.columns if is_numeric_column(dataset, c)]


def numeric_projection(dataset: Dataset, col: str) -> List[float]:
    # non-numeric and absent cells are dropped, never coerced to zero
    return [float(c.value) for c in dataset.cells(col) if c.is_numeric]


def present_values(dataset: Dataset, col: str) -> List[Any]:
    return [c.raw for c in dataset.cells(col) if not c.is_absent]


def infer_column_types(dataset: Dataset) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {"numeric_columns": [], "text_columns": []}
    for c in dataset.columns:
        if is_numeric_column(dataset, c):
            out["numeric_columns"].append(c)
        else:
            out["text_columns"].append(c)
    return out


def column_labels(dataset: Dataset) -> List[Tuple[str, str]]:
    labels = []
    for c in dataset.columns:
        kind = "numeric" if is_numeric_column(dataset, c) else "text"
        labels.append((c, f"{c} ({kind})"))
    return labels
