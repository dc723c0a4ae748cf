from typing import Any, Dict, List, Optional, Tuple

from .dataset import Dataset
from .errors import ValidationError
from .schema import numeric_columns


def validate_dataset(dataset: Dataset, cfg: Optional[Dict[str, Any]] = None) -> Tuple[List[str], List[str]]:
    cfg = cfg or {}
    warnings = []
    errors = []

    if dataset is None or dataset.empty:
        errors.append('No data found or invalid format')
        return warnings, errors

    rows = len(dataset)
    cols = dataset.columns
    if not cols:
        errors.append('Dataset has no columns')
        return warnings, errors

    max_rows = cfg.get('max_rows', 250000)
    max_cols = cfg.get('max_cols', 2000)
    if rows > max_rows:
        errors.append(f"Dataset has {rows} rows, exceeds max {max_rows}")
    if len(cols) > max_cols:
        errors.append(f"Dataset has {len(cols)} columns, exceeds max {max_cols}")

    if rows < 10:
        warnings.append('Very small number of rows (<10)')

    # records that do not share the first record's columns
    first = set(cols)
    ragged = sum(1 for r in dataset.records if set(r.keys()) != first)
    if ragged:
        warnings.append(f'{ragged} record(s) have a different column set than the first record')

    empty_cols = [c for c in cols if all(cell.is_absent for cell in dataset.cells(c))]
    if empty_cols:
        warnings.append(f'Columns with no values: {empty_cols[:10]}')

    if not numeric_columns(dataset):
        warnings.append('No numeric columns detected')

    return warnings, errors


def ensure_valid(dataset: Dataset, cfg: Optional[Dict[str, Any]] = None) -> List[str]:
    warnings, errors = validate_dataset(dataset, cfg)
    if errors:
        raise ValidationError('; '.join(errors))
    return warnings
