"""In-memory tabular dataset.

A dataset is an ordered list of records; each record maps a column name to a
``Cell``. Cells are tagged so that numeric extraction never has to probe
types at analysis time.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Union

import numpy as np
import pandas as pd


class CellKind(str, Enum):
    NUMBER = "number"
    TEXT = "text"
    ABSENT = "absent"


@dataclass(frozen=True)
class Cell:
    kind: CellKind
    value: Union[int, float, str, None] = None

    @classmethod
    def number(cls, v: Union[int, float]) -> "Cell":
        return cls(CellKind.NUMBER, v)

    @classmethod
    def text(cls, v: str) -> "Cell":
        return cls(CellKind.TEXT, v)

    @classmethod
    def absent(cls) -> "Cell":
        return _ABSENT

    @classmethod
    def from_raw(cls, v: Any) -> "Cell":
        if isinstance(v, Cell):
            return v
        if v is None:
            return _ABSENT
        # bool is an int subclass but never numeric data
        if isinstance(v, (bool, np.bool_)):
            return cls.text(str(v).lower())
        if isinstance(v, (int, np.integer)):
            return cls.number(int(v))
        if isinstance(v, (float, np.floating)):
            if not math.isfinite(v):
                return _ABSENT
            return cls.number(float(v))
        if isinstance(v, str):
            return cls.text(v)
        return cls.text(str(v))

    @property
    def is_numeric(self) -> bool:
        return self.kind is CellKind.NUMBER

    @property
    def is_absent(self) -> bool:
        return self.kind is CellKind.ABSENT

    @property
    def raw(self) -> Union[int, float, str, None]:
        return self.value


_ABSENT = Cell(CellKind.ABSENT)

Record = Dict[str, Cell]


@dataclass
class Dataset:
    records: List[Record] = field(default_factory=list)
    source: str = "memory"

    @classmethod
    def from_records(cls, rows: Iterable[Mapping[str, Any]], source: str = "memory") -> "Dataset":
        records: List[Record] = []
        for row in rows:
            records.append({str(k): Cell.from_raw(v) for k, v in row.items()})
        return cls(records=records, source=source)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def empty(self) -> bool:
        return not self.records

    @property
    def columns(self) -> List[str]:
        if not self.records:
            return []
        return list(self.records[0].keys())

    def has_column(self, name: str) -> bool:
        return any(name in r for r in self.records)

    def cells(self, name: str) -> List[Cell]:
        return [r.get(name, _ABSENT) for r in self.records]

    def to_records(self) -> List[Dict[str, Any]]:
        return [{k: c.raw for k, c in r.items()} for r in self.records]

    def to_frame(self) -> pd.DataFrame:
        cols = self.columns
        for r in self.records:
            for k in r:
                if k not in cols:
                    cols.append(k)
        return pd.DataFrame(self.to_records(), columns=cols)
