from pathlib import Path
from typing import Any, Dict, List, Optional
import io
import json
import logging
import re

import pandas as pd
import requests

from .dataset import Cell, Dataset, Record
from .errors import LoadError
from .samples import SAMPLE_DATASETS
from .utils import detect_encoding, sniff_delimiter

log = logging.getLogger("statdash.loader")

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def load(path: str, cfg: Optional[Dict[str, Any]] = None) -> Dataset:
    cfg = cfg or {}
    p = Path(path)
    if not p.exists():
        raise LoadError(f"File not found: {path}")

    override = (cfg.get("type_override") or "").strip().lower()
    enc = cfg.get("encoding") or detect_encoding(str(p))
    text = p.read_text(encoding=enc, errors="replace")
    log.info(f"Loading {p.name} (encoding={enc})")

    ext = p.suffix.lower()
    if override == "json" or (not override and ext == ".json"):
        return parse_json(text, source=p.name)
    if override == "csv" or ext == ".csv":
        return parse_csv(text, source=p.name)

    # fallback: try CSV
    try:
        return parse_csv(text, source=p.name)
    except LoadError:
        raise LoadError(f"Unsupported file type or failed to load: {ext}")


def _clean_columns(cols: List[Any]) -> List[str]:
    # header repair: strip, remove BOM, dedupe
    new_cols = []
    seen = set()
    for c in cols:
        name = str(c).strip().lstrip('\ufeff').strip()
        if not name:
            name = 'col'
        base = name
        i = 1
        while name in seen:
            i += 1
            name = f"{base}__{i}"
        seen.add(name)
        new_cols.append(name)
    return new_cols


def _coerce_cell(v: Any) -> Cell:
    if not isinstance(v, str):
        return Cell.from_raw(v)
    s = v.strip()
    if not s:
        return Cell.absent()
    if _INT_RE.match(s):
        return Cell.number(int(s))
    if _FLOAT_RE.match(s):
        return Cell.from_raw(float(s))
    return Cell.text(s)


def parse_csv(text: str, delimiter: Optional[str] = None, source: str = "csv") -> Dataset:
    text = (text or "").strip()
    lines = [l for l in text.splitlines() if l.strip()]
    if len(lines) < 2:
        raise LoadError("CSV must have at least a header and one data row")

    delim = delimiter or sniff_delimiter(text)
    try:
        df = pd.read_csv(
            io.StringIO(text),
            sep=delim,
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
            engine="python",
            on_bad_lines="skip",
            header=None,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
        log.debug(f"CSV parse failed for delimiter {delim!r}: {e}")
        raise LoadError(f"CSV load failed: {e}") from e

    # header row read as data so duplicate names reach _clean_columns unrenamed
    header = df.iloc[0].tolist()
    df = df.iloc[1:].reset_index(drop=True)
    df.columns = _clean_columns(header)
    log.info(f"CSV loaded with delimiter={delim!r}: {df.shape[0]} rows x {df.shape[1]} cols")
    skipped = len(lines) - 1 - df.shape[0]
    if skipped > 0:
        log.warning(f"Skipped {skipped} malformed CSV row(s)")

    records: List[Record] = []
    for row in df.to_dict("records"):
        records.append({k: _coerce_cell(v) for k, v in row.items()})
    return _non_empty(Dataset(records=records, source=source))


def _records_from_payload(payload: Any, source: str) -> Dataset:
    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise LoadError("JSON data must be an object or an array of objects")
    if any(not isinstance(r, dict) for r in payload):
        raise LoadError("JSON array items must be objects")
    return _non_empty(Dataset.from_records(payload, source=source))


def parse_json(text: str, source: str = "json") -> Dataset:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"JSON load failed: {e}") from e
    return _records_from_payload(payload, source)


def fetch_json(url: str, timeout: float = 15) -> Dataset:
    log.info(f"Fetching JSON from {url}")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        payload = resp.json()
    except (requests.RequestException, ValueError) as e:
        raise LoadError(f"Failed to fetch data from URL: {e}") from e
    return _records_from_payload(payload, url)


def load_sample(name: str) -> Dataset:
    key = (name or "").strip().lower()
    rows = SAMPLE_DATASETS.get(key)
    if rows is None:
        raise LoadError(f"Unknown sample dataset: {name} (choose from {', '.join(SAMPLE_DATASETS)})")
    return Dataset.from_records(rows, source=f"sample:{key}")


def load_source(target: str, cfg: Optional[Dict[str, Any]] = None) -> Dataset:
    """Resolve ``sample:<name>``, an http(s) URL, or a file path."""
    cfg = cfg or {}
    target = (target or "").strip()
    if not target:
        raise LoadError("No input provided")
    if target.lower().startswith("sample:"):
        return load_sample(target.split(":", 1)[1])
    if target.lower().startswith(("http://", "https://")):
        return fetch_json(target, timeout=cfg.get("http_timeout", 15))
    return load(target, cfg)


def _non_empty(dataset: Dataset) -> Dataset:
    if dataset.empty:
        raise LoadError("No data found or invalid format")
    return dataset
