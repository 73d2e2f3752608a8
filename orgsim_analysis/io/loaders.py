"""Load final-state result batches from JSON or Parquet files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pyarrow.parquet as pq

from orgsim_analysis.domain.records import Result
from orgsim_analysis.io.schemas import RESULT_REQUIRED_COLUMNS

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".parquet")


def _records_from_json(path: Path) -> list[dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("results")
    if not isinstance(payload, list):
        raise ValueError(f"{path}: expected a JSON array of results or a 'results' array")
    for index, record in enumerate(payload):
        if not isinstance(record, dict):
            raise ValueError(f"{path}: result {index} is not an object")
    return payload


def _records_from_parquet(path: Path) -> list[dict[str, Any]]:
    table = pq.read_table(path)
    for spellings in RESULT_REQUIRED_COLUMNS:
        if not any(name in table.column_names for name in spellings):
            raise ValueError(f"results parquet missing required column: {spellings[0]}")
    return table.to_pylist()


def load_results(path: Path) -> list[Result]:
    """Read a result batch; the format is chosen by file suffix."""
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"Results file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        records = _records_from_json(path)
    elif suffix == ".parquet":
        records = _records_from_parquet(path)
    else:
        valid = ", ".join(SUPPORTED_SUFFIXES)
        raise ValueError(f"Unsupported results file {path.name!r}; expected one of: {valid}")
    logger.info("Loaded %d results from %s", len(records), path)
    return [Result.coerce(record) for record in records]
