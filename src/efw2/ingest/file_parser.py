"""Wage file parser: CSV rows into EmployeeWageRecord models."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from pydantic import ValidationError

from efw2.core.exceptions import InputParseError
from efw2.models.wage_record import EmployeeWageRecord

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv",)


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "row"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


def parse_rows(rows: list[dict]) -> list[EmployeeWageRecord]:
    """Validate already-read rows; the first bad row aborts the whole file."""
    records: list[EmployeeWageRecord] = []
    for row_number, row in enumerate(rows, start=1):
        if None in row:
            raise InputParseError("row has more values than header columns", row_number)
        # cells missing from short rows come through as None
        data = {key: value for key, value in row.items() if key and value is not None}
        try:
            records.append(EmployeeWageRecord.model_validate(data))
        except ValidationError as exc:
            raise InputParseError(_summarize(exc), row_number) from exc
    return records


def read_wage_records(path: str | Path) -> list[EmployeeWageRecord]:
    """Read and validate every row of a wage file before any record is built."""
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise InputParseError(f"Unsupported wage file type {path.suffix or '(none)'!r} for {path}")
    try:
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            reader = csv.DictReader(handle)
            rows = [{k.strip() if k else k: v for k, v in row.items()} for row in reader]
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise InputParseError(f"Cannot read wage file {path}: {exc}") from exc

    records = parse_rows(rows)
    logger.info("Read %d wage records from %s", len(records), path)
    return records
