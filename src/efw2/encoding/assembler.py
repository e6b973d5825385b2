"""File assembler: RA, RE, RW*, RT, RF in order, with no separators."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from efw2.core.config import EncodingConfig
from efw2.encoding.records import (
    FixedWidthRecord,
    build_ra,
    build_re,
    build_rf,
    build_rt,
    build_rw,
)
from efw2.models.employer import EmployerConfig
from efw2.models.run import RunParameters
from efw2.models.totals import RunningTotals
from efw2.models.wage_record import EmployeeWageRecord

logger = logging.getLogger(__name__)

OUTPUT_ENCODING = "ascii"


@dataclass(frozen=True)
class Submission:
    """A complete, ordered EFW2 submission and the totals it was built from."""

    records: tuple[FixedWidthRecord, ...]
    totals: RunningTotals

    @property
    def text(self) -> str:
        return "".join(self.records)

    def encode(self) -> bytes:
        return self.text.encode(OUTPUT_ENCODING)


def build_wage_records(
    records: Iterable[EmployeeWageRecord], encoding: EncodingConfig,
) -> tuple[list[FixedWidthRecord], RunningTotals]:
    """Build RW records in input order, folding each into the running totals.

    A record only counts toward the totals once its RW record was built.
    """
    rw_records: list[FixedWidthRecord] = []
    totals = RunningTotals()
    for record in records:
        rw_records.append(build_rw(record, encoding))
        totals = totals.add(record)
    return rw_records, totals


def assemble(
    employer: EmployerConfig,
    records: Iterable[EmployeeWageRecord],
    params: RunParameters,
    encoding: EncodingConfig | None = None,
) -> Submission:
    """Build every record of the submission; raises on the first failure."""
    if encoding is None:
        encoding = EncodingConfig()
    head = [build_ra(employer, params, encoding), build_re(employer, params, encoding)]
    rw_records, totals = build_wage_records(records, encoding)
    tail = [build_rt(totals, encoding), build_rf(totals, encoding)]
    logger.info("Assembled submission with %d RW records for tax year %d", totals.count, params.tax_year)
    return Submission(records=tuple(head + rw_records + tail), totals=totals)


def encode_submission(
    employer: EmployerConfig,
    records: Iterable[EmployeeWageRecord],
    params: RunParameters,
    encoding: EncodingConfig | None = None,
) -> bytes:
    return assemble(employer, records, params, encoding).encode()
