"""Running totals accumulated across RW records for the RT record."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from functools import reduce

from pydantic import BaseModel

from efw2.models.wage_record import SUMMABLE_FIELDS, EmployeeWageRecord


class RunningTotals(BaseModel):
    """Immutable aggregate of the seven summable amounts and the RW count.

    ``add`` returns a new value, so the final totals are a fold over the
    employee sequence and can be recomputed from the input alone.
    """

    count: int = 0
    wages: Decimal = Decimal("0")
    federal_tax: Decimal = Decimal("0")
    ss_wages: Decimal = Decimal("0")
    ss_tax: Decimal = Decimal("0")
    medicare_wages: Decimal = Decimal("0")
    medicare_tax: Decimal = Decimal("0")
    ss_tips: Decimal = Decimal("0")

    model_config = {"frozen": True}

    def add(self, record: EmployeeWageRecord) -> RunningTotals:
        update = {name: getattr(self, name) + amount for name, amount in record.amounts.items()}
        update["count"] = self.count + 1
        return self.model_copy(update=update)

    @classmethod
    def from_records(cls, records: Iterable[EmployeeWageRecord]) -> RunningTotals:
        return reduce(cls.add, records, cls())

    @property
    def amounts(self) -> dict[str, Decimal]:
        return {name: getattr(self, name) for name in SUMMABLE_FIELDS}
