"""Record builders for the RA, RE, RW, RT and RF record types."""

from __future__ import annotations

import logging
from typing import Any

from efw2.core.config import EncodingConfig
from efw2.core.exceptions import InternalLengthInvariantError
from efw2.encoding.fields import format_amount, format_number, format_text
from efw2.encoding.layout import (
    RA_LAYOUT,
    RE_LAYOUT,
    RECORD_LENGTH,
    RF_LAYOUT,
    RT_LAYOUT,
    RW_LAYOUT,
    FieldKind,
    RecordLayout,
)
from efw2.models.employer import EmployerConfig
from efw2.models.run import RunParameters
from efw2.models.totals import RunningTotals
from efw2.models.wage_record import EmployeeWageRecord

logger = logging.getLogger(__name__)


class FixedWidthRecord(str):
    """An EFW2 record: exactly 512 characters, record type in columns 1-2."""

    def __new__(cls, data: str) -> FixedWidthRecord:
        if len(data) != RECORD_LENGTH:
            raise InternalLengthInvariantError(data[:2], len(data))
        return super().__new__(cls, data)

    @property
    def record_id(self) -> str:
        return self[:2]

    def column(self, start: int, width: int) -> str:
        """Return the ``width`` characters beginning at 1-indexed ``start``."""
        return self[start - 1:start - 1 + width]


def _flag(value: bool) -> str:
    return "1" if value else "0"


def render(layout: RecordLayout, values: dict[str, Any], encoding: EncodingConfig) -> FixedWidthRecord:
    """Format ``values`` into ``layout`` and return the checked record.

    Text fields absent from ``values`` are left blank and amount fields
    absent from ``values`` are written as zero.
    """
    unknown = set(values) - {spec.name for spec in layout.fields}
    if unknown:
        raise KeyError(f"{layout.record_id} layout has no field(s): {', '.join(sorted(unknown))}")

    pad = encoding.pad_char
    parts: list[str] = []
    column = 1
    for spec in layout.fields:
        if spec.start != column:
            raise InternalLengthInvariantError(
                layout.record_id, column - 1, f"field {spec.name!r} starts at {spec.start}, expected {column}"
            )
        if spec.name == "record_id":
            text = layout.record_id
        elif spec.kind is FieldKind.BLANK:
            text = pad * spec.width
        elif spec.kind is FieldKind.AMOUNT:
            text = format_amount(values.get(spec.name, 0), spec.width, spec.name)
        elif spec.kind is FieldKind.NUMBER:
            text = format_number(values[spec.name], spec.width, spec.name)
        else:
            text = format_text(str(values.get(spec.name, "")), spec.width, pad, spec.name)
        parts.append(text)
        column += spec.width

    return FixedWidthRecord("".join(parts))


def build_ra(employer: EmployerConfig, params: RunParameters, encoding: EncodingConfig) -> FixedWidthRecord:
    """Submitter record. The employer is its own submitter, so its block appears twice."""
    location, delivery = encoding.address_slots(employer.address_1, employer.address_2)
    values: dict[str, Any] = {
        "submitter_ein": employer.ein,
        "user_id": employer.user_id,
        "vendor_code": employer.vendor_code,
        "resub_indicator": _flag(params.is_resubmission),
        "resub_wfid": params.resub_wfid or "",
        "software_code": employer.software_code,
        "contact_name": employer.contact_name,
        "contact_phone": employer.phone,
        "contact_phone_ext": employer.phone_ext,
        "contact_email": employer.email,
        "contact_fax": employer.fax,
        "preparer_code": employer.preparer_code,
    }
    for block in ("company", "submitter"):
        values.update({
            f"{block}_name": employer.company_name,
            f"{block}_location_address": location,
            f"{block}_delivery_address": delivery,
            f"{block}_city": employer.city,
            f"{block}_state": employer.state,
            f"{block}_zip": employer.zip5,
            f"{block}_zip_ext": employer.zip_ext,
        })
    logger.debug("Building RA record (resubmission=%s)", params.is_resubmission)
    return render(RA_LAYOUT, values, encoding)


def build_re(employer: EmployerConfig, params: RunParameters, encoding: EncodingConfig) -> FixedWidthRecord:
    location, delivery = encoding.address_slots(employer.address_1, employer.address_2)
    values = {
        "tax_year": params.tax_year,
        "employer_ein": employer.ein,
        "terminating_business": _flag(params.final_year),
        "employer_name": employer.company_name,
        "location_address": location,
        "delivery_address": delivery,
        "city": employer.city,
        "state": employer.state,
        "zip": employer.zip5,
        "zip_ext": employer.zip_ext,
        "kind_of_employer": employer.kind_of_employer,
        "employment_code": employer.employment_code,
        "third_party_sick_pay": _flag(employer.third_party_sick_pay),
        "contact_name": employer.contact_name,
        "contact_phone": employer.phone,
        "contact_phone_ext": employer.phone_ext,
        "contact_fax": employer.fax,
        "contact_email": employer.email,
    }
    logger.debug("Building RE record for tax year %d", params.tax_year)
    return render(RE_LAYOUT, values, encoding)


def build_rw(record: EmployeeWageRecord, encoding: EncodingConfig) -> FixedWidthRecord:
    """Employee wage record. Benefit-type amount columns are always zero."""
    location, delivery = encoding.address_slots(record.address_1, record.address_2)
    values: dict[str, Any] = {
        "ssn": record.ssn,
        "first_name": record.first_name,
        "middle_name": record.middle_initial,
        "last_name": record.last_name,
        "suffix": record.suffix,
        "location_address": location,
        "delivery_address": delivery,
        "city": record.city,
        "state": record.state,
        "zip": record.zip5,
        "zip_ext": record.zip_ext,
        "statutory_employee": "0",
        "retirement_plan": "0",
        "third_party_sick_pay": "0",
    }
    values.update(record.amounts)
    logger.debug("Building RW record")
    return render(RW_LAYOUT, values, encoding)


def build_rt(totals: RunningTotals, encoding: EncodingConfig) -> FixedWidthRecord:
    values: dict[str, Any] = {"rw_count": totals.count}
    values.update(totals.amounts)
    logger.debug("Building RT record for %d RW records", totals.count)
    return render(RT_LAYOUT, values, encoding)


def build_rf(totals: RunningTotals, encoding: EncodingConfig) -> FixedWidthRecord:
    logger.debug("Building RF record for %d RW records", totals.count)
    return render(RF_LAYOUT, {"rw_count": totals.count}, encoding)
