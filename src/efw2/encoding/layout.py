"""Declarative EFW2 column layouts.

Each layout lists every column range of its record, blanks included, with
1-indexed start columns taken from the SSA publication. The renderer checks
that each field begins where the previous one ended and that the record
closes at column 512, so a width typo cannot silently shift later fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

RECORD_LENGTH = 512


class FieldKind(StrEnum):
    TEXT = "text"  # normalized, left-justified, pad-filled
    AMOUNT = "amount"  # integer cents, zero-filled; zero when not supplied
    NUMBER = "number"  # integer, zero-filled
    BLANK = "blank"  # pad-filled, never carries data


@dataclass(frozen=True)
class FieldSpec:
    name: str
    start: int
    width: int
    kind: FieldKind = FieldKind.TEXT

    @property
    def end(self) -> int:
        return self.start + self.width - 1


@dataclass(frozen=True)
class RecordLayout:
    record_id: str
    fields: tuple[FieldSpec, ...]

    def __getitem__(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def names(self, kind: FieldKind) -> list[str]:
        return [spec.name for spec in self.fields if spec.kind is kind]


def _layout(record_id: str, *specs: tuple) -> RecordLayout:
    fields = [FieldSpec("record_id", 1, 2)]
    fields.extend(FieldSpec(*spec) for spec in specs)
    return RecordLayout(record_id, tuple(fields))


T, A, N, B = FieldKind.TEXT, FieldKind.AMOUNT, FieldKind.NUMBER, FieldKind.BLANK


RA_LAYOUT = _layout(
    "RA",
    ("submitter_ein", 3, 9),
    ("user_id", 12, 8),
    ("vendor_code", 20, 4),
    ("blank_24", 24, 5, B),
    ("resub_indicator", 29, 1),
    ("resub_wfid", 30, 6),
    ("software_code", 36, 2),
    ("company_name", 38, 57),
    ("company_location_address", 95, 22),
    ("company_delivery_address", 117, 22),
    ("company_city", 139, 22),
    ("company_state", 161, 2),
    ("company_zip", 163, 5),
    ("company_zip_ext", 168, 4),
    ("blank_172", 172, 5, B),
    ("company_foreign_state", 177, 23, B),
    ("company_foreign_postal", 200, 15, B),
    ("company_country", 215, 2, B),
    ("submitter_name", 217, 57),
    ("submitter_location_address", 274, 22),
    ("submitter_delivery_address", 296, 22),
    ("submitter_city", 318, 22),
    ("submitter_state", 340, 2),
    ("submitter_zip", 342, 5),
    ("submitter_zip_ext", 347, 4),
    ("blank_351", 351, 5, B),
    ("submitter_foreign_state", 356, 23, B),
    ("submitter_foreign_postal", 379, 15, B),
    ("submitter_country", 394, 2, B),
    ("contact_name", 396, 27),
    ("contact_phone", 423, 15),
    ("contact_phone_ext", 438, 5),
    ("blank_443", 443, 3, B),
    ("contact_email", 446, 40),
    ("blank_486", 486, 3, B),
    ("contact_fax", 489, 10),
    ("blank_499", 499, 1, B),
    ("preparer_code", 500, 1),
    ("blank_501", 501, 12, B),
)

RE_LAYOUT = _layout(
    "RE",
    ("tax_year", 3, 4, N),
    ("agent_indicator", 7, 1, B),
    ("employer_ein", 8, 9),
    ("agent_for_ein", 17, 9, B),
    ("terminating_business", 26, 1),
    ("establishment_number", 27, 4, B),
    ("other_ein", 31, 9, B),
    ("employer_name", 40, 57),
    ("location_address", 97, 22),
    ("delivery_address", 119, 22),
    ("city", 141, 22),
    ("state", 163, 2),
    ("zip", 165, 5),
    ("zip_ext", 170, 4),
    ("kind_of_employer", 174, 1),
    ("blank_175", 175, 4, B),
    ("foreign_state", 179, 23, B),
    ("foreign_postal", 202, 15, B),
    ("country", 217, 2, B),
    ("employment_code", 219, 1),
    ("tax_jurisdiction", 220, 1, B),
    ("third_party_sick_pay", 221, 1),
    ("contact_name", 222, 27),
    ("contact_phone", 249, 15),
    ("contact_phone_ext", 264, 5),
    ("contact_fax", 269, 10),
    ("contact_email", 279, 40),
    ("blank_319", 319, 194, B),
)

RW_LAYOUT = _layout(
    "RW",
    ("ssn", 3, 9),
    ("first_name", 12, 15),
    ("middle_name", 27, 15),
    ("last_name", 42, 20),
    ("suffix", 62, 4),
    ("location_address", 66, 22),
    ("delivery_address", 88, 22),
    ("city", 110, 22),
    ("state", 132, 2),
    ("zip", 134, 5),
    ("zip_ext", 139, 4),
    ("blank_143", 143, 5, B),
    ("foreign_state", 148, 23, B),
    ("foreign_postal", 171, 15, B),
    ("country", 186, 2, B),
    ("wages", 188, 11, A),
    ("federal_tax", 199, 11, A),
    ("ss_wages", 210, 11, A),
    ("ss_tax", 221, 11, A),
    ("medicare_wages", 232, 11, A),
    ("medicare_tax", 243, 11, A),
    ("ss_tips", 254, 11, A),
    ("reserved_265", 265, 11, A),
    ("dependent_care", 276, 11, A),
    ("deferred_401k", 287, 11, A),
    ("deferred_403b", 298, 11, A),
    ("deferred_408k6", 309, 11, A),
    ("deferred_457b", 320, 11, A),
    ("deferred_501c18d", 331, 11, A),
    ("reserved_342", 342, 11, A),
    ("nonqualified_457", 353, 11, A),
    ("employer_hsa", 364, 11, A),
    ("nonqualified_non_457", 375, 11, A),
    ("combat_pay", 386, 11, A),
    ("reserved_397", 397, 11, A),
    ("group_term_life", 408, 11, A),
    ("stock_options", 419, 11, A),
    ("deferrals_409a", 430, 11, A),
    ("roth_401k", 441, 11, A),
    ("roth_403b", 452, 11, A),
    ("health_coverage", 463, 11, A),
    ("qsehra", 474, 11, A),
    ("blank_485", 485, 1, B),
    ("statutory_employee", 486, 1),
    ("blank_487", 487, 1, B),
    ("retirement_plan", 488, 1),
    ("third_party_sick_pay", 489, 1),
    ("blank_490", 490, 23, B),
)

RT_LAYOUT = _layout(
    "RT",
    ("rw_count", 3, 7, N),
    ("wages", 10, 15, A),
    ("federal_tax", 25, 15, A),
    ("ss_wages", 40, 15, A),
    ("ss_tax", 55, 15, A),
    ("medicare_wages", 70, 15, A),
    ("medicare_tax", 85, 15, A),
    ("ss_tips", 100, 15, A),
    ("reserved_115", 115, 15, A),
    ("dependent_care", 130, 15, A),
    ("deferred_401k", 145, 15, A),
    ("deferred_403b", 160, 15, A),
    ("deferred_408k6", 175, 15, A),
    ("deferred_457b", 190, 15, A),
    ("deferred_501c18d", 205, 15, A),
    ("reserved_220", 220, 15, A),
    ("nonqualified_457", 235, 15, A),
    ("employer_hsa", 250, 15, A),
    ("nonqualified_non_457", 265, 15, A),
    ("combat_pay", 280, 15, A),
    ("health_coverage", 295, 15, A),
    ("group_term_life", 310, 15, A),
    ("sick_pay_withholding", 325, 15, A),
    ("stock_options", 340, 15, A),
    ("deferrals_409a", 355, 15, A),
    ("roth_401k", 370, 15, A),
    ("roth_403b", 385, 15, A),
    ("qsehra", 400, 15, A),
    ("blank_415", 415, 98, B),
)

RF_LAYOUT = _layout(
    "RF",
    ("blank_3", 3, 5, B),
    ("rw_count", 8, 9, N),
    ("blank_17", 17, 496, B),
)

LAYOUTS: dict[str, RecordLayout] = {
    layout.record_id: layout
    for layout in (RA_LAYOUT, RE_LAYOUT, RW_LAYOUT, RT_LAYOUT, RF_LAYOUT)
}
