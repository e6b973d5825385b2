"""Shared test doubles — factories for employers, employees and input files."""

from __future__ import annotations

import csv
import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from efw2.models.employer import EmployerConfig
from efw2.models.wage_record import EmployeeWageRecord

EMPLOYER_DATA: dict[str, Any] = {
    "ein": "12-3456789",
    "user_id": "ABCDEFGH",
    "vendor_code": "",
    "company_name": "Acme Widgets LLC",
    "address_1": "100 Main St",
    "address_2": "Suite 200",
    "city": "Springfield",
    "state": "IL",
    "zip": "62701-1234",
    "contact_name": "Pat Doe",
    "phone": "(217) 555-0100",
    "email": "payroll@acme.example.com",
    "fax": "2175550199",
}

EMPLOYEE_DATA: dict[str, Any] = {
    "ssn": "123-45-6789",
    "first_name": "Jane",
    "middle_initial": "Q",
    "last_name": "Public",
    "suffix": "",
    "address_1": "42 Elm St",
    "address_2": "Apt 3",
    "city": "Springfield",
    "state": "IL",
    "zip": "62704",
    "wages": Decimal("50000.00"),
    "federal_tax": Decimal("6000.00"),
    "ss_wages": Decimal("50000.00"),
    "ss_tax": Decimal("3100.00"),
    "medicare_wages": Decimal("50000.00"),
    "medicare_tax": Decimal("725.00"),
    "ss_tips": Decimal("0"),
    "taxing_state": "IL",
    "state_id": "1234567",
    "state_wages": Decimal("50000.00"),
    "state_tax": Decimal("2475.00"),
}


def make_employer(**overrides: Any) -> EmployerConfig:
    return EmployerConfig(**{**EMPLOYER_DATA, **overrides})


def make_employee(**overrides: Any) -> EmployeeWageRecord:
    return EmployeeWageRecord(**{**EMPLOYEE_DATA, **overrides})


def write_config(directory: Path, name: str = "efw2.json", **overrides: Any) -> Path:
    path = directory / name
    path.write_text(json.dumps({**EMPLOYER_DATA, **overrides}))
    return path


def write_wage_csv(directory: Path, rows: list[dict[str, Any]], name: str = "wages.csv") -> Path:
    path = directory / name
    fieldnames = list(EMPLOYEE_DATA)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow({k: str(v) for k, v in {**EMPLOYEE_DATA, **row}.items()})
    return path


__all__ = [
    "EMPLOYEE_DATA",
    "EMPLOYER_DATA",
    "make_employee",
    "make_employer",
    "write_config",
    "write_wage_csv",
]
