"""Tests for the CSV wage file parser."""

from __future__ import annotations

from decimal import Decimal

import pytest

from efw2.core.config import EncodingConfig
from efw2.core.exceptions import InputParseError
from efw2.encoding.records import build_rw
from efw2.ingest.file_parser import read_wage_records
from tests.fakes import EMPLOYEE_DATA, write_wage_csv


def test_reads_rows_in_order(tmp_path):
    path = write_wage_csv(tmp_path, [
        {"ssn": "111-11-1111", "wages": "1000.00"},
        {"ssn": "222-22-2222", "wages": "2,000.50"},
    ])
    records = read_wage_records(path)
    assert [r.ssn for r in records] == ["111111111", "222222222"]
    assert records[1].wages == Decimal("2000.50")


def test_empty_file_with_header_yields_no_records(tmp_path):
    path = write_wage_csv(tmp_path, [])
    assert read_wage_records(path) == []


def test_blank_optional_amount(tmp_path):
    path = write_wage_csv(tmp_path, [{"ss_tips": ""}])
    assert read_wage_records(path)[0].ss_tips == Decimal("0")


def test_utf8_bom_header(tmp_path):
    path = tmp_path / "bom.csv"
    header = ",".join(EMPLOYEE_DATA)
    row = ",".join(str(v) for v in EMPLOYEE_DATA.values())
    path.write_text(f"{header}\n{row}\n", encoding="utf-8-sig")
    assert read_wage_records(path)[0].ssn == "123456789"


def test_unsupported_extension(tmp_path):
    path = tmp_path / "wages.xlsx"
    path.write_bytes(b"")
    with pytest.raises(InputParseError, match="Unsupported"):
        read_wage_records(path)


def test_missing_file(tmp_path):
    with pytest.raises(InputParseError, match="Cannot read"):
        read_wage_records(tmp_path / "absent.csv")


def test_bad_row_reports_row_number(tmp_path):
    path = write_wage_csv(tmp_path, [{}, {"ssn": "12345"}])
    with pytest.raises(InputParseError) as excinfo:
        read_wage_records(path)
    assert excinfo.value.row_number == 2
    assert "ssn" in str(excinfo.value)


def test_missing_required_column(tmp_path):
    path = tmp_path / "wages.csv"
    path.write_text("ssn,first_name,last_name\n123456789,Jane,Doe\n")
    with pytest.raises(InputParseError) as excinfo:
        read_wage_records(path)
    assert excinfo.value.row_number == 1
    assert "wages" in str(excinfo.value)


def test_extra_values_rejected(tmp_path):
    path = tmp_path / "wages.csv"
    header = ",".join(EMPLOYEE_DATA)
    row = ",".join(str(v) for v in EMPLOYEE_DATA.values())
    path.write_text(f"{header}\n{row},unexpected\n")
    with pytest.raises(InputParseError, match="more values"):
        read_wage_records(path)


def test_multiline_cells_do_not_break_records(tmp_path):
    path = write_wage_csv(tmp_path, [{"address_1": "42 Elm St\nBldg 7", "first_name": "Ja\tne"}])
    record = read_wage_records(path)[0]
    assert record.address_1 == "42 Elm St\nBldg 7"

    rw = build_rw(record, EncodingConfig())
    assert "\n" not in rw
    assert "\t" not in rw
    assert rw.column(12, 15) == "JA NE".ljust(15)
    assert rw.column(88, 22) == "42 ELM ST BLDG 7".ljust(22)
