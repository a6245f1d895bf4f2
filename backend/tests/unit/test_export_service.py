from __future__ import annotations

import csv
import io
from datetime import datetime, timezone

import pytest

from app.services.export_service import (
    CSV_HEADERS,
    ExportFormat,
    UnsupportedExportFormatError,
    export_summary,
    generate_filename,
    render_export,
    to_csv,
    to_excel,
)
from tests.conftest import make_employee

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc)


def test_to_csv_header_and_rows(sample_employees):
    lines = to_csv(sample_employees).split("\n")

    assert lines[0] == "ID,Name,Email,Department,Position,Salary,Join Date,Status,Location,Skills"
    assert lines[1] == (
        "1,John Doe,john.doe@example.com,Engineering,Senior Developer,95000,2022-01-15,Active,New York,"
        "JavaScript; React; Node.js"
    )
    assert len(lines) == 3


def test_to_csv_without_headers(sample_employees):
    lines = to_csv(sample_employees, include_headers=False).split("\n")

    assert len(lines) == 2
    assert lines[0].startswith("1,John Doe,")


def test_to_csv_empty():
    assert to_csv([]) == ",".join(CSV_HEADERS)
    assert to_csv([], include_headers=False) == ""


def test_to_csv_escapes_special_characters():
    employee = make_employee(name='Doe, John "JD"', position="Lead\nDeveloper")

    row = to_csv([employee], include_headers=False)

    assert '"Doe, John ""JD"""' in row
    assert '"Lead\nDeveloper"' in row


def test_to_csv_quotes_bare_carriage_return():
    row = to_csv([make_employee(name="a\rb")], include_headers=False)

    assert row.startswith('1,"a\rb",')
    assert next(csv.reader(io.StringIO(row), strict=True))[1] == "a\rb"


def test_to_csv_round_trips_field_values():
    employees = [
        make_employee(id=7, name='O"Brien, Pat', skills=["C, C++", 'say "hi"']),
        make_employee(id=8, name="Plain Name", position="Line one\nLine two", salary=1234.5),
    ]

    rows = list(csv.reader(io.StringIO(to_csv(employees))))

    assert rows[0] == CSV_HEADERS
    assert rows[1][0] == "7"
    assert rows[1][1] == 'O"Brien, Pat'
    assert rows[1][9] == 'C, C++; say "hi"'
    assert rows[2][4] == "Line one\nLine two"
    assert rows[2][5] == "1234.5"


def test_to_excel_prefixes_bom(sample_employees):
    content = to_excel(sample_employees)

    assert content.startswith("\ufeff")
    assert content[1:] == to_csv(sample_employees)


def test_generate_filename_pattern():
    assert generate_filename("csv", now=FIXED_NOW) == "employees_2024-03-05T14-07-09.csv"
    assert generate_filename(ExportFormat.EXCEL, prefix="staff", now=FIXED_NOW) == "staff_2024-03-05T14-07-09.csv"


def test_generate_filename_rejects_unknown_format():
    with pytest.raises(UnsupportedExportFormatError):
        generate_filename("pdf", now=FIXED_NOW)


def test_render_export_csv(sample_employees):
    export = render_export(sample_employees, "csv", filename="out.csv")

    assert export.filename == "out.csv"
    assert export.content == to_csv(sample_employees)
    assert export.media_type.startswith("text/csv")


def test_render_export_excel_generates_filename(sample_employees):
    export = render_export(sample_employees, ExportFormat.EXCEL, prefix="team")

    assert export.content.startswith("\ufeff")
    assert export.filename.startswith("team_")
    assert export.filename.endswith(".csv")


def test_render_export_unsupported_format(sample_employees):
    with pytest.raises(UnsupportedExportFormatError, match="Unsupported export format: xml"):
        render_export(sample_employees, "xml")


def test_export_summary(sample_employees):
    summary = export_summary(sample_employees)

    assert summary.total_records == 2
    assert summary.departments == ["Engineering", "Marketing"]
    assert summary.date_range is not None
    assert summary.date_range.earliest == "2021-06-20"
    assert summary.date_range.latest == "2022-01-15"


def test_export_summary_empty():
    summary = export_summary([])

    assert summary.total_records == 0
    assert summary.departments == []
    assert summary.date_range is None


def test_export_summary_reports_date_range_as_iso_dates():
    employees = [make_employee(joinDate="2020-10-01"), make_employee(joinDate="2020-09-30")]

    summary = export_summary(employees)

    assert summary.date_range.earliest == "2020-09-30"
    assert summary.date_range.latest == "2020-10-01"
