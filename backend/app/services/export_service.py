from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from app.models.employee import DateRange, Employee, ExportSummary

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "ID",
    "Name",
    "Email",
    "Department",
    "Position",
    "Salary",
    "Join Date",
    "Status",
    "Location",
    "Skills",
]

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
UTF8_BOM = "\ufeff"
_NEEDS_QUOTING = (",", '"', "\r", "\n")


class ExportFormat(str, Enum):
    CSV = "csv"
    EXCEL = "excel"


class UnsupportedExportFormatError(Exception):
    pass


@dataclass(frozen=True)
class ExportFile:
    content: str
    filename: str
    media_type: str = CSV_MEDIA_TYPE


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _row(employee: Employee) -> list[str]:
    return [
        str(employee.id),
        employee.name,
        employee.email,
        employee.department,
        employee.position,
        _format_number(employee.salary),
        employee.join_date.isoformat(),
        employee.status,
        employee.location,
        "; ".join(employee.skills),
    ]


def _escape(field: str) -> str:
    if any(ch in field for ch in _NEEDS_QUOTING):
        return '"' + field.replace('"', '""') + '"'
    return field


def _line(fields: list[str]) -> str:
    return ",".join(_escape(field) for field in fields)


def to_csv(employees: Sequence[Employee], include_headers: bool = True) -> str:
    lines = [_line(CSV_HEADERS)] if include_headers else []
    lines.extend(_line(_row(employee)) for employee in employees)
    return "\n".join(lines)


def to_excel(employees: Sequence[Employee], include_headers: bool = True) -> str:
    """CSV with a UTF-8 byte-order mark so spreadsheet apps pick the right encoding."""
    return UTF8_BOM + to_csv(employees, include_headers)


def _coerce_format(fmt: ExportFormat | str) -> ExportFormat:
    try:
        return ExportFormat(fmt)
    except ValueError as e:
        raise UnsupportedExportFormatError(f"Unsupported export format: {fmt}") from e


def generate_filename(
    fmt: ExportFormat | str,
    prefix: str = "employees",
    now: datetime | None = None,
) -> str:
    _coerce_format(fmt)
    moment = now or datetime.now(timezone.utc)
    timestamp = moment.isoformat()[:19].replace(":", "-").replace(".", "-")
    # Excel exports are CSV too
    return f"{prefix}_{timestamp}.csv"


def render_export(
    employees: Sequence[Employee],
    fmt: ExportFormat | str,
    *,
    filename: str | None = None,
    include_headers: bool = True,
    prefix: str = "employees",
) -> ExportFile:
    export_format = _coerce_format(fmt)

    if export_format is ExportFormat.CSV:
        content = to_csv(employees, include_headers)
    else:
        content = to_excel(employees, include_headers)

    final_name = filename or generate_filename(export_format, prefix=prefix)
    logger.info("Rendered %s export: %d records as %s", export_format.value, len(employees), final_name)
    return ExportFile(content=content, filename=final_name)


def export_summary(employees: Sequence[Employee]) -> ExportSummary:
    if not employees:
        return ExportSummary(total_records=0, departments=[], date_range=None)

    join_dates = sorted(e.join_date for e in employees)
    return ExportSummary(
        total_records=len(employees),
        departments=sorted({e.department for e in employees}),
        date_range=DateRange(
            earliest=join_dates[0].isoformat(),
            latest=join_dates[-1].isoformat(),
        ),
    )
