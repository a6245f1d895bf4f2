"""Filter, sort and paginate employee records.

Every function here is pure: the input sequence is never mutated and the
same records and query always produce the same result.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

from app.models.employee import Employee, EmployeePage, EmployeeQuery, FilterOptions, SortOrder

logger = logging.getLogger(__name__)

# Wire name -> attribute name. ``skills`` is not sortable.
SORTABLE_FIELDS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "email": "email",
    "department": "department",
    "position": "position",
    "salary": "salary",
    "joinDate": "join_date",
    "join_date": "join_date",
    "status": "status",
    "location": "location",
}

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_positive_int(value: object) -> int | None:
    """Parse the leading integer of ``value`` the way ``parseInt`` does."""
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    parsed = int(match.group(1))
    return parsed if parsed > 0 else None


def _clean(value: object) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text != "" else None


def parse_employee_query(
    params: Mapping[str, Any],
    *,
    default_sort_by: str | None = "id",
    default_limit: int = 10,
    max_limit: int | None = None,
) -> EmployeeQuery:
    page = _parse_positive_int(params.get("page")) or 1
    limit = _parse_positive_int(params.get("limit")) or default_limit
    if max_limit is not None:
        limit = min(limit, max_limit)

    raw_order = _clean(params.get("sortOrder"))
    sort_order: SortOrder = "desc" if raw_order and raw_order.lower() == "desc" else "asc"

    return EmployeeQuery(
        query=_clean(params.get("query")),
        department=_clean(params.get("department")),
        status=_clean(params.get("status")),
        location=_clean(params.get("location")),
        sort_by=_clean(params.get("sortBy")) or default_sort_by,
        sort_order=sort_order,
        page=page,
        limit=max(1, limit),
    )


def _matches_text(employee: Employee, needle: str) -> bool:
    fields = (
        employee.name,
        employee.email,
        employee.department,
        employee.position,
        employee.location,
        *employee.skills,
    )
    return any(needle in field.casefold() for field in fields)


def filter_employees(records: Sequence[Employee], query: EmployeeQuery) -> list[Employee]:
    needle = query.query.casefold() if query.query else None

    def _passes(employee: Employee) -> bool:
        if needle is not None and not _matches_text(employee, needle):
            return False
        if query.department and employee.department != query.department:
            return False
        if query.status and employee.status != query.status:
            return False
        if query.location and employee.location != query.location:
            return False
        return True

    return [employee for employee in records if _passes(employee)]


def _sort_key(attribute: str):
    def _key(employee: Employee) -> Any:
        value = getattr(employee, attribute)
        if isinstance(value, str):
            return value.casefold()
        return value

    return _key


def sort_employees(
    records: Sequence[Employee],
    sort_by: str | None,
    sort_order: SortOrder = "asc",
) -> list[Employee]:
    attribute = SORTABLE_FIELDS.get(sort_by) if sort_by else None
    if attribute is None:
        if sort_by:
            logger.debug("Ignoring unknown sort field %r", sort_by)
        return list(records)

    # sorted() is stable and keeps equal keys in input order with reverse=True too
    return sorted(records, key=_sort_key(attribute), reverse=sort_order == "desc")


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total else 0


def paginate(records: Sequence[Employee], page: int, limit: int) -> list[Employee]:
    start = (page - 1) * limit
    return list(records[start : start + limit])


def select_employees(records: Sequence[Employee], query: EmployeeQuery) -> list[Employee]:
    """Filter and sort without pagination."""
    return sort_employees(filter_employees(records, query), query.sort_by, query.sort_order)


def run_query(records: Sequence[Employee], query: EmployeeQuery) -> EmployeePage:
    selected = select_employees(records, query)
    total = len(selected)
    return EmployeePage(
        data=paginate(selected, query.page, query.limit),
        total=total,
        page=query.page,
        limit=query.limit,
        total_pages=total_pages(total, query.limit),
    )


def collect_filter_options(records: Sequence[Employee]) -> FilterOptions:
    return FilterOptions(
        departments=sorted({e.department for e in records}),
        statuses=sorted({e.status for e in records}),
        locations=sorted({e.location for e in records}),
    )
