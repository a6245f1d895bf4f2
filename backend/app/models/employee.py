"""Employee directory models (records, queries and response envelopes)."""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SortOrder = Literal["asc", "desc"]


class Employee(BaseModel):
    """A single, immutable employee record from the record source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    email: str
    department: str
    position: str
    salary: int | float
    join_date: date = Field(alias="joinDate")
    status: Literal["Active", "Inactive"]
    location: str
    skills: tuple[str, ...] = ()


class EmployeeQuery(BaseModel):
    """Normalized query parameters; every field already holds a usable value."""

    model_config = ConfigDict(frozen=True)

    query: str | None = None
    department: str | None = None
    status: str | None = None
    location: str | None = None
    sort_by: str | None = None
    sort_order: SortOrder = "asc"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)


class EmployeePage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[Employee]
    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")


class ExportFilters(BaseModel):
    """Filter parameters echoed back by the export endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    query: str | None = None
    department: str | None = None
    status: str | None = None
    location: str | None = None
    sort_by: str | None = Field(default=None, alias="sortBy")
    sort_order: SortOrder = Field(default="asc", alias="sortOrder")


class EmployeeExport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    data: list[Employee]
    total: int
    filters: ExportFilters
    exported_at: str = Field(alias="exportedAt")


class DateRange(BaseModel):
    earliest: str
    latest: str


class ExportSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_records: int = Field(alias="totalRecords")
    departments: list[str] = []
    date_range: DateRange | None = Field(default=None, alias="dateRange")


class FilterOptions(BaseModel):
    """Distinct values available for the categorical filters."""

    departments: list[str] = []
    statuses: list[str] = []
    locations: list[str] = []
