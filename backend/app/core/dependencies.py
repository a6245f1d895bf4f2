from __future__ import annotations

from app.core.config import Settings, settings
from app.services.employee_repository import EmployeeRepository, employee_repository


def get_settings() -> Settings:
    return settings


def get_employee_repository() -> EmployeeRepository:
    return employee_repository
