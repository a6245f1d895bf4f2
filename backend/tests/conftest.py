from __future__ import annotations

import json
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.config import Settings
from app.core.dependencies import get_employee_repository
from app.main import app
from app.models.employee import Employee
from app.services.employee_repository import EmployeeRepository

SAMPLE_EMPLOYEES: list[dict] = [
    {
        "id": 1,
        "name": "John Doe",
        "email": "john.doe@example.com",
        "department": "Engineering",
        "position": "Senior Developer",
        "salary": 95000,
        "joinDate": "2022-01-15",
        "status": "Active",
        "location": "New York",
        "skills": ["JavaScript", "React", "Node.js"],
    },
    {
        "id": 2,
        "name": "Jane Smith",
        "email": "jane.smith@example.com",
        "department": "Marketing",
        "position": "Marketing Manager",
        "salary": 78000,
        "joinDate": "2021-06-20",
        "status": "Active",
        "location": "Los Angeles",
        "skills": ["Digital Marketing", "SEO", "Analytics"],
    },
]


def make_employee(**overrides) -> Employee:
    data = {**SAMPLE_EMPLOYEES[0], **overrides}
    return Employee.model_validate(data)


def write_employees(path: Path, records: list[dict] | str) -> Path:
    path.write_text(records if isinstance(records, str) else json.dumps(records), encoding="utf-8")
    return path


def make_repository(path: Path, cache_ttl: float = 0.0, **kwargs) -> EmployeeRepository:
    repository = EmployeeRepository(**kwargs)
    repository.initialize(Settings(EMPLOYEES_DATA_FILE=str(path), EMPLOYEES_CACHE_TTL_SECONDS=cache_ttl))
    return repository


@pytest.fixture
def sample_employees() -> list[Employee]:
    return [Employee.model_validate(raw) for raw in SAMPLE_EMPLOYEES]


@pytest.fixture
def employees_file(tmp_path) -> Path:
    return write_employees(tmp_path / "employees.json", SAMPLE_EMPLOYEES)


@pytest.fixture
def repository(employees_file) -> EmployeeRepository:
    return make_repository(employees_file)


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_employee_repository] = lambda: repository
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(tmp_path):
    missing = make_repository(tmp_path / "missing.json")
    app.dependency_overrides[get_employee_repository] = lambda: missing
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(repository):
    app.dependency_overrides[get_employee_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
