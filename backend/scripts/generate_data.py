#!/usr/bin/env python3
"""Generate a sample employee data file for the directory API.

Run from the backend/ directory:

    python3 scripts/generate_data.py [--count N] [--seed S] [--output PATH] [--verbose]

Writes a JSON array of employee records in the format the record source
expects (camelCase keys, ``joinDate`` as YYYY-MM-DD).
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import random
import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.models.employee import Employee  # noqa: E402

logger = logging.getLogger(__name__)

DEPARTMENTS = ["Engineering", "Marketing", "Sales", "HR", "Finance", "Operations", "Design", "Customer Success"]

POSITIONS: dict[str, list[str]] = {
    "Engineering": [
        "Senior Developer",
        "Frontend Developer",
        "Backend Developer",
        "Full Stack Developer",
        "DevOps Engineer",
        "Tech Lead",
    ],
    "Marketing": [
        "Marketing Manager",
        "Digital Marketing Specialist",
        "Content Manager",
        "SEO Specialist",
        "Marketing Coordinator",
    ],
    "Sales": [
        "Sales Representative",
        "Sales Manager",
        "Account Executive",
        "Business Development Manager",
        "Sales Coordinator",
    ],
    "HR": ["HR Specialist", "HR Manager", "Recruiter", "HR Coordinator", "People Operations Manager"],
    "Finance": ["Financial Analyst", "Accountant", "Finance Manager", "Controller", "Financial Coordinator"],
    "Operations": [
        "Operations Manager",
        "Project Manager",
        "Operations Coordinator",
        "Process Manager",
        "Operations Analyst",
    ],
    "Design": ["UX Designer", "UI Designer", "Product Designer", "Graphic Designer", "Design Manager"],
    "Customer Success": [
        "Customer Success Manager",
        "Support Specialist",
        "Account Manager",
        "Customer Success Coordinator",
    ],
}

LOCATIONS = [
    "New York",
    "Los Angeles",
    "Chicago",
    "Houston",
    "San Francisco",
    "Boston",
    "Seattle",
    "Austin",
    "Denver",
    "Miami",
]

SKILLS: dict[str, list[str]] = {
    "Engineering": ["JavaScript", "React", "Node.js", "Python", "Java", "TypeScript", "AWS", "Docker", "Kubernetes", "PostgreSQL"],
    "Marketing": ["Digital Marketing", "SEO", "Analytics", "Content Creation", "Social Media", "Email Marketing", "PPC", "Brand Management"],
    "Sales": ["Sales", "CRM", "Communication", "Negotiation", "Lead Generation", "Account Management", "Salesforce", "Cold Calling"],
    "HR": ["Recruitment", "Employee Relations", "Training", "Performance Management", "HRIS", "Compliance", "Benefits Administration"],
    "Finance": ["Excel", "Financial Modeling", "Analysis", "Accounting", "Budgeting", "Forecasting", "QuickBooks", "SAP"],
    "Operations": ["Project Management", "Process Improvement", "Leadership", "Lean Six Sigma", "Supply Chain", "Quality Assurance"],
    "Design": ["Figma", "User Research", "Prototyping", "Adobe Creative Suite", "Sketch", "InVision", "Wireframing", "User Testing"],
    "Customer Success": ["Customer Relations", "Account Management", "Support", "Onboarding", "Retention", "Zendesk", "Communication"],
}

SALARY_RANGES: dict[str, tuple[int, int]] = {
    "Engineering": (70000, 150000),
    "Marketing": (50000, 100000),
    "Sales": (45000, 120000),
    "HR": (45000, 90000),
    "Finance": (55000, 110000),
    "Operations": (60000, 120000),
    "Design": (55000, 105000),
    "Customer Success": (50000, 95000),
}

FIRST_NAMES = [
    "John", "Sarah", "Michael", "Emily", "David", "Lisa", "Robert", "Jennifer", "Christopher", "Amanda",
    "Matthew", "Jessica", "Daniel", "Ashley", "James", "Stephanie", "Ryan", "Nicole", "Andrew", "Elizabeth",
]  # fmt: skip
LAST_NAMES = [
    "Smith", "Johnson", "Brown", "Davis", "Wilson", "Anderson", "Taylor", "Martinez", "Lee", "White",
    "Harris", "Clark", "Lewis", "Robinson", "Walker", "Young", "Allen", "King", "Wright", "Scott",
]  # fmt: skip

JOIN_DATE_START = date(2015, 1, 1)
JOIN_DATE_END = date(2024, 12, 31)
ACTIVE_RATIO = 0.9


def generate_employee(employee_id: int, rng: random.Random) -> dict[str, Any]:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    department = rng.choice(DEPARTMENTS)
    low, high = SALARY_RANGES[department]
    span = (JOIN_DATE_END - JOIN_DATE_START).days
    skills = SKILLS[department]

    return {
        "id": employee_id,
        "name": f"{first} {last}",
        "email": f"{first.lower()}.{last.lower()}{employee_id}@company.com",
        "department": department,
        "position": rng.choice(POSITIONS[department]),
        "salary": rng.randint(low, high),
        "joinDate": (JOIN_DATE_START + timedelta(days=rng.randint(0, span))).isoformat(),
        "status": "Active" if rng.random() < ACTIVE_RATIO else "Inactive",
        "location": rng.choice(LOCATIONS),
        "skills": rng.sample(skills, k=rng.randint(2, min(5, len(skills)))),
    }


def generate_employees(count: int, seed: int | None = None) -> list[dict[str, Any]]:
    rng = random.Random(seed)
    employees = [generate_employee(i, rng) for i in range(1, count + 1)]
    # every generated record must load through the record source
    for raw in employees:
        Employee.model_validate(raw)
    return employees


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a sample employee data file",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1000,
        help="Number of employees to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output path (default: EMPLOYEES_DATA_FILE setting)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def write_employees(path: Path, employees: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(employees, indent=2) + "\n", encoding="utf-8")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    if args.count < 0:
        logger.error("--count must not be negative (got %d)", args.count)
        sys.exit(2)

    output = Path(args.output or Settings().EMPLOYEES_DATA_FILE)
    employees = generate_employees(args.count, args.seed)
    write_employees(output, employees)

    departments = {e["department"] for e in employees}
    logger.info("Generated %d employees across %d departments", len(employees), len(departments))
    logger.info("Data written to %s", output)


if __name__ == "__main__":
    main()
