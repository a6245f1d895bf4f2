"""File-backed employee record source (read-only)."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable

import anyio
from pydantic import TypeAdapter, ValidationError

from app.core.config import Settings
from app.models.employee import Employee

logger = logging.getLogger(__name__)

_RECORDS_ADAPTER = TypeAdapter(tuple[Employee, ...])


class EmployeeSourceError(Exception):
    pass


class EmployeeRepository:
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.path: anyio.Path | None = None
        self.cache_ttl: float = 0.0
        self.initialized: bool = False
        self._clock = clock
        self._cached: tuple[Employee, ...] | None = None
        self._cached_at: float = 0.0

    def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEES_DATA_FILE:
            logger.warning("EMPLOYEES_DATA_FILE not set — repository not initialized")
            return

        self.path = anyio.Path(settings.EMPLOYEES_DATA_FILE)
        self.cache_ttl = settings.EMPLOYEES_CACHE_TTL_SECONDS
        self.initialized = True
        logger.info(
            "EmployeeRepository initialized (path=%s, cache_ttl=%.1fs)",
            settings.EMPLOYEES_DATA_FILE,
            self.cache_ttl,
        )

    def close(self) -> None:
        self.invalidate()
        self.path = None
        self.cache_ttl = 0.0
        self.initialized = False

    def invalidate(self) -> None:
        self._cached = None
        self._cached_at = 0.0

    async def load(self) -> tuple[Employee, ...]:
        if not self.initialized or self.path is None:
            raise EmployeeSourceError("Employee repository not initialized")

        if self._cache_is_fresh():
            return self._cached  # type: ignore[return-value]

        records = await self._read(self.path)
        if self.cache_ttl > 0:
            self._cached = records
            self._cached_at = self._clock()
        return records

    async def check_source(self) -> bool:
        try:
            await self.load()
            return True
        except EmployeeSourceError:
            logger.exception("Employee record source check failed")
            return False

    def _cache_is_fresh(self) -> bool:
        if self._cached is None or self.cache_ttl <= 0:
            return False
        return self._clock() - self._cached_at < self.cache_ttl

    async def _read(self, path: anyio.Path) -> tuple[Employee, ...]:
        try:
            contents = await path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EmployeeSourceError(f"Failed to read {path}: {e}") from e

        try:
            raw = json.loads(contents)
        except json.JSONDecodeError as e:
            raise EmployeeSourceError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(raw, list):
            raise EmployeeSourceError(f"Expected a JSON array in {path}, got {type(raw).__name__}")

        try:
            records = _RECORDS_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise EmployeeSourceError(f"Invalid employee record in {path}: {e}") from e

        logger.debug("Loaded %d employees from %s", len(records), path)
        return records


employee_repository = EmployeeRepository()
