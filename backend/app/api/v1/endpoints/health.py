from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_employee_repository
from app.services.employee_repository import EmployeeRepository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    services: dict[str, str] = {}

    if repository.initialized:
        ok = await repository.check_source()
        services["record_source"] = "ok" if ok else "error"
    else:
        services["record_source"] = "not_configured"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
