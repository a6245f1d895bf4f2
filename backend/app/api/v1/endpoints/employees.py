from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from app.core.config import Settings
from app.core.dependencies import get_employee_repository, get_settings
from app.models.employee import (
    EmployeeExport,
    EmployeePage,
    EmployeeQuery,
    ExportFilters,
    ExportSummary,
    FilterOptions,
)
from app.services.employee_query import (
    collect_filter_options,
    parse_employee_query,
    run_query,
    select_employees,
)
from app.services.employee_repository import EmployeeRepository
from app.services.export_service import (
    UnsupportedExportFormatError,
    export_summary,
    render_export,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

FETCH_ERROR = "Failed to fetch employees"
EXPORT_ERROR = "Failed to export employee data"


def _query_from_request(request: Request, settings: Settings) -> EmployeeQuery:
    # Raw query string; page/limit never fail validation. A repeated key keeps its first value.
    params = {key: request.query_params.getlist(key)[0] for key in request.query_params.keys()}
    return parse_employee_query(
        params,
        default_sort_by=settings.DEFAULT_SORT_BY,
        default_limit=settings.DEFAULT_PAGE_SIZE,
        max_limit=settings.MAX_PAGE_SIZE,
    )


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("", response_model=EmployeePage)
async def list_employees(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
):
    query = _query_from_request(request, settings)
    try:
        records = await repository.load()
    except Exception:
        logger.exception("Failed to list employees")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": FETCH_ERROR},
        )

    return run_query(records, query)


@router.get("/filters", response_model=FilterOptions)
async def list_filter_options(
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
):
    try:
        records = await repository.load()
    except Exception:
        logger.exception("Failed to collect filter options")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": FETCH_ERROR},
        )

    return collect_filter_options(records)


@router.get("/export", response_model=EmployeeExport, response_model_exclude_none=True)
async def export_employees(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
):
    query = _query_from_request(request, settings)
    try:
        records = await repository.load()
    except Exception as err:
        logger.exception("Export failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": EXPORT_ERROR, "message": str(err) or "Unknown error"},
        )

    selected = select_employees(records, query)
    logger.info("Exporting %d employees", len(selected))
    return EmployeeExport(
        data=selected,
        total=len(selected),
        filters=ExportFilters(
            query=query.query,
            department=query.department,
            status=query.status,
            location=query.location,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
        ),
        exported_at=_utc_timestamp(),
    )


@router.get("/export/download")
async def download_employees(
    request: Request,
    format: str = "csv",  # noqa: A002
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
):
    query = _query_from_request(request, settings)
    try:
        records = await repository.load()
    except Exception:
        logger.exception("Export download failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": EXPORT_ERROR},
        )

    try:
        export = render_export(
            select_employees(records, query),
            format,
            prefix=settings.EXPORT_FILENAME_PREFIX,
        )
    except UnsupportedExportFormatError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/export/summary", response_model=ExportSummary)
async def summarize_export(
    request: Request,
    repository: EmployeeRepository = Depends(get_employee_repository),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
):
    query = _query_from_request(request, settings)
    try:
        records = await repository.load()
    except Exception:
        logger.exception("Export summary failed")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": EXPORT_ERROR},
        )

    return export_summary(select_employees(records, query))
