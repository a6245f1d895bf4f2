from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.core.config import settings
from app.services.employee_repository import employee_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        employee_repository.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeRepository — continuing without records")
    yield
    employee_repository.close()


app = FastAPI(
    title="Employee Directory API",
    description="Search, filter, sort, paginate and export employee records",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Directory API"}
