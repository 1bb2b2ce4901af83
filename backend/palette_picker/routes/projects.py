"""
Palette Picker Backend — Project Route Handlers
=================================================

What:  GET/POST /api/v1/projects and GET /api/v1/projects/{id}.
How:   Check the body (POST only), delegate to ProjectService, let the
       global exception handlers map failures to 404 / 422 / 500.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.database import get_db_session
from palette_picker.schemas.common import ErrorResponse
from palette_picker.schemas.project import (
    PROJECT_EXPECTED_FORMAT,
    PROJECT_REQUIRED_FIELDS,
    ProjectCreate,
    ProjectResponse,
)
from palette_picker.services.project_service import project_service
from palette_picker.services.validation import build_model, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Projects"])


@router.get(
    "/projects",
    response_model=List[ProjectResponse],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all projects",
)
async def list_projects(
    db: AsyncSession = Depends(get_db_session),
) -> List[ProjectResponse]:
    return await project_service.list_projects(db=db)


@router.post(
    "/projects",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"description": "project_name missing", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a project",
)
async def create_project(
    body: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> ProjectResponse:
    """
    Create a project from `{ "project_name": "..." }`.

    Responds 201 with `{ "id": <generated>, "project_name": "..." }`.
    """
    require_fields(body, PROJECT_REQUIRED_FIELDS, PROJECT_EXPECTED_FORMAT)
    payload = build_model(ProjectCreate, body)
    return await project_service.create_project(db=db, payload=payload)


@router.get(
    "/projects/{project_id}",
    response_model=List[ProjectResponse],
    responses={
        404: {"description": "No project with this id", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Get a project by id",
    description="Answers with an array holding the matching project.",
)
async def get_project(
    project_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[ProjectResponse]:
    return await project_service.get_project(db=db, project_id=project_id)
