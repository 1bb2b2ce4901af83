"""
Palette Picker Backend — Palette Route Handlers
=================================================

What:  Palette listing, creation and deletion, plus the per-project listing.

Route Inventory:
    GET    /api/v1/palettes                     all palettes
    POST   /api/v1/palettes                     create (201)
    DELETE /api/v1/palettes/{id}                delete (204, or 404 if absent)
    GET    /api/v1/projects/{id}/palettes       palettes of one project
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.database import get_db_session
from palette_picker.schemas.common import ErrorResponse
from palette_picker.schemas.palette import (
    PALETTE_EXPECTED_FORMAT,
    PALETTE_REQUIRED_FIELDS,
    PaletteCreate,
    PaletteCreatedResponse,
    PaletteResponse,
)
from palette_picker.services.palette_service import palette_service
from palette_picker.services.validation import build_model, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Palettes"])


@router.get(
    "/palettes",
    response_model=List[PaletteResponse],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="List all palettes",
)
async def list_palettes(
    db: AsyncSession = Depends(get_db_session),
) -> List[PaletteResponse]:
    return await palette_service.list_palettes(db=db)


@router.post(
    "/palettes",
    response_model=PaletteCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"description": "A required field is missing", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create a palette",
)
async def create_palette(
    body: Optional[Dict[str, Any]] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> PaletteCreatedResponse:
    """
    Create a palette from a name and five colours.

    Required fields are checked in order (palette_name, color1..color5) and
    the first missing one is reported. `project_id` may be included to
    attach the palette to a project; it is stored but not echoed back.
    """
    require_fields(body, PALETTE_REQUIRED_FIELDS, PALETTE_EXPECTED_FORMAT)
    payload = build_model(PaletteCreate, body)
    return await palette_service.create_palette(db=db, payload=payload)


@router.delete(
    "/palettes/{palette_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        404: {"description": "No palette with this id", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Delete a palette",
)
async def delete_palette(
    palette_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await palette_service.delete_palette(db=db, palette_id=palette_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/projects/{project_id}/palettes",
    response_model=List[PaletteResponse],
    responses={
        404: {"description": "The project has no palettes", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List the palettes of a project",
)
async def list_project_palettes(
    project_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[PaletteResponse]:
    return await palette_service.list_project_palettes(db=db, project_id=project_id)
