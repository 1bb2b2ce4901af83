"""
Palette Picker Backend — Palette Service
==========================================

What:  Query logic behind the /api/v1/palettes endpoints and the
       per-project palette listing.
How:   One SQL statement per operation through the caller's session.
Who:   Called by routes/palettes.py.

Delete semantics:
    DELETE ... WHERE id = :id reports the number of affected rows. Zero
    rows means the palette did not exist and is a NotFoundError, never a
    successful no-op.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.exceptions import DatabaseError, NotFoundError
from palette_picker.models.palette import Palette
from palette_picker.schemas.palette import (
    PaletteCreate,
    PaletteCreatedResponse,
    PaletteResponse,
)

logger = logging.getLogger(__name__)


class PaletteService:

    async def list_palettes(self, db: AsyncSession) -> List[PaletteResponse]:
        """Fetch every palette, ordered by id."""
        try:
            result = await db.execute(select(Palette).order_by(Palette.id))
            palettes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing palettes: %s", str(e))
            raise DatabaseError(message="Could not list palettes", original=e) from e

        return [PaletteResponse.model_validate(palette) for palette in palettes]

    async def create_palette(
        self,
        db: AsyncSession,
        payload: PaletteCreate,
    ) -> PaletteCreatedResponse:
        """
        Insert a palette and return it with its generated id.

        project_id is stored when given but is not part of the response.
        A project_id naming no project fails on the foreign key (→ 500) on
        databases that enforce it.
        """
        palette = Palette(**payload.model_dump())
        try:
            db.add(palette)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating palette: %s", str(e))
            raise DatabaseError(message="Could not create palette", original=e) from e

        logger.info("Palette %s created (project_id=%s)", palette.id, payload.project_id)
        return PaletteCreatedResponse(
            id=palette.id,
            **payload.model_dump(exclude={"project_id"}),
        )

    async def delete_palette(self, db: AsyncSession, palette_id: int) -> None:
        """
        Delete the palette with ``palette_id``.

        Raises:
            NotFoundError: The delete affected no rows
            DatabaseError: Statement execution failed
        """
        try:
            result = await db.execute(delete(Palette).where(Palette.id == palette_id))
            deleted = result.rowcount
            if deleted:
                await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting palette %s: %s", palette_id, str(e))
            raise DatabaseError(message="Could not delete palette", original=e) from e

        if not deleted:
            raise NotFoundError(resource="palette", resource_id=palette_id)

        logger.info("Palette %s deleted", palette_id)

    async def list_project_palettes(
        self,
        db: AsyncSession,
        project_id: int,
    ) -> List[PaletteResponse]:
        """
        Fetch the palettes attached to ``project_id``.

        Raises:
            NotFoundError: The project has no palettes (or does not exist).
                The message reads "Could not find palette with id <project_id>",
                the wording existing clients match on.
            DatabaseError: Query execution failed
        """
        try:
            result = await db.execute(
                select(Palette)
                .where(Palette.project_id == project_id)
                .order_by(Palette.id)
            )
            palettes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(
                "Database error listing palettes for project %s: %s", project_id, str(e)
            )
            raise DatabaseError(message="Could not list project palettes", original=e) from e

        if not palettes:
            raise NotFoundError(resource="palette", resource_id=project_id)

        return [PaletteResponse.model_validate(palette) for palette in palettes]


# ── Singleton Instance ────────────────────────────────────────────────────
palette_service = PaletteService()
