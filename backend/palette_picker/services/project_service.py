"""
Palette Picker Backend — Project Service
==========================================

What:  Query logic behind the /api/v1/projects endpoints.
How:   One SQL statement per operation, issued through the session passed
       in by the caller.
Who:   Called by routes/projects.py.

Error Handling:
    SQLAlchemy failures are wrapped in DatabaseError (→ 500). An empty
    lookup raises NotFoundError (→ 404). Nothing else is caught here.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from palette_picker.exceptions import DatabaseError, NotFoundError
from palette_picker.models.project import Project
from palette_picker.schemas.project import ProjectCreate, ProjectResponse

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Stateless service for project rows; the session is an argument to each call.
    """

    async def list_projects(self, db: AsyncSession) -> List[ProjectResponse]:
        """
        Fetch every project.

        Query: SELECT * FROM projects ORDER BY id
        """
        try:
            result = await db.execute(select(Project).order_by(Project.id))
            projects = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing projects: %s", str(e))
            raise DatabaseError(message="Could not list projects", original=e) from e

        return [ProjectResponse.model_validate(project) for project in projects]

    async def create_project(
        self,
        db: AsyncSession,
        payload: ProjectCreate,
    ) -> ProjectResponse:
        """
        Insert a project and return it with its generated id.

        Args:
            db: Async database session
            payload: Body already checked for a non-empty project_name

        Raises:
            DatabaseError: The insert failed
        """
        project = Project(project_name=payload.project_name)
        try:
            db.add(project)
            await db.flush()  # Assigns the generated id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating project: %s", str(e))
            raise DatabaseError(message="Could not create project", original=e) from e

        logger.info("Project %s created", project.id)
        return ProjectResponse(id=project.id, project_name=payload.project_name)

    async def get_project(self, db: AsyncSession, project_id: int) -> List[ProjectResponse]:
        """
        Fetch the rows whose id matches ``project_id``.

        Returns a list (at most one element, since id is the primary key)
        because the endpoint has always answered with an array.

        Raises:
            NotFoundError: No project has this id
            DatabaseError: Query execution failed
        """
        try:
            result = await db.execute(select(Project).where(Project.id == project_id))
            projects = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error fetching project %s: %s", project_id, str(e))
            raise DatabaseError(message="Could not fetch project", original=e) from e

        if not projects:
            raise NotFoundError(resource="project", resource_id=project_id)

        return [ProjectResponse.model_validate(project) for project in projects]


# ── Singleton Instance ────────────────────────────────────────────────────
project_service = ProjectService()
