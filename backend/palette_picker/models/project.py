"""
Palette Picker Backend — Project SQLAlchemy Model
===================================================

What:  ORM model for the `projects` table.
Who:   Used by ProjectService for queries and by Alembic for schema management.

Lifecycle:
    Created by POST /api/v1/projects, read by the project GET endpoints.
    Never updated or deleted through the API.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from palette_picker.database import Base


class Project(Base):
    """A named collection of palettes (linked from palettes.project_id)."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    project_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, project_name='{self.project_name}')>"
