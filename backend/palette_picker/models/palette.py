"""
Palette Picker Backend — Palette SQLAlchemy Model
===================================================

What:  ORM model for the `palettes` table: a name plus five colour strings,
       optionally attached to a project.
Who:   Used by PaletteService for queries and by Alembic for schema management.

Query Patterns:
    - All palettes:          SELECT ... FROM palettes
    - Palettes of a project: SELECT ... WHERE project_id = :id
      → Uses idx_palettes_project_id
    - Delete by id:          DELETE ... WHERE id = :id
      → Uses the primary key

The foreign key has no ON DELETE rule: removing a project row would not
remove its palettes.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from palette_picker.database import Base

COLOR_FIELDS = ("color1", "color2", "color3", "color4", "color5")


class Palette(Base):
    """
    A five-colour palette.

    Colour columns hold whatever representation the client submitted
    (typically hex strings such as "#F2A541"); they are not format-checked.
    """

    __tablename__ = "palettes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Nullable: a palette may be saved without a project.
    project_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("projects.id"),
        nullable=True,
    )

    palette_name: Mapped[str] = mapped_column(String(255), nullable=False)
    color1: Mapped[str] = mapped_column(String(255), nullable=False)
    color2: Mapped[str] = mapped_column(String(255), nullable=False)
    color3: Mapped[str] = mapped_column(String(255), nullable=False)
    color4: Mapped[str] = mapped_column(String(255), nullable=False)
    color5: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index("idx_palettes_project_id", "project_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Palette(id={self.id}, project_id={self.project_id}, "
            f"palette_name='{self.palette_name}')>"
        )
