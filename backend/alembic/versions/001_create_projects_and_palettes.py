"""Create projects and palettes tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `projects` and `palettes`, linked by palettes.project_id.
How:   Integer identity primary keys; project_id is a nullable foreign key
       with no ON DELETE rule.

Rollback: downgrade() drops both tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "palettes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("project_id", sa.Integer(), nullable=True),
        sa.Column("palette_name", sa.String(255), nullable=False),
        sa.Column("color1", sa.String(255), nullable=False),
        sa.Column("color2", sa.String(255), nullable=False),
        sa.Column("color3", sa.String(255), nullable=False),
        sa.Column("color4", sa.String(255), nullable=False),
        sa.Column("color5", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
    )

    # Serves GET /api/v1/projects/{id}/palettes
    op.create_index("idx_palettes_project_id", "palettes", ["project_id"])


def downgrade() -> None:
    op.drop_index("idx_palettes_project_id", table_name="palettes")
    op.drop_table("palettes")
    op.drop_table("projects")
