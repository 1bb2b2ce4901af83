"""
Palette Picker Backend — Palette Request/Response Schemas
===========================================================

What:  Pydantic models for the palette endpoints.

Response shapes:
    PaletteResponse         Full row, returned by the list endpoints.
    PaletteCreatedResponse  Returned by POST /api/v1/palettes; echoes the
                            name and colours but not project_id.
"""

from typing import Optional

from pydantic import BaseModel, Field

PALETTE_REQUIRED_FIELDS = (
    "palette_name",
    "color1",
    "color2",
    "color3",
    "color4",
    "color5",
)
PALETTE_EXPECTED_FORMAT = (
    "{ palette_name: <String>, color1: <String>, color2: <String>, "
    "color3: <String>, color4: <String>, color5: <String>}"
)


class PaletteCreate(BaseModel):
    """Body of POST /api/v1/palettes. Unknown keys are ignored."""
    project_id: Optional[int] = Field(
        default=None,
        description="Project to attach the palette to (optional)",
    )
    palette_name: str
    color1: str
    color2: str
    color3: str
    color4: str
    color5: str


class PaletteCreatedResponse(BaseModel):
    id: int = Field(description="Generated palette identifier")
    palette_name: str
    color1: str
    color2: str
    color3: str
    color4: str
    color5: str

    model_config = {"from_attributes": True}


class PaletteResponse(PaletteCreatedResponse):
    """A row of the palettes table."""
    project_id: Optional[int] = Field(
        default=None,
        description="Owning project, null when the palette is unattached",
    )
