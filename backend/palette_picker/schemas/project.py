"""
Palette Picker Backend — Project Request/Response Schemas
===========================================================

What:  Pydantic models for the project endpoints' request and response bodies.
How:   Routes validate raw bodies for required fields first, then build
       ProjectCreate from them; responses are serialized from ORM rows
       through ProjectResponse.
"""

from pydantic import BaseModel, Field

PROJECT_REQUIRED_FIELDS = ("project_name",)
PROJECT_EXPECTED_FORMAT = "{ project_name: <String> }"


class ProjectCreate(BaseModel):
    """Body of POST /api/v1/projects. Keys other than project_name are ignored."""
    project_name: str = Field(description="Display name of the project")


class ProjectResponse(BaseModel):
    """A row of the projects table, as returned by every project endpoint."""
    id: int = Field(description="Generated project identifier")
    project_name: str = Field(description="Display name of the project")

    model_config = {"from_attributes": True}
