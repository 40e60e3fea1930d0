"""Output schemas for project commands."""

from pydantic import BaseModel, Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ProjectResultOutput(BaseModel):
    """One checked project."""

    project_path: str = Field(..., description="Project descriptor that was checked")
    parsing_errors: list[str] = Field(..., description="Files that failed to parse")
    non_english_files: list[str] = Field(..., description="Files likely written in a non-English character set")
    missing_files: list[str] = Field(..., description="Referenced files that do not exist")


class ProjectTotalsOutput(BaseModel):
    parsing_errors: int = Field(..., ge=0)
    non_english_files: int = Field(..., ge=0)
    missing_files: int = Field(..., ge=0)


class ProjectCheckOutput(BaseOutputSchema):
    """Output schema for project check command."""

    path: str = Field(..., description="Project file or directory that was checked")
    project_count: int = Field(..., ge=0, description="Number of project descriptors checked")
    projects: list[ProjectResultOutput] = Field(..., description="Per-project results in discovery order")
    totals: ProjectTotalsOutput = Field(..., description="Summed counts across all projects")
    summary: str = Field(..., description="Human-readable summary line")


schema_registry.register_output_schema("project", "check", ProjectCheckOutput)
