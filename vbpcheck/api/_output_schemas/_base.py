"""Fields every command output carries."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Errors and warnings as message lists, plus whether the command did its job."""

    errors: list[str] = Field(default_factory=list, description="Error messages, empty if none")
    warnings: list[str] = Field(default_factory=list, description="Warning messages, empty if none")
    success: bool = Field(..., description="Whether the command ran to completion")
