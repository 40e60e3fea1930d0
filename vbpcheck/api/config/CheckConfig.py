"""Default check categories."""

from pydantic import BaseModel, ConfigDict, Field


class CheckConfig(BaseModel):
    """Which reference categories are checked unless disabled on the command line."""

    model_config = ConfigDict(extra="forbid")

    forms: bool = Field(True, description="Check forms listed in the project")
    modules: bool = Field(True, description="Check modules listed in the project")
    classes: bool = Field(True, description="Check classes listed in the project")
    references: bool = Field(True, description="Check sub-project references listed in the project")
