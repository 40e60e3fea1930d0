"""Top-level vbpcheck configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .CheckConfig import CheckConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig


class VbpcheckConfig(BaseModel):
    """Top-level configuration."""

    model_config = ConfigDict(extra="forbid")

    check: CheckConfig = Field(default_factory=CheckConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Path to config file based on VBPCHECK_HOME or default to ~/.vbpcheck."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "VbpcheckConfig":
        """Load and validate config from file.

        A missing config file is not an error: every setting has a default.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
