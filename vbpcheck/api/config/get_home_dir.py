"""Get vbpcheck home directory path or path under it."""

import os
from pathlib import Path

HOME_DIR_NAME = ".vbpcheck"


def get_home_dir(*parts: str) -> Path:
    """Get vbpcheck home directory path or path under it.

    Checks the VBPCHECK_HOME environment variable first, defaults to
    ~/.vbpcheck if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.vbpcheck")
        >>> get_home_dir("config.json")
        Path("/Users/user/.vbpcheck/config.json")
    """
    home_env = os.environ.get("VBPCHECK_HOME")
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / HOME_DIR_NAME
    return home / Path(*parts) if parts else home
