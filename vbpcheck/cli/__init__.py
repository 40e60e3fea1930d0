"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer reports usage errors itself and exits; the exit status is returned
    instead of raised so callers can run the CLI in-process.
    """
    from ..utils.get_package_version import get_package_version
    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        print(f"vbpcheck {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="vbpcheck")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
