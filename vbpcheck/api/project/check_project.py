"""Check every enabled reference of one project."""

import os
from pathlib import Path

from ...utils.get_logger import get_logger
from ..vb6.VB6ParseError import VB6ParseError
from ..vb6.VB6Parser import VB6Parser
from .CheckResult import CheckResult
from .CheckSettings import CheckSettings
from .classify_failure import classify_failure
from .FailureClass import FailureClass
from .join_project_path import join_project_path
from .load_project import load_project
from .PathPolicy import PathPolicy
from .Reference import Reference
from .ReferenceKind import ReferenceKind

logger = get_logger("project.check")

_PARSE_METHODS = {
    ReferenceKind.CLASS: "parse_class",
    ReferenceKind.MODULE: "parse_module",
    ReferenceKind.FORM: "parse_form",
}


def check_project(
    settings: CheckSettings,
    parser: VB6Parser | None = None,
    policy: PathPolicy | None = None,
) -> CheckResult:
    """Check the project at ``settings.project_path``.

    Categories are processed in ReferenceKind order; disabled categories are
    skipped without looking at their references. Every reference adds at most
    one entry to the result. Stat, read and parse failures are recorded against
    the one reference they concern; a path the OS rejects outright (such as one
    with an embedded NUL) counts as missing.
    """
    parser = parser or VB6Parser()
    loaded = load_project(settings.project_path, parser)
    if isinstance(loaded, CheckResult):
        return loaded

    result = CheckResult(project_path=str(settings.project_path))
    for kind in ReferenceKind:
        if not settings.is_enabled(kind):
            continue
        for reference in loaded.references_of(kind):
            path = join_project_path(loaded.directory, reference.path, policy)
            _check_reference(reference, path, parser, result)
    return result


def _check_reference(reference: Reference, path: Path, parser: VB6Parser, result: CheckResult) -> None:
    label = reference.kind.value
    try:
        os.stat(path)
    except (OSError, ValueError):
        logger.debug("%s missing: %s", label, path)
        result.missing_files.append(f"{label} not found: {path}")
        return

    # Sub-projects are only required to exist
    if reference.kind is ReferenceKind.SUB_PROJECT:
        return

    try:
        contents = path.read_bytes()
    except (OSError, ValueError) as exc:
        logger.warning("Cannot read %s %s: %s", label.lower(), path, exc)
        result.parsing_errors.append(f"Failed to read {path}: {exc}")
        return

    parse = getattr(parser, _PARSE_METHODS[reference.kind])
    try:
        parse(path.name, contents)
    except VB6ParseError as exc:
        if classify_failure(exc) is FailureClass.ENCODING_ANOMALY:
            result.non_english_files.append(f"{label} is likely not in an English character set: {path.name}")
        else:
            result.parsing_errors.append(str(exc))
        return

    logger.debug("%s ok: %s", label, path)
