"""Per-project report lines."""

from .CheckResult import CheckResult


def render_detail(result: CheckResult) -> list[str]:
    """Lines describing everything wrong with one project; empty for a clean project.

    Categories appear in a fixed order: missing files, parsing errors,
    non-English files.
    """
    if result.is_clean:
        return []

    lines = [f"Errors found in '{result.project_path}':"]
    for heading, entries in (
        ("Missing Files:", result.missing_files),
        ("Parsing Errors:", result.parsing_errors),
        ("Non-English Files:", result.non_english_files),
    ):
        if entries:
            lines.append(heading)
            lines.extend(f"  {entry}" for entry in entries)
    return lines
