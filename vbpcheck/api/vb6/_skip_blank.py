def _skip_blank(lines: list[str], index: int) -> int:
    """Return the index of the first non-blank line at or after ``index``."""
    while index < len(lines) and not lines[index].strip():
        index += 1
    return index
