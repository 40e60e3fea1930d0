"""One-line summary over all checked projects."""

from collections.abc import Sequence

from .AggregateSummary import AggregateSummary
from .CheckResult import CheckResult
from .SummaryCase import SummaryCase

_SINGLE_TEMPLATES: dict[SummaryCase, str] = {
    SummaryCase.CLEAN: "No errors found in {project}.",
    SummaryCase.MISSING: "{missing} missing files in {project}.",
    SummaryCase.NON_ENGLISH: "{non_english} unprocessed non-English files found in the project.",
    SummaryCase.MISSING_NON_ENGLISH: (
        "{missing} missing files, {non_english} unprocessed non-English files found in the project."
    ),
    SummaryCase.ERRORS: "{errors} errors found in the project.",
    SummaryCase.MISSING_ERRORS: "{missing} missing files, {errors} errors found in the project.",
    SummaryCase.ERRORS_NON_ENGLISH: (
        "{errors} errors found in project with {non_english} unprocessed non-English files found in the project."
    ),
    SummaryCase.MISSING_ERRORS_NON_ENGLISH: (
        "{missing} missing files, {errors} errors found in project with "
        "{non_english} unprocessed non-English files found in the project."
    ),
}

_MULTI_TEMPLATES: dict[SummaryCase, str] = {
    SummaryCase.CLEAN: "No errors found in {projects}.",
    SummaryCase.MISSING: "{missing} missing files in {projects}.",
    SummaryCase.NON_ENGLISH: "{non_english} unprocessed non-English files found in {projects}.",
    SummaryCase.MISSING_NON_ENGLISH: (
        "{missing} missing files, {non_english} unprocessed non-English files found in {projects}."
    ),
    SummaryCase.ERRORS: "{errors} errors found in {projects}.",
    SummaryCase.MISSING_ERRORS: "{missing} missing files, {errors} errors found in {projects}.",
    SummaryCase.ERRORS_NON_ENGLISH: "{errors} errors, {non_english} unprocessed non-English files found in {projects}.",
    SummaryCase.MISSING_ERRORS_NON_ENGLISH: (
        "{missing} missing files, {errors} errors, {non_english} unprocessed non-English files found in {projects}."
    ),
}


def _pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def render_summary(results: Sequence[CheckResult]) -> str:
    """Pick and fill the template matching which categories are non-zero.

    A single result is described as "the project"; any other number of
    results is described with summed counts and the project count.
    """
    summary = AggregateSummary.from_results(results)
    values = {
        "errors": summary.parsing_errors,
        "non_english": summary.non_english_files,
        "missing": summary.missing_files,
    }
    if summary.project_count == 1:
        return _SINGLE_TEMPLATES[summary.case].format(project=results[0].project_path, **values)
    return _MULTI_TEMPLATES[summary.case].format(projects=_pluralize(summary.project_count, "project"), **values)
