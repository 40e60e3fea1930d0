"""Project check API command.

CLI: vbpcheck check [path]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ...utils.get_logger import get_logger
from ..StageResult import StageResult
from .AggregateSummary import AggregateSummary
from .check_projects import check_projects
from .CheckResult import CheckResult
from .CheckSettings import CheckSettings
from .DiscoveredProject import DiscoveredProject
from .discover_projects import discover_projects
from ._constants import PROJECT_EXTENSION
from .render_summary import render_summary

logger = get_logger("project.cmd_check")


def _output(path: Path, results: list[CheckResult], summary: str, errors: list[str], success: bool) -> dict[str, Any]:
    return {
        "errors": errors,
        "warnings": [],
        "path": str(path),
        "project_count": len(results),
        "projects": [result.to_dict() for result in results],
        "totals": AggregateSummary.from_results(results).to_dict(),
        "summary": summary,
        "success": success,
    }


def cmd_check(
    path: str | None = None,
    check_forms: bool = True,
    check_modules: bool = True,
    check_classes: bool = True,
    check_references: bool = True,
) -> StageResult:
    """Check that every file a project (or every project under a directory) refers to exists and parses.

    A category is checked when both the configuration and the arguments enable it.

    Args:
        path: Project file or directory to search; defaults to the working directory
        check_forms: Check forms listed in the project
        check_modules: Check modules listed in the project
        check_classes: Check classes listed in the project
        check_references: Check sub-project references listed in the project
    """
    target = Path(path).expanduser() if path else Path.cwd()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VbpcheckConfig import VbpcheckConfig

        yield (0.1, "Loading configuration...")
        try:
            config = VbpcheckConfig.load()
        except ValueError as e:
            message = f"Failed to load config: {e}"
            result_obj.finish(message, _output(target, [], message, [message], False), False)
            return

        settings = CheckSettings(
            project_path=target,
            check_forms=check_forms and config.check.forms,
            check_modules=check_modules and config.check.modules,
            check_classes=check_classes and config.check.classes,
            check_references=check_references and config.check.references,
        )

        if not target.exists():
            message = f"No project file found at '{target}'."
            result_obj.finish(message, _output(target, [], message, [message], False), False)
            return

        if target.is_dir():
            yield (0.2, f"Searching '{target}' for {PROJECT_EXTENSION} project files.")
            discovered = discover_projects(target)
            yield (0.4, f"Checking {len(discovered)} project files...")
            results = check_projects(settings, discovered)
        else:
            yield (0.4, f"Checking {target.name}...")
            results = check_projects(settings, [DiscoveredProject(target)], max_workers=1)

        yield (0.9, "Summarizing...")
        summary = render_summary(results)
        logger.info("Checked %d projects under %s: %s", len(results), target, summary)

        result_obj.finish(summary, _output(target, results, summary, [], True), True)

    return StageResult(
        announce=f"Checking VB6 projects in {target}...",
        progress_callback=do_work,
    )
