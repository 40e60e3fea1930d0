"""Check many projects in parallel."""

import os
from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from ...utils.get_logger import get_logger
from ..vb6.VB6Parser import VB6Parser
from .check_project import check_project
from .CheckResult import CheckResult
from .CheckSettings import CheckSettings
from .DiscoveredProject import DiscoveredProject

logger = get_logger("project.check_projects")


def check_projects(
    settings: CheckSettings,
    discovered: list[DiscoveredProject],
    parser: VB6Parser | None = None,
    max_workers: int | None = None,
) -> list[CheckResult]:
    """Check every discovered project, one thread-pool task per project.

    Failed discovery entries become a load-failure result without running a
    task. A task that raises is converted into a result for its own project;
    the other tasks are unaffected.

    Returns:
        One result per entry of ``discovered``, in the same order
    """
    parser = parser or VB6Parser()
    results: list[CheckResult | None] = [None] * len(discovered)
    pending: dict[Future[CheckResult], int] = {}

    with ThreadPoolExecutor(max_workers=max_workers or os.cpu_count()) as pool:
        for index, entry in enumerate(discovered):
            if entry.error is not None:
                results[index] = CheckResult.load_failure(str(entry.path), entry.error)
                continue
            pending[pool.submit(check_project, settings.for_project(entry.path), parser)] = index

        for future in as_completed(pending):
            index = pending[future]
            try:
                results[index] = future.result()
            except Exception as exc:
                project_path = str(discovered[index].path)
                logger.warning("Unexpected failure checking %s: %s", project_path, exc, exc_info=True)
                results[index] = CheckResult.parse_failure(
                    project_path, f"Unexpected failure checking project: {exc}"
                )

    return [result for result in results if result is not None]
