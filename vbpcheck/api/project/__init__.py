"""Project domain: validation and aggregation of VB6 project descriptors."""

from .AggregateSummary import AggregateSummary
from .check_project import check_project
from .check_projects import check_projects
from .CheckResult import CheckResult
from .CheckSettings import CheckSettings
from .classify_failure import classify_failure
from .discover_projects import discover_projects
from .DiscoveredProject import DiscoveredProject
from .FailureClass import FailureClass
from .join_project_path import join_project_path
from .load_project import load_project
from .LoadedProject import LoadedProject
from .PathPolicy import PathPolicy
from .Reference import Reference
from .ReferenceKind import ReferenceKind
from .render_detail import render_detail
from .render_summary import render_summary
from .SummaryCase import SummaryCase

__all__ = [
    "AggregateSummary",
    "CheckResult",
    "CheckSettings",
    "DiscoveredProject",
    "FailureClass",
    "LoadedProject",
    "PathPolicy",
    "Reference",
    "ReferenceKind",
    "SummaryCase",
    "check_project",
    "check_projects",
    "classify_failure",
    "discover_projects",
    "join_project_path",
    "load_project",
    "render_detail",
    "render_summary",
]
