"""Categories of files a project descriptor refers to."""

from enum import Enum


class ReferenceKind(Enum):
    """Reference categories, in the order a project is checked.

    Values are the labels used in human-readable messages.
    """

    SUB_PROJECT = "Sub-Project Reference"
    CLASS = "Class"
    MODULE = "Module"
    FORM = "Form"
