"""Separator handling for descriptor-relative paths."""

import os
from enum import Enum


class PathPolicy(Enum):
    """How reference strings are rewritten before joining.

    VB6 writes references with backslashes. On a backslash-native host they
    are joined as-is; everywhere else backslashes become the native separator.
    """

    WINDOWS = "windows"
    POSIX = "posix"

    @classmethod
    def native(cls) -> "PathPolicy":
        return cls.WINDOWS if os.sep == "\\" else cls.POSIX

    def normalize(self, reference: str) -> str:
        if self is PathPolicy.WINDOWS:
            return reference
        return reference.replace("\\", "/")
