"""
Errors raised by bazel_cwd.
"""
from __future__ import annotations


class WorkingDirectoryUnavailable(OSError):
    """The current working directory could not be determined.

    Raised only when no BUILD_WORKING_DIRECTORY override is set, e.g. because
    the directory was removed or cannot be accessed.
    """

    def __init__(self, cause: OSError) -> None:
        message = f"current working directory is unavailable: {cause.strerror or cause}"
        if cause.errno is None:
            super().__init__(message)
        else:
            super().__init__(cause.errno, message)
        self.cause = cause
