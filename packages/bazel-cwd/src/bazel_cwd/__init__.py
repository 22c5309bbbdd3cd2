"""
bazel_cwd — resolve paths against the directory `bazel run` was run from.

    >>> from bazel_cwd import unbazelify
    >>> unbazelify("foo/bar")  # doctest: +SKIP
    '/home/me/project/foo/bar'
"""

from .config import VERSION as __version__
from .core.path_utils import (
    get_current_directory,
    get_invocation_directory,
    is_bazel_run,
    resolve,
    resolve_path,
    resolve_to_root,
    to_path,
    unbazelify,
)
from .errors import WorkingDirectoryUnavailable

__all__ = [
    "__version__",
    "WorkingDirectoryUnavailable",
    "get_current_directory",
    "get_invocation_directory",
    "is_bazel_run",
    "resolve",
    "resolve_path",
    "resolve_to_root",
    "to_path",
    "unbazelify",
]
