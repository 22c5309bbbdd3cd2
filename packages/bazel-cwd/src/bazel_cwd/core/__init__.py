"""
Core path resolution.
"""

from .path_utils import (
    get_current_directory,
    get_invocation_directory,
    is_bazel_run,
    resolve,
    resolve_path,
    resolve_to_root,
    to_path,
    unbazelify,
)

__all__ = [
    "get_current_directory",
    "get_invocation_directory",
    "is_bazel_run",
    "resolve",
    "resolve_path",
    "resolve_to_root",
    "to_path",
    "unbazelify",
]
