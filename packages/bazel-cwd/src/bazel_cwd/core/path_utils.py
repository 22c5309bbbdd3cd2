"""
Bazel-aware path resolution.

Relative paths are resolved against the directory `bazel run` was run from
(BUILD_WORKING_DIRECTORY) instead of the runfiles tree the binary executes
in. Outside of `bazel run` the real working directory is used. Absolute paths
are left as is. Nothing is normalized: `.`/`..` segments, repeated and
trailing separators all survive.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

from ..config import get_build_working_directory
from ..errors import WorkingDirectoryUnavailable

logger = logging.getLogger(__name__)

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def to_path(path: PathInput) -> str:
    """Convert any accepted path representation to a str path."""
    value = os.fspath(path)
    if isinstance(value, bytes):
        return os.fsdecode(value)
    return value


def get_current_directory() -> str:
    """Return os.getcwd(), raising WorkingDirectoryUnavailable on failure."""
    try:
        return os.getcwd()
    except OSError as exc:
        raise WorkingDirectoryUnavailable(exc) from exc


def resolve_to_root(path: str, root: str) -> str:
    """Join a path onto root; absolute paths and the empty path are special."""
    if os.path.isabs(path):
        return path
    if not path:
        return root
    return os.path.join(root, path)


def resolve_path(path: str, build_working_directory: Optional[str] = None) -> str:
    """Resolve path against build_working_directory, or the cwd if not given.

    Absolute paths are returned unchanged without consulting the OS.

    Raises:
        WorkingDirectoryUnavailable: no override was given and the current
            working directory cannot be determined.
    """
    if os.path.isabs(path):
        return path
    root = build_working_directory or get_current_directory()
    resolved = resolve_to_root(path, root)
    logger.debug("Resolved %r against %r -> %r", path, root, resolved)
    return resolved


def unbazelify(path: PathInput) -> str:
    """Resolve the given path to an absolute path in a Bazel-aware manner.

    If the current program was run via `bazel run`, relative paths are
    resolved using the directory the bazel command was run from. Otherwise
    they are resolved against the current working directory.

    Raises:
        WorkingDirectoryUnavailable: not under `bazel run` and the current
            working directory does not exist or cannot be accessed.
    """
    return resolve_path(to_path(path), get_build_working_directory())


resolve = unbazelify


def is_bazel_run() -> bool:
    """Whether BUILD_WORKING_DIRECTORY is in effect."""
    return get_build_working_directory() is not None


def get_invocation_directory() -> str:
    """Directory relative paths are resolved against."""
    return get_build_working_directory() or get_current_directory()
