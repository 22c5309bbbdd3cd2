"""
Configuration: environment variable names and lookups.

`bazel run` starts the binary inside its runfiles tree and records the
directory the command was typed in as BUILD_WORKING_DIRECTORY.
See https://bazel.build/docs/user-manual#running-executables
"""
from __future__ import annotations

import logging
import os
from typing import Optional


APP_NAME: str = "bazel-cwd"
VERSION: str = "0.1.0"

ENV_BUILD_WORKING_DIRECTORY: str = "BUILD_WORKING_DIRECTORY"
ENV_LOG_LEVEL: str = "BAZEL_CWD_LOG_LEVEL"

DEFAULT_LOG_LEVEL: int = logging.WARNING


def get_build_working_directory() -> Optional[str]:
    """Get the directory `bazel run` was invoked from, or None outside of it.

    The value is returned verbatim. An empty value counts as unset.
    """
    value = os.environ.get(ENV_BUILD_WORKING_DIRECTORY)
    if not value:
        return None
    return value


def get_log_level() -> int:
    """Get the CLI log level from BAZEL_CWD_LOG_LEVEL (a level name)."""
    name = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL
