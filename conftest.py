"""
Root conftest.py — keeps tests independent of the invoking environment.

Tests may themselves be launched through `bazel run`, which exports
BUILD_WORKING_DIRECTORY; every test starts with it cleared.
"""
from __future__ import annotations

import sys

import pytest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_bazel_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BUILD_WORKING_DIRECTORY", raising=False)
    monkeypatch.delenv("BAZEL_CWD_LOG_LEVEL", raising=False)


@pytest.fixture
def build_working_directory(monkeypatch: pytest.MonkeyPatch):
    """Set BUILD_WORKING_DIRECTORY for the duration of a test."""
    def _set(value: str) -> str:
        monkeypatch.setenv("BUILD_WORKING_DIRECTORY", value)
        return value
    return _set


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "posix: mark test as relying on POSIX path syntax (skipped on Windows)",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.posix tests on Windows."""
    if sys.platform != "win32":
        return
    skip_posix = pytest.mark.skip(reason="POSIX path syntax")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip_posix)
