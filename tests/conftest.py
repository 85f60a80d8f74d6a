"""Shared fixtures for the nadm test suite.

Most tests spawn a real ``bash`` child, so they are skipped on hosts
without one on PATH.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from nadm.core.config import get_runtime_config
from tests.helpers import REPO_ROOT


@pytest.fixture(autouse=True)
def clean_runtime_config(monkeypatch: pytest.MonkeyPatch):
    """Drop inherited NADM_* variables and the cached runtime config."""
    for name in list(os.environ):
        if name.upper().startswith("NADM_"):
            monkeypatch.delenv(name, raising=False)
    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()


@pytest.fixture()
def write_script(tmp_path: Path) -> Callable[[str], Path]:
    """Write a core script body to a temp file and return its path."""

    def _write(body: str, name: str = "core.sh") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def child_env() -> dict[str, str]:
    """Environment for running ``python -m nadm`` from the source tree."""
    env = {k: v for k, v in os.environ.items() if not k.upper().startswith("NADM_")}
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = (
        f"{REPO_ROOT}{os.pathsep}{existing}" if existing else str(REPO_ROOT)
    )
    return env
