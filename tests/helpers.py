"""Test helpers shared across modules."""
from __future__ import annotations

import shutil
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

requires_bash = pytest.mark.skipif(
    shutil.which("bash") is None, reason="bash is not available on PATH"
)
