"""Tests for the build-time embedding of core.sh."""
from __future__ import annotations

import ast
import importlib.util
from pathlib import Path

import pytest

from nadm.core.embedding import DEFAULT_TARGET_PATH, embed_script, render_literal
from nadm.core.errors import EmbedError
from tests.helpers import REPO_ROOT

TRICKY_SCRIPT = (
    "#!/usr/bin/env bash\n"
    "main() {\n"
    "    local name='it'\"'\"'s'\n"
    '    echo "${NADM_ARGS} $HOME \\$ `date` \\\\ done"\n'
    "    printf 'tab\\there\\n'\n"
    "}\n"
)


def _load_module(path: Path):
    spec = importlib.util.spec_from_file_location("embedded_under_test", path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def target_copy(tmp_path: Path) -> Path:
    target = tmp_path / "embedded.py"
    target.write_text(DEFAULT_TARGET_PATH.read_text(encoding="utf-8"), encoding="utf-8")
    return target


@pytest.mark.parametrize("text", ["", "plain", TRICKY_SCRIPT, "quote ' and \" mixed\n"])
def test_render_literal_evaluates_back(text: str) -> None:
    assert ast.literal_eval(render_literal(text)) == text


def test_embed_replaces_placeholder(write_script, target_copy: Path) -> None:
    core = write_script(TRICKY_SCRIPT)
    embed_script(core, target_copy)

    module = _load_module(target_copy)
    assert module.SCRIPT == TRICKY_SCRIPT


def test_second_embed_reports_already_built(write_script, target_copy: Path) -> None:
    core = write_script("main() { :; }\n")
    embed_script(core, target_copy)

    with pytest.raises(EmbedError) as info:
        embed_script(core, target_copy)
    assert info.value.code == "embed_placeholder_missing"
    assert "Already built?" in str(info.value)


def test_missing_core_script(tmp_path: Path, target_copy: Path) -> None:
    with pytest.raises(EmbedError) as info:
        embed_script(tmp_path / "absent.sh", target_copy)
    assert info.value.code == "embed_read_failed"
    assert "absent.sh" in (info.value.detail or "")


def test_build_script_entry_point(write_script, target_copy: Path, capsys) -> None:
    build = _load_module(REPO_ROOT / "scripts" / "embed_core.py")
    core = write_script("main() { echo built; }\n")

    assert build.main(["--core", str(core), "--target", str(target_copy)]) == 0
    assert "Build complete" in capsys.readouterr().out

    assert build.main(["--core", str(core), "--target", str(target_copy)]) == 1
    assert "Build failed" in capsys.readouterr().err
