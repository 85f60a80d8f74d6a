from __future__ import annotations

from pathlib import Path

from nadm.core.errors import EmbedError, wrap_error
from nadm.core.payload import EMBED_PLACEHOLDER

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CORE_PATH = PACKAGE_ROOT / "resources" / "core.sh"
DEFAULT_TARGET_PATH = PACKAGE_ROOT / "core" / "embedded.py"
QUOTED_PLACEHOLDER = f'"{EMBED_PLACEHOLDER}"'


def render_literal(text: str) -> str:
    """Return Python source that evaluates to ``text`` exactly."""
    return repr(text)


def embed_script(
    core_path: Path = DEFAULT_CORE_PATH,
    target_path: Path = DEFAULT_TARGET_PATH,
) -> Path:
    """Replace the placeholder in ``target_path`` with the text of ``core_path``."""
    try:
        core_text = core_path.read_text(encoding="utf-8")
        module_text = target_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise wrap_error(
            exc,
            code="embed_read_failed",
            message="Could not read build inputs",
            error_type=EmbedError,
        ) from exc

    if QUOTED_PLACEHOLDER not in module_text:
        raise EmbedError(
            code="embed_placeholder_missing",
            message=f"Placeholder not found in {target_path.name}. Already built?",
        )

    updated = module_text.replace(QUOTED_PLACEHOLDER, render_literal(core_text), 1)
    try:
        target_path.write_text(updated, encoding="utf-8")
    except OSError as exc:
        raise wrap_error(
            exc,
            code="embed_write_failed",
            message=f"Could not write {target_path}",
            error_type=EmbedError,
        ) from exc
    return target_path
