from __future__ import annotations

from importlib import resources
from pathlib import Path

from nadm.core import embedded
from nadm.core.errors import ScriptLoadError

# Split so the build step never rewrites this comparison value.
EMBED_PLACEHOLDER = "{{" + "CORE_SH}}"
ENTRY_POINT = "main"
TRAILER = "\n" + ENTRY_POINT
RESOURCE_NAME = "core.sh"


def is_embedded(script: str) -> bool:
    return script != EMBED_PLACEHOLDER


def load_script(override: Path | None = None) -> str:
    """Return the core script text.

    An explicit override wins, then the text baked in by the build step, then
    the ``core.sh`` shipped as package data.
    """
    if override is not None:
        return _read_path(Path(override).expanduser())
    if is_embedded(embedded.SCRIPT):
        return embedded.SCRIPT
    resource = resources.files("nadm.resources").joinpath(RESOURCE_NAME)
    try:
        return resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptLoadError(
            code="script_load_failed",
            message=f"Could not load {RESOURCE_NAME}",
            detail=str(exc),
        ) from exc


def build_payload(script: str) -> str:
    return script + TRAILER


def _read_path(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptLoadError(
            code="script_load_failed",
            message=f"Could not load {RESOURCE_NAME}",
            detail=f"{path}: {exc}",
        ) from exc
