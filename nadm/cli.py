from __future__ import annotations

import sys
from typing import Sequence

from pydantic import ValidationError

from nadm.core.config import RuntimeConfig, get_runtime_config
from nadm.core.errors import ScriptLoadError
from nadm.core.launcher import FALLBACK_EXIT_CODE, Launcher
from nadm.core.logging import configure_logging, default_log_dir, get_logger, log_event
from nadm.core.payload import load_script

logger = get_logger(__name__)


def _configure_logging(config: RuntimeConfig) -> None:
    log_dir = config.log_dir
    if log_dir is None and config.log_to_file:
        log_dir = default_log_dir()
    try:
        configure_logging(
            level=config.log_level,
            format_name=config.log_format,
            log_dir=log_dir,
        )
    except OSError:
        # An unusable log directory must not keep the script from running.
        configure_logging(level=config.log_level, format_name=config.log_format)


def main(argv: Sequence[str] | None = None) -> int:
    """Forward every argument to the core script and mirror its exit status.

    No options are parsed here; ``core.sh`` interprets ``NADM_ARGS`` itself.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = get_runtime_config()
    except ValidationError as exc:
        names = ", ".join(
            f"NADM_{str(error['loc'][0]).upper()}" for error in exc.errors() if error["loc"]
        )
        print(f"Error: Invalid nadm configuration: {names}", file=sys.stderr)
        return FALLBACK_EXIT_CODE
    _configure_logging(config)

    try:
        script = load_script(config.script_path)
    except ScriptLoadError as exc:
        log_event(logger, "script_load_failed", code=exc.code, detail=exc.detail)
        print("Error: Could not load core.sh", file=sys.stderr)
        return FALLBACK_EXIT_CODE

    launcher = Launcher(script=script, indexed_args=config.indexed_args)
    return launcher.run(args).exit_code


if __name__ == "__main__":
    raise SystemExit(main())
