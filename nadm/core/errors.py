from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NadmError(Exception):
    code: str
    message: str
    detail: str | None = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class ScriptLoadError(NadmError):
    """The core script could not be read."""


class EmbedError(NadmError):
    """The build step could not embed the core script."""


class LaunchError(NadmError):
    """Base class for failures of the launched child."""


@dataclass
class ChildExitError(LaunchError):
    exit_code: int = 1


class LaunchFailure(LaunchError):
    """The child never started or ended without an exit code."""


def format_error(error: BaseException) -> str:
    if isinstance(error, NadmError):
        prefix = f"[{error.code}] " if error.code else ""
        return f"{prefix}{error}"
    return f"{error}"


def wrap_error(
    error: BaseException,
    *,
    code: str,
    message: str,
    error_type: type[NadmError] = NadmError,
) -> NadmError:
    if isinstance(error, NadmError):
        return error
    return error_type(code=code, message=message, detail=str(error))
