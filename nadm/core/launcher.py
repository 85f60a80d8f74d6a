from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence

from nadm.core.errors import ChildExitError, LaunchFailure
from nadm.core.logging import get_logger, log_event
from nadm.core.payload import build_payload

INTERPRETER = "bash"
ARGS_VARIABLE = "NADM_ARGS"
ARGC_VARIABLE = "NADM_ARGC"
INDEXED_ARG_PREFIX = "NADM_ARG_"
FALLBACK_EXIT_CODE = 1

logger = get_logger(__name__)


class LaunchStatus(Enum):
    EXITED = "exited"
    SIGNALED = "signaled"
    FAILED_TO_START = "failed_to_start"


@dataclass(frozen=True)
class LaunchOutcome:
    status: LaunchStatus
    returncode: int | None = None
    signal: int | None = None
    error: str | None = None

    @property
    def exit_code(self) -> int:
        try:
            self.raise_for_status()
        except ChildExitError as exc:
            return exc.exit_code
        except LaunchFailure:
            return FALLBACK_EXIT_CODE
        return 0

    def raise_for_status(self) -> None:
        if self.status is LaunchStatus.EXITED:
            if self.returncode:
                raise ChildExitError(
                    code="child_exit",
                    message=f"{INTERPRETER} exited with status {self.returncode}",
                    exit_code=self.returncode,
                )
            return
        if self.status is LaunchStatus.SIGNALED:
            raise LaunchFailure(
                code="child_signaled",
                message=f"{INTERPRETER} was terminated by signal {self.signal}",
            )
        raise LaunchFailure(
            code="launch_failed",
            message=f"Could not start {INTERPRETER}",
            detail=self.error,
        )


def join_arguments(args: Sequence[str]) -> str:
    # Lossy: arguments containing spaces cannot be told apart downstream.
    return " ".join(args)


def build_environment(
    args: Sequence[str],
    base: Mapping[str, str] | None = None,
    *,
    indexed: bool = False,
) -> dict[str, str]:
    env = dict(os.environ if base is None else base)
    env[ARGS_VARIABLE] = join_arguments(args)
    if indexed:
        env[ARGC_VARIABLE] = str(len(args))
        for index, value in enumerate(args):
            env[f"{INDEXED_ARG_PREFIX}{index}"] = value
    return env


@dataclass
class Launcher:
    """Run the core script under bash and report how the child ended."""

    script: str
    interpreter: str = INTERPRETER
    indexed_args: bool = False

    process: subprocess.Popen | None = field(init=False, default=None)

    def command(self) -> list[str]:
        return [self.interpreter, "-c", build_payload(self.script)]

    def run(
        self,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> LaunchOutcome:
        """
        Spawn the child with inherited streams and block until it exits.
        """
        if self.process is not None:
            raise RuntimeError("Launcher already ran")

        child_env = build_environment(args, env, indexed=self.indexed_args)
        log_event(logger, "launch_start", interpreter=self.interpreter, argc=len(args))
        try:
            self.process = subprocess.Popen(self.command(), env=child_env)
        except OSError as exc:
            log_event(logger, "launch_failed", interpreter=self.interpreter, error=str(exc))
            return LaunchOutcome(status=LaunchStatus.FAILED_TO_START, error=str(exc))

        returncode = self._wait_for_exit(self.process)
        if returncode < 0:
            log_event(logger, "launch_signaled", signal=-returncode)
            return LaunchOutcome(status=LaunchStatus.SIGNALED, signal=-returncode)

        log_event(logger, "launch_exit", returncode=returncode)
        return LaunchOutcome(status=LaunchStatus.EXITED, returncode=returncode)

    @staticmethod
    def _wait_for_exit(process: subprocess.Popen) -> int:
        # Ctrl-C reaches the child through the shared process group; keep
        # waiting so the child is always reaped before we return.
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                continue
