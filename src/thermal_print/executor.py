"""Single choke point for running external print commands."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

from .errors import ProcessSpawnError

logger = logging.getLogger(__name__)

# Windows CREATE_NO_WINDOW; keeps PowerShell from flashing a console.
CREATE_NO_WINDOW = 0x08000000


@dataclass(slots=True, frozen=True)
class ProcessOutput:
    """Exit status and decoded output of one finished command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _decode(data: bytes | None) -> str:
    # Driver and spooler output encoding is not guaranteed.
    return (data or b"").decode("utf-8", errors="replace")


def run_command(argv: Sequence[str], *, hide_window: bool = False) -> ProcessOutput:
    """
    Run `argv` to completion and capture its output.

    A nonzero exit status is returned as-is; callers decide what it means.
    Only a failure to start the process raises ProcessSpawnError.
    """
    argv = [str(part) for part in argv]
    creationflags = CREATE_NO_WINDOW if hide_window and sys.platform == "win32" else 0
    logger.info("Executing %s with args: %s", argv[0], argv[1:])
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            creationflags=creationflags,
        )
    except (OSError, ValueError) as exc:
        # ValueError: an argument contains a NUL byte.
        raise ProcessSpawnError(f"Failed to execute {argv[0]}: {exc}") from exc

    output = ProcessOutput(
        returncode=proc.returncode,
        stdout=_decode(proc.stdout),
        stderr=_decode(proc.stderr),
    )
    logger.debug("%s exited with %s", argv[0], output.returncode)
    return output


CommandRunner = Callable[..., ProcessOutput]
