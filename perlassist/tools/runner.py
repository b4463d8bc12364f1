"""Run an external program and capture what it printed."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from perlassist.errors import ToolUnavailable

logger = logging.getLogger(__name__)


@dataclass
class ToolRun:
    argv: list[str]
    exit_status: int | None = None  # None when the process was killed on timeout
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return not self.timed_out and self.exit_status == 0


def run_tool(argv: list[str], timeout: float | None = None) -> ToolRun:
    """
    Run ``argv`` without a shell and wait for it to exit.

    Arguments are passed straight to the program, so search terms and paths
    need no shell escaping.

    Returns ToolRun; a run that exceeded ``timeout`` has its process killed
    and comes back with ``timed_out=True``.

    Raises:
        ToolUnavailable: the program could not be executed.
    """
    logger.debug("running %s (timeout=%s)", argv, timeout)
    try:
        result = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise ToolUnavailable(argv[0]) from e
    except subprocess.TimeoutExpired:
        logger.info("%s timed out after %ss", argv[0], timeout)
        return ToolRun(argv=argv, timed_out=True)

    logger.debug("%s exited with status %d", argv[0], result.returncode)
    return ToolRun(
        argv=argv,
        exit_status=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )
