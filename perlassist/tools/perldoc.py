"""perldoc lookup: try function, variable, general and faq help in turn.

Equivalent to the shell pipeline::

    perldoc -f X || perldoc -v X || perldoc X || perldoc -q X
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from perlassist.config import tool_config
from perlassist.schema import DEFAULT_MODES, LookupMode, LookupRequest, LookupResult
from perlassist.tools.runner import run_tool

logger = logging.getLogger(__name__)


def build_command(perldoc: str, mode: LookupMode, term: str) -> list[str]:
    return [perldoc, *mode.flags, term]


def lookup_help(
    term: str,
    *,
    modes: Iterable[LookupMode] = DEFAULT_MODES,
    perldoc: str | None = None,
    timeout: float | None = None,
) -> LookupResult:
    """
    Look up ``term`` in perldoc, one mode at a time, stopping at the first hit.

    A blank term is a no-op: no process is started and the result is
    not-found. An attempt that exits nonzero or times out counts as a miss
    and the next mode is tried.

    Args:
        term: Search term, passed to perldoc as a single argument.
        modes: Modes to try, in priority order.
        perldoc: perldoc executable (default from config).
        timeout: Seconds allowed per attempt (default from config).

    Raises:
        ToolUnavailable: perldoc is not installed; no further modes are tried.
    """
    request = LookupRequest(term=term)
    if request.is_blank:
        logger.debug("blank search term, nothing to look up")
        return LookupResult(term=term)

    perldoc = perldoc or tool_config.perldoc
    timeout = tool_config.perldoc_timeout if timeout is None else timeout

    for mode in modes:
        run = run_tool(build_command(perldoc, mode, request.term), timeout=timeout)
        if run.ok:
            logger.info("found %r in perldoc %s help", request.term, mode.value)
            return LookupResult(
                term=request.term,
                found=True,
                mode=mode,
                lines=run.stdout.splitlines(),
            )
        logger.info("no %s help for %r", mode.value, request.term)

    return LookupResult(term=request.term)
