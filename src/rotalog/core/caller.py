from __future__ import annotations

"""
Caller Attribution.

Identifies the call site that produced a log entry. Only the single frame of
interest is fetched; the stack is never walked or formatted as a whole.
Any callable matching the `CallerResolver` signature may replace
`resolve_caller`, e.g. one returning an explicitly passed call context.
"""

import os
import sys
from typing import Callable

from rotalog.domain.entry import GLOBAL_SCOPE, CallerInfo

CallerResolver = Callable[[int], CallerInfo]

_MODULE_SCOPE = "<module>"


def resolve_caller(depth: int = 1) -> CallerInfo:
    """
    Describe the frame `depth` levels above the function calling this one.

    With depth=1 the result is the immediate caller of the function that
    invoked resolve_caller (i.e. the caller of the logging entry point).

    Args:
        depth: Number of frames to skip above the invoking function.

    Returns:
        CallerInfo: File basename, line number and function name.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return CallerInfo()

    code = frame.f_code
    function = code.co_name
    if function == _MODULE_SCOPE:
        function = GLOBAL_SCOPE
    return CallerInfo(
        file=os.path.basename(code.co_filename) or "unknown",
        line=frame.f_lineno,
        function=function,
    )
