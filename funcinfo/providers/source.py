"""Source text of a callable, recovered from its defining file."""

from __future__ import annotations

import inspect
import logging
import textwrap
from typing import Any

from funcinfo.providers.targets import underlying_function

logger = logging.getLogger("funcinfo.providers.source")


def reconstruct_source(target: Any) -> str | None:
    """Return dedented source for ``target`` or ``None`` when none is available.

    Builtins and functions created through ``exec``/``compile`` without a
    backing file have no source.
    """
    function = underlying_function(target)
    try:
        lines, _ = inspect.getsourcelines(function)
    except (OSError, TypeError) as exc:
        logger.debug("No source for %r: %s", function, exc)
        return None
    return textwrap.dedent("".join(lines))
