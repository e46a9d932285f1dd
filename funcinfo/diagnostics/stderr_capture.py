"""Capture text written to sys.stderr into memory.

Some providers report through the diagnostic stream instead of returning a
value. ``capture_stderr`` swaps ``sys.stderr`` for an in-memory sink while the
provider runs and always puts the original stream back.
"""

from __future__ import annotations

import io
import sys
import threading
from collections.abc import Callable
from typing import Any

from funcinfo.core.errors import DiagnosticCaptureFailure

# sys.stderr is process-wide; one thread at a time may open capture windows,
# which may nest.
_CAPTURE_LOCK = threading.RLock()


def capture_stderr(action: Callable[[], Any]) -> str:
    """Run ``action`` and return everything it wrote to sys.stderr.

    Errors raised by ``action`` propagate after the original stream has been
    restored. Failures of the redirection itself raise
    ``DiagnosticCaptureFailure``.
    """
    if action is None:
        raise DiagnosticCaptureFailure("No action supplied to capture.")

    with _CAPTURE_LOCK:
        original = sys.stderr
        if original is None:
            raise DiagnosticCaptureFailure("sys.stderr is not available for redirection.")
        try:
            original.flush()
        except (OSError, ValueError) as exc:
            raise DiagnosticCaptureFailure(f"error flushing stderr before capture: {exc}") from exc

        sink = io.StringIO()
        sys.stderr = sink
        try:
            action()
        finally:
            sys.stderr = original

        try:
            return sink.getvalue()
        except ValueError as exc:
            raise DiagnosticCaptureFailure(f"error reading captured stderr: {exc}") from exc
        finally:
            sink.close()
