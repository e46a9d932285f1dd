"""Lexical variables of a callable: locals, cells and closure variables.

Values are only meaningful while the callable is running somewhere on the
current call stack. Outside of that, locals map to ``None`` and only closure
cells that already hold a value are reported.
"""

from __future__ import annotations

import inspect
import types
from typing import Any

from funcinfo.providers.targets import code_object, underlying_function


def variable_names(code: types.CodeType) -> list[str]:
    names: list[str] = []
    for name in (*code.co_varnames, *code.co_cellvars, *code.co_freevars):
        if name not in names:
            names.append(name)
    return names


def _runs_function(frame: types.FrameType, function: Any, code: types.CodeType) -> bool:
    """Whether ``frame`` sees the closure cells of ``function``.

    Closures made by the same factory share one code object, so the code alone
    does not tell sibling closures apart.
    """
    cells = getattr(function, "__closure__", None) or ()
    frame_locals = frame.f_locals
    for name, cell in zip(code.co_freevars, cells):
        try:
            contents = cell.cell_contents
        except ValueError:
            if name in frame_locals:
                return False
            continue
        if name not in frame_locals or frame_locals[name] is not contents:
            return False
    return True


def active_frame(function: Any, code: types.CodeType) -> types.FrameType | None:
    """Innermost frame on the current stack that is executing ``function``."""
    frame = inspect.currentframe()
    try:
        while frame is not None:
            if frame.f_code is code and _runs_function(frame, function, code):
                return frame
            frame = frame.f_back
        return None
    finally:
        del frame


def _closure_values(function: Any, code: types.CodeType) -> dict[str, Any]:
    values: dict[str, Any] = {}
    cells = getattr(function, "__closure__", None) or ()
    for name, cell in zip(code.co_freevars, cells):
        try:
            values[name] = cell.cell_contents
        except ValueError:
            values[name] = None
    return values


def peek_variables(target: Any) -> dict[str, Any]:
    """Map every variable name visible to ``target`` to its current value."""
    code = code_object(target)
    if code is None:
        return {}

    names = variable_names(code)
    variables: dict[str, Any] = dict.fromkeys(names)
    function = underlying_function(target)
    variables.update(_closure_values(function, code))

    frame = active_frame(function, code)
    if frame is not None:
        try:
            frame_locals = frame.f_locals
            for name in names:
                if name in frame_locals:
                    variables[name] = frame_locals[name]
        finally:
            del frame
    return variables
