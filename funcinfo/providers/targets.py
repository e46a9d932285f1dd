"""Resolve the function object behind an arbitrary callable."""

from __future__ import annotations

import functools
import inspect
import types
from typing import Any


def underlying_function(target: Any) -> Any:
    """Return the function that actually runs when ``target`` is called.

    Unwraps bound methods, ``functools.partial`` objects, ``functools.wraps``
    chains and callable instances. Builtins and classes come back unchanged.
    """
    seen: set[int] = set()
    current = target
    while id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, types.MethodType):
            current = current.__func__
        elif isinstance(current, functools.partial):
            current = current.func
        elif isinstance(current, types.FunctionType) and hasattr(current, "__wrapped__"):
            current = inspect.unwrap(current)
        elif not isinstance(current, (type, types.FunctionType, types.BuiltinFunctionType)):
            call = getattr(type(current), "__call__", None)
            if isinstance(call, types.FunctionType):
                current = call
        else:
            break
    return current


def code_object(target: Any) -> types.CodeType | None:
    """Return the code object executed by ``target``, if it has one."""
    return getattr(underlying_function(target), "__code__", None)
