"""Name, qualified name and declaring module of a callable."""

from __future__ import annotations

from typing import Any

from funcinfo.providers.targets import underlying_function

ANONYMOUS_NAME = "<lambda>"


def bare_name(target: Any) -> str:
    """Unqualified name; ``<lambda>`` for anonymous functions nobody renamed."""
    function = underlying_function(target)
    name = getattr(function, "__name__", None)
    if not name:
        return ANONYMOUS_NAME
    return str(name)


def module_name(target: Any) -> str | None:
    function = underlying_function(target)
    module = getattr(function, "__module__", None)
    if module is None:
        module = getattr(getattr(function, "__objclass__", None), "__module__", None)
    return module


def full_name(target: Any) -> str:
    """``module.qualname``; just the qualname when the module is unknown."""
    function = underlying_function(target)
    qualname = getattr(function, "__qualname__", None) or bare_name(function)
    module = module_name(function)
    if not module:
        return qualname
    return f"{module}.{qualname}"
