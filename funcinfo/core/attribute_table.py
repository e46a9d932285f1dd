"""Attribute dispatch table: attribute name -> provider, computation, cache policy."""

from __future__ import annotations

import functools
import types
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import Any

from funcinfo.diagnostics.stderr_capture import capture_stderr

# Callable types whose class carries no information about the callable itself.
_PLAIN_CALLABLE_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    types.ClassMethodDescriptorType,
    functools.partial,
)


@dataclass(frozen=True)
class AttributeDescriptor:
    """How one attribute is computed.

    ``compute`` receives the loaded provider module (``None`` when
    ``provider`` is ``None``) and the inspected callable.
    """

    name: str
    provider: str | None
    compute: Callable[[ModuleType | None, Any], Any]
    cacheable: bool = True


def _address(_provider: ModuleType | None, target: Any) -> int:
    return id(target)


def _blessed(_provider: ModuleType | None, target: Any) -> str | None:
    cls = type(target)
    if isinstance(target, type) or cls in _PLAIN_CALLABLE_TYPES:
        return None
    return f"{cls.__module__}.{cls.__qualname__}"


def _code(provider: ModuleType | None, target: Any) -> str | None:
    return provider.reconstruct_source(target)


def _fullname(provider: ModuleType | None, target: Any) -> str:
    return provider.full_name(target)


def _name(provider: ModuleType | None, target: Any) -> str:
    return provider.bare_name(target)


def _package(provider: ModuleType | None, target: Any) -> str | None:
    return provider.module_name(target)


def _variables(provider: ModuleType | None, target: Any) -> dict[str, Any]:
    return provider.peek_variables(target)


def _dump(provider: ModuleType | None, target: Any) -> str:
    return capture_stderr(lambda: provider.dump(target))


def _build_table(*descriptors: AttributeDescriptor) -> MappingProxyType:
    table: dict[str, AttributeDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.name in table:
            raise ValueError(f"Duplicate attribute descriptor: {descriptor.name}")
        table[descriptor.name] = descriptor
    return MappingProxyType(table)


ATTRIBUTES: MappingProxyType = _build_table(
    AttributeDescriptor("address", None, _address),
    AttributeDescriptor("blessed", None, _blessed),
    AttributeDescriptor("code", "source", _code),
    AttributeDescriptor("fullname", "naming", _fullname),
    AttributeDescriptor("name", "naming", _name),
    AttributeDescriptor("package", "naming", _package),
    AttributeDescriptor("variables", "pad", _variables, cacheable=False),
    AttributeDescriptor("dump", "peek", _dump, cacheable=False),
)
