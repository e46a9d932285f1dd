"""Inspection handle: lazy, cached access to a callable's attributes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from types import ModuleType
from typing import Any

from funcinfo.core.attribute_table import ATTRIBUTES, AttributeDescriptor
from funcinfo.core.errors import InvalidArgument, UnknownAttribute
from funcinfo.core.provider_registry import ProviderRegistry, default_registry
from funcinfo.models.report import InspectionReport

logger = logging.getLogger("funcinfo.information")


class Information:
    """Inspection handle for one callable.

    The handle keeps a strong reference to the callable for as long as it
    lives. Attribute values are computed on first request, by a provider that
    is only imported at that point, and cached unless the attribute reflects
    live call-stack state (``variables``, ``dump``). Values are therefore those
    of the callable at request time, not at construction time.

    >>> info = Information(len)
    >>> info.name
    'len'
    """

    def __init__(
        self,
        target: Any,
        *,
        registry: ProviderRegistry | None = None,
        attributes: Mapping[str, AttributeDescriptor] | None = None,
    ) -> None:
        if not callable(target):
            raise InvalidArgument(
                f"Argument to inspect() must be callable, not {type(target).__name__}"
            )
        self._target = target
        self._registry = registry or default_registry()
        self._attributes = ATTRIBUTES if attributes is None else attributes
        self._cache: dict[str, Any] = {}
        self._lock = threading.RLock()

    @classmethod
    def create(cls, target: Any, **kwargs: Any) -> Information:
        return cls(target, **kwargs)

    @property
    def target(self) -> Any:
        return self._target

    @property
    def cache(self) -> Mapping[str, Any]:
        """Read-only view of the values computed so far."""
        return dict(self._cache)

    def available_attributes(self) -> list[str]:
        return list(self._attributes)

    def get(self, attribute: str) -> Any:
        """Return the value of ``attribute``, computing and caching it as needed.

        Returns ``None`` and logs a warning when the attribute's provider cannot
        be loaded; later calls try the load again.
        """
        descriptor = self._attributes.get(attribute)
        if descriptor is None:
            raise UnknownAttribute(attribute)

        return self._resolve(descriptor)[1]

    def _resolve(self, descriptor: AttributeDescriptor) -> tuple[bool, Any]:
        """Load the provider, then serve from cache or compute.

        Returns ``(False, None)`` when the provider is unavailable, even if a
        value was cached while it still loaded.
        """
        with self._lock:
            available, provider_module = self._provider_for(descriptor)
            if not available:
                return False, None

            if descriptor.cacheable and descriptor.name in self._cache:
                return True, self._cache[descriptor.name]

            value = descriptor.compute(provider_module, self._target)
            if descriptor.cacheable:
                self._cache[descriptor.name] = value
            return True, value

    def _provider_for(self, descriptor: AttributeDescriptor) -> tuple[bool, ModuleType | None]:
        if descriptor.provider is None:
            return True, None
        load = self._registry.load(descriptor.provider)
        if not load.ok:
            logger.warning(
                "Skipping %s. Could not load source provider %s: %s",
                descriptor.name,
                descriptor.provider,
                load.error.cause if load.error else "unknown error",
            )
            return False, None
        return True, load.module

    def report(self, attributes: Iterable[str] | None = None) -> InspectionReport:
        """Gather several attributes into an ``InspectionReport``.

        Attributes whose provider is unavailable are listed in ``skipped``.
        """
        names = list(attributes) if attributes is not None else [
            name for name, descriptor in self._attributes.items() if descriptor.cacheable
        ]
        values: dict[str, Any] = {}
        skipped: list[str] = []
        for name in names:
            descriptor = self._attributes.get(name)
            if descriptor is None:
                raise UnknownAttribute(name)
            available, value = self._resolve(descriptor)
            if not available:
                skipped.append(name)
                continue
            values[name] = value
        return InspectionReport(target=repr(self._target), attributes=values, skipped=skipped)

    @property
    def address(self) -> int:
        """Identity of the callable, stable for its lifetime."""
        return self.get("address")

    @property
    def blessed(self) -> str | None:
        """Qualified class name for callable instances, ``None`` for plain functions."""
        return self.get("blessed")

    @property
    def code(self) -> str | None:
        """Source text of the callable."""
        return self.get("code")

    @property
    def fullname(self) -> str | None:
        return self.get("fullname")

    @property
    def name(self) -> str | None:
        return self.get("name")

    @property
    def package(self) -> str | None:
        return self.get("package")

    @property
    def variables(self) -> dict[str, Any] | None:
        """Variables visible to the callable. Recomputed on every access."""
        return self.get("variables")

    def dump(self) -> str | None:
        """Structural dump of the callable's internals. Recomputed on every call."""
        return self.get("dump")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"
