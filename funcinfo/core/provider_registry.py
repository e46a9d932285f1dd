"""Provider registry and lazy provider loading."""

from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import ModuleType

from funcinfo.core.errors import ProviderLoadFailure

logger = logging.getLogger("funcinfo.providers")

DEFAULT_PROVIDER_MODULES: dict[str, str] = {
    "naming": "funcinfo.providers.naming",
    "source": "funcinfo.providers.source",
    "pad": "funcinfo.providers.pad",
    "peek": "funcinfo.providers.peek",
}


@dataclass
class ProviderLoad:
    """Outcome of one load attempt: a module or the failure that prevented it."""

    provider: str
    module: ModuleType | None = None
    error: ProviderLoadFailure | None = None

    @property
    def ok(self) -> bool:
        return self.module is not None


@dataclass
class RegisteredProvider:
    """Metadata for provider listing output."""

    name: str
    module: str
    loaded: bool


class ProviderRegistry:
    """Maps provider identifiers to importable modules and loads each at most once.

    Only successful loads are remembered. A failed import is reported back as a
    ``ProviderLoad`` carrying the error, and the next ``load`` call tries again,
    so repointing a provider with ``register`` takes effect immediately.
    """

    def __init__(self, modules: Mapping[str, str] | None = None) -> None:
        self._modules: dict[str, str] = dict(DEFAULT_PROVIDER_MODULES)
        if modules:
            self._modules.update(modules)
        self._loaded: dict[str, ModuleType] = {}
        self._lock = threading.Lock()

    def register(self, name: str, module_path: str) -> None:
        """Point provider ``name`` at ``module_path``, dropping any loaded module."""
        with self._lock:
            self._modules[name] = module_path
            self._loaded.pop(name, None)

    def module_path(self, name: str) -> str | None:
        return self._modules.get(name)

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def load(self, name: str) -> ProviderLoad:
        """Import provider ``name`` on first use and return the load outcome."""
        module = self._loaded.get(name)
        if module is not None:
            return ProviderLoad(provider=name, module=module)

        with self._lock:
            module = self._loaded.get(name)
            if module is not None:
                return ProviderLoad(provider=name, module=module)

            module_path = self._modules.get(name)
            if module_path is None:
                error = ProviderLoadFailure(
                    name, "<unregistered>", LookupError(f"no module registered for '{name}'")
                )
                return ProviderLoad(provider=name, error=error)
            try:
                module = importlib.import_module(module_path)
            except Exception as exc:
                return ProviderLoad(
                    provider=name, error=ProviderLoadFailure(name, module_path, exc)
                )

            self._loaded[name] = module
            logger.debug("Loaded provider %s from %s", name, module_path)
            return ProviderLoad(provider=name, module=module)

    def list_providers(self) -> list[RegisteredProvider]:
        return [
            RegisteredProvider(name=name, module=path, loaded=name in self._loaded)
            for name, path in sorted(self._modules.items())
        ]


_default_registry: ProviderRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> ProviderRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = ProviderRegistry()
    return _default_registry
