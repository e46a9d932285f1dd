"""Provider registry loading tests."""

from __future__ import annotations

import importlib
import sys
import threading
import time
import types

import pytest

from funcinfo.core.errors import ProviderLoadFailure
from funcinfo.core.provider_registry import (
    DEFAULT_PROVIDER_MODULES,
    ProviderRegistry,
    default_registry,
)


def test_provider_loaded_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    real_import = importlib.import_module

    def tracking_import(name: str, package: str | None = None) -> types.ModuleType:
        calls.append(name)
        return real_import(name, package)

    monkeypatch.setattr(importlib, "import_module", tracking_import)
    registry = ProviderRegistry()

    first = registry.load("naming")
    second = registry.load("naming")

    assert first.ok and second.ok
    assert first.module is second.module
    assert calls == ["funcinfo.providers.naming"]
    assert registry.is_loaded("naming")


def test_failed_load_is_not_remembered(monkeypatch: pytest.MonkeyPatch) -> None:
    registry = ProviderRegistry({"late": "funcinfo_late_provider"})

    failed = registry.load("late")
    assert not failed.ok
    assert isinstance(failed.error, ProviderLoadFailure)
    assert isinstance(failed.error.cause, ImportError)
    assert failed.error.module == "funcinfo_late_provider"
    assert not registry.is_loaded("late")

    monkeypatch.setitem(sys.modules, "funcinfo_late_provider", types.ModuleType("funcinfo_late_provider"))
    assert registry.load("late").ok


def test_unregistered_provider_fails() -> None:
    load = ProviderRegistry().load("nope")
    assert not load.ok
    assert load.error.provider == "nope"


def test_register_replaces_loaded_module(monkeypatch: pytest.MonkeyPatch) -> None:
    replacement = types.ModuleType("funcinfo_replacement_naming")
    monkeypatch.setitem(sys.modules, replacement.__name__, replacement)
    registry = ProviderRegistry()
    registry.load("naming")

    registry.register("naming", replacement.__name__)

    assert not registry.is_loaded("naming")
    assert registry.load("naming").module is replacement
    assert registry.module_path("naming") == replacement.__name__


def test_concurrent_first_use_initialises_once(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []
    module = types.ModuleType("funcinfo_slow_provider")

    def slow_import(name: str, package: str | None = None) -> types.ModuleType:
        calls.append(name)
        time.sleep(0.01)
        return module

    monkeypatch.setattr(importlib, "import_module", slow_import)
    registry = ProviderRegistry({"slow": "funcinfo_slow_provider"})
    results = []

    threads = [threading.Thread(target=lambda: results.append(registry.load("slow"))) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == ["funcinfo_slow_provider"]
    assert all(result.module is module for result in results)


def test_list_providers_and_default_registry() -> None:
    listed = {provider.name: provider.module for provider in ProviderRegistry().list_providers()}
    assert listed == DEFAULT_PROVIDER_MODULES
    assert default_registry() is default_registry()
