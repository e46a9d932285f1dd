"""Entry point and namespace registration."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from types import ModuleType
from typing import Any

from funcinfo.core.errors import ConfigurationError
from funcinfo.core.information import Information

DEFAULT_EXPORT_NAME = "inspect"


def inspect(target: Any) -> Information:
    """Return an ``Information`` handle for ``target``.

    Raises ``InvalidArgument`` when ``target`` is not callable.
    """
    return Information(target)


def _namespace_dict(namespace: ModuleType | MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    if isinstance(namespace, ModuleType):
        return vars(namespace)
    if isinstance(namespace, MutableMapping):
        return namespace
    raise ConfigurationError(
        f"Cannot register into {type(namespace).__name__}; expected a module or a mapping"
    )


def register(
    namespace: ModuleType | MutableMapping[str, Any],
    options: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """Bind ``inspect`` into ``namespace`` and return the name it was bound under.

    With no options the function is bound as ``inspect``. The ``as`` option
    binds it under another name instead::

        register(globals())                  # inspect(...)
        register(globals(), {"as": "peek"})  # peek(...)

    Any other option is rejected with ``ConfigurationError``.
    """
    arg_for = dict(options or {})
    arg_for.update(kwargs)
    target = _namespace_dict(namespace)

    alias = arg_for.pop("as", None)
    if arg_for:
        keys = ", ".join(sorted(str(key) for key in arg_for))
        raise ConfigurationError(f"Unknown registration options: ({keys})")

    if alias is None:
        target[DEFAULT_EXPORT_NAME] = inspect
        return DEFAULT_EXPORT_NAME

    name = str(alias).rstrip("\n")
    if not name.isidentifier():
        raise ConfigurationError(f"Alias '{name}' is not a valid function name")
    target[name] = inspect
    return name
