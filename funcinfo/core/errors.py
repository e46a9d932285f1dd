"""Exception hierarchy for callable inspection."""

from __future__ import annotations


class FuncInfoError(Exception):
    """Base class for all funcinfo errors."""


class InvalidArgument(FuncInfoError, TypeError):
    """Raised when the inspected value is not callable."""


class UnknownAttribute(FuncInfoError, KeyError, AttributeError):
    """Raised when an attribute name has no descriptor."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown attribute '{self.name}'"


class ProviderLoadFailure(FuncInfoError, ImportError):
    """A provider module could not be imported.

    Never raised out of ``Information.get``; it travels inside a
    ``ProviderLoad`` result and is reported as a warning.
    """

    def __init__(self, provider: str, module: str, cause: BaseException) -> None:
        super().__init__(f"Could not load provider '{provider}' ({module}): {cause}")
        self.provider = provider
        self.module = module
        self.cause = cause


class DiagnosticCaptureFailure(FuncInfoError, RuntimeError):
    """Redirecting or restoring sys.stderr failed."""


class ConfigurationError(FuncInfoError, ValueError):
    """Bad registration options or configuration contents."""
