"""Lazy, cached introspection of Python callables."""

from funcinfo.core.attribute_table import ATTRIBUTES, AttributeDescriptor
from funcinfo.core.errors import (
    ConfigurationError,
    DiagnosticCaptureFailure,
    FuncInfoError,
    InvalidArgument,
    ProviderLoadFailure,
    UnknownAttribute,
)
from funcinfo.core.information import Information
from funcinfo.core.provider_registry import ProviderRegistry, default_registry
from funcinfo.core.registration import inspect, register
from funcinfo.diagnostics.stderr_capture import capture_stderr

__version__ = "0.2.0"

__all__ = [
    "ATTRIBUTES",
    "AttributeDescriptor",
    "ConfigurationError",
    "DiagnosticCaptureFailure",
    "FuncInfoError",
    "Information",
    "InvalidArgument",
    "ProviderLoadFailure",
    "ProviderRegistry",
    "UnknownAttribute",
    "capture_stderr",
    "default_registry",
    "inspect",
    "register",
]
