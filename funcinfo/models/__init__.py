"""Typed settings and report models."""

from funcinfo.models.report import InspectionReport
from funcinfo.models.settings import FuncInfoSettings

__all__ = [
    "FuncInfoSettings",
    "InspectionReport",
]
