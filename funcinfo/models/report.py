"""Serializable inspection report."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class InspectionReport(BaseModel):
    """Attribute values gathered from one inspection handle."""

    target: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    skipped: list[str] = Field(default_factory=list)

    def json_safe(self) -> dict[str, Any]:
        """Dump to plain JSON types, falling back to ``repr`` for runtime values."""
        return {
            "target": self.target,
            "attributes": {k: _json_safe(v) for k, v in self.attributes.items()},
            "skipped": list(self.skipped),
        }


def _json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, dict):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return repr(value)
