# chuk_ai_context_optimizer/base_models.py
"""Base model with read-only mapping-style access."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class MappingCompatModel(BaseModel):
    """Base for result models that callers may consume as plain mappings.

    Allows ``obj["key"]``, ``"key" in obj``, ``obj.get("key")`` and
    comparison against a dict, so telemetry code that logs or stores
    results as dicts keeps working without a conversion step.
    """

    def __getitem__(self, key: str) -> Any:
        if key not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, key)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key in type(self).model_fields
        return False

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self) -> list[str]:
        return list(type(self).model_fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, dict):
            return self.model_dump() == other
        return super().__eq__(other)
