# chuk_ai_context_optimizer/exceptions.py
"""Errors raised by the context optimizer."""

from __future__ import annotations

from collections.abc import Iterable


class InvalidPresetName(ValueError):
    """Raised when an unknown optimization preset is requested."""

    def __init__(self, name: object, valid_names: Iterable[str]) -> None:
        self.name = name
        self.valid_names = tuple(valid_names)
        super().__init__(f"Invalid optimization level {name!r}. Available options: {', '.join(self.valid_names)}")
