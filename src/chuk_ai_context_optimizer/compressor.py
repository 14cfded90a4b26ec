# chuk_ai_context_optimizer/compressor.py
"""
Text compression for assembled context.

Three levels, each a superset of the previous one:

- NONE: identity
- LIGHT: collapse whitespace runs, collapse repeated ``.`` and ``!``, trim
- AGGRESSIVE: LIGHT plus removal of intensity adverbs ("very", "really")
  and hedges ("I think", "perhaps"), whole words only, any case

Compression is idempotent: every pass only deletes characters, and the
transform is repeated until the text stops changing, so removing one
word can never leave behind a new match for the next call.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from chuk_ai_context_optimizer.constants import HEDGE_PHRASES, INTENSITY_ADVERBS
from chuk_ai_context_optimizer.models import CompressionLevel

_WHITESPACE_RUN = re.compile(r"\s+")
_REPEATED_DOTS = re.compile(r"\.{2,}")
_REPEATED_BANGS = re.compile(r"!{2,}")


def _word_pattern(words: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(r"\s+".join(re.escape(part) for part in word.split()) for word in words)
    return re.compile(rf"\b(?:{alternatives})\b\s*", re.IGNORECASE)


class CompressorConfig(BaseModel):
    """Word lists removed at the AGGRESSIVE level."""

    intensity_adverbs: tuple[str, ...] = Field(default=INTENSITY_ADVERBS)
    hedge_phrases: tuple[str, ...] = Field(default=HEDGE_PHRASES)


class Compressor:
    """Applies a named compression level to text."""

    def __init__(self, config: CompressorConfig | None = None) -> None:
        self.config = config or CompressorConfig()
        self._adverbs = _word_pattern(self.config.intensity_adverbs) if self.config.intensity_adverbs else None
        self._hedges = _word_pattern(self.config.hedge_phrases) if self.config.hedge_phrases else None

    def compress(self, text: str | None, level: CompressionLevel | str = CompressionLevel.LIGHT) -> str:
        """Compress ``text`` at ``level``; unknown level strings raise ``ValueError``."""
        level = CompressionLevel(level)
        if not text:
            return ""
        if level == CompressionLevel.NONE:
            return text

        current = text
        while True:
            compressed = self._light(current)
            if level == CompressionLevel.AGGRESSIVE:
                compressed = self._strip_filler(compressed)
            if compressed == current:
                return compressed
            current = compressed

    @staticmethod
    def _light(text: str) -> str:
        text = _WHITESPACE_RUN.sub(" ", text)
        text = _REPEATED_DOTS.sub(".", text)
        text = _REPEATED_BANGS.sub("!", text)
        return text.strip()

    def _strip_filler(self, text: str) -> str:
        if self._adverbs:
            text = self._adverbs.sub("", text)
        if self._hedges:
            text = self._hedges.sub("", text)
        return self._light(text)


_default_compressor = Compressor()


def compress(text: str | None, level: CompressionLevel | str = CompressionLevel.LIGHT) -> str:
    """Compress with the default word lists."""
    return _default_compressor.compress(text, level)
