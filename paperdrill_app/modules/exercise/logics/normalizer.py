# File: paperdrill_app/modules/exercise/logics/normalizer.py
"""
Answer normalization.

Policy:
- lowercase
- drop the punctuation set  . , / # ! $ % ^ & * ; : { } = - _ ` ~ ( )
- whitespace: COLLAPSE keeps word boundaries (single spaces, trimmed),
  STRIP removes whitespace entirely so "a b" and "ab" compare equal.
COLLAPSE is the default: tile boundaries are part of the answer.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Union

PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()"

_PUNCT_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")
_WS_RE = re.compile(r"\s+")


class WhitespaceMode(str, Enum):
    COLLAPSE = "collapse"
    STRIP = "strip"

    @classmethod
    def parse(cls, raw: Union[str, "WhitespaceMode", None]) -> "WhitespaceMode":
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw or cls.COLLAPSE.value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown whitespace mode {raw!r}; expected 'collapse' or 'strip'") from None


def normalize(text: Optional[str], mode: WhitespaceMode = WhitespaceMode.COLLAPSE) -> str:
    """Canonical form used for answer comparison; idempotent."""
    if not text:
        return ""
    t = text.lower()
    t = _PUNCT_RE.sub("", t)
    if mode is WhitespaceMode.STRIP:
        return _WS_RE.sub("", t)
    return _WS_RE.sub(" ", t).strip()


def answers_match(reference: str, candidate: str, mode: WhitespaceMode = WhitespaceMode.COLLAPSE) -> bool:
    """Strict equality after normalization; no partial credit."""
    return normalize(reference, mode) == normalize(candidate, mode)
