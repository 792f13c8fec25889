"""Sequence cleaning before comparison."""

from __future__ import annotations

import re
from dataclasses import dataclass

DNA_BASES = "ATCG"
NON_DNA_PATTERN = re.compile(r"[^ATCG]")


@dataclass(frozen=True)
class NormalizedSequence:
    cleaned: str
    was_modified: bool


def normalize_sequence(raw: str) -> NormalizedSequence:
    """Uppercase ``raw`` and drop every character outside A, T, C, G.

    ``was_modified`` only tracks removed characters: lowercase input that
    is otherwise clean is not reported as modified.
    """
    cleaned = NON_DNA_PATTERN.sub("", raw.upper())
    return NormalizedSequence(cleaned=cleaned, was_modified=len(cleaned) != len(raw))
