"""Positional substitution scan between two cleaned sequences."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Mutation:
    """Single-base substitution; ``position`` is 1-based."""

    position: int
    ref: str
    alt: str

    @property
    def from_base(self) -> str:
        return self.ref

    @property
    def to_base(self) -> str:
        return self.alt


@dataclass(frozen=True)
class HighlightedBase:
    base: str
    is_mutated: bool


@dataclass(frozen=True)
class DiffResult:
    mutations: Tuple[Mutation, ...]
    highlighted_a: Tuple[HighlightedBase, ...]
    highlighted_b: Tuple[HighlightedBase, ...]

    @property
    def identical(self) -> bool:
        return not self.mutations


def diff_sequences(a: str, b: str) -> DiffResult:
    """Compare ``a`` and ``b`` position by position.

    Both strings must have the same length; callers reject mismatched
    lengths before getting here.
    """
    mutations: List[Mutation] = []
    highlighted_a: List[HighlightedBase] = []
    highlighted_b: List[HighlightedBase] = []

    for index, (base_a, base_b) in enumerate(zip(a, b)):
        mutated = base_a != base_b
        if mutated:
            mutations.append(Mutation(position=index + 1, ref=base_a, alt=base_b))
        highlighted_a.append(HighlightedBase(base_a, mutated))
        highlighted_b.append(HighlightedBase(base_b, mutated))

    logger.debug("Scanned %d positions, %d substitution(s)", len(highlighted_a), len(mutations))
    return DiffResult(
        mutations=tuple(mutations),
        highlighted_a=tuple(highlighted_a),
        highlighted_b=tuple(highlighted_b),
    )
