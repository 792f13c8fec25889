"""Normalize, validate, diff and annotate two raw sequences."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .diff import HighlightedBase, Mutation, diff_sequences
from .impacts import KNOWN_MUTATION_IMPACTS, LARGE_MUTATION_THRESHOLD, KnownImpact, annotate_mutations
from .issues import ValidationIssue, empty_input, length_mismatch
from .normalize import normalize_sequence

logger = logging.getLogger(__name__)

MANUAL_SOURCE = "manual text input"


@dataclass
class ComparisonResult:
    source: str
    length_a: int = 0
    length_b: int = 0
    stripped: bool = False
    mutations: Tuple[Mutation, ...] = ()
    highlighted_a: Tuple[HighlightedBase, ...] = ()
    highlighted_b: Tuple[HighlightedBase, ...] = ()
    notes: List[str] = field(default_factory=list)
    issue: Optional[ValidationIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None

    @property
    def has_mutations(self) -> bool:
        return bool(self.mutations)

    @property
    def show_implications(self) -> bool:
        return bool(self.notes)


def compare_sequences(
    raw_a: str,
    raw_b: str,
    source: str = MANUAL_SOURCE,
    impacts: Sequence[KnownImpact] = KNOWN_MUTATION_IMPACTS,
    threshold: int = LARGE_MUTATION_THRESHOLD,
) -> ComparisonResult:
    """Run the full comparison; problems come back on ``result.issue``."""
    norm_a = normalize_sequence(raw_a)
    norm_b = normalize_sequence(raw_b)
    result = ComparisonResult(source=source, length_a=len(norm_a.cleaned), length_b=len(norm_b.cleaned))

    if not norm_a.cleaned or not norm_b.cleaned:
        result.issue = empty_input()
        return result

    result.stripped = norm_a.was_modified or norm_b.was_modified
    if result.stripped:
        logger.info("Non-DNA characters removed before comparison")

    if result.length_a != result.length_b:
        result.issue = length_mismatch(result.length_a, result.length_b)
        return result

    diff = diff_sequences(norm_a.cleaned, norm_b.cleaned)
    result.mutations = diff.mutations
    result.highlighted_a = diff.highlighted_a
    result.highlighted_b = diff.highlighted_b
    result.notes = annotate_mutations(diff.mutations, impacts=impacts, threshold=threshold)
    logger.info("Compared %d bases: %d mutation(s)", result.length_a, len(result.mutations))
    return result
