"""Illustrative notes attached to a handful of hardcoded positions.

None of this is real medical or genetic data; the table exists to show
how a result could be annotated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .diff import Mutation

LARGE_MUTATION_THRESHOLD = 10

LARGE_MUTATION_NOTE = (
    "A large number of mutations were detected. This could indicate significant "
    "genetic variation or potential for altered protein function."
)

IMPLICATIONS_HEADING = "Possible Implications (Illustrative Examples):"

IMPLICATIONS_DISCLAIMER = (
    'Disclaimer: The "Possible Implications" listed are illustrative examples for '
    "demonstration purposes only and are not based on real medical or genetic data. "
    "This tool is for educational use and not for diagnostic or medical advice. "
    "Always consult a qualified healthcare professional for any health concerns."
)


@dataclass(frozen=True)
class KnownImpact:
    position: int
    ref: str
    alt: str
    impact: str

    def matches(self, mutation: Mutation) -> bool:
        return (self.position, self.ref, self.alt) == (mutation.position, mutation.ref, mutation.alt)


KNOWN_MUTATION_IMPACTS: Tuple[KnownImpact, ...] = (
    KnownImpact(50, "A", "T", "associated with an increased risk of Condition X. (Illustrative)"),
    KnownImpact(123, "C", "G", "might influence the function of Gene Y. (Illustrative)"),
    KnownImpact(200, "T", "C", "potentially linked to altered protein structure. (Illustrative)"),
)


def annotate_mutations(
    mutations: Sequence[Mutation],
    impacts: Sequence[KnownImpact] = KNOWN_MUTATION_IMPACTS,
    threshold: int = LARGE_MUTATION_THRESHOLD,
) -> List[str]:
    """Return notes: the large-count note first, then table hits in mutation order."""
    notes: List[str] = []
    if len(mutations) > threshold:
        notes.append(LARGE_MUTATION_NOTE)

    for mutation in mutations:
        for known in impacts:
            if known.matches(mutation):
                notes.append(
                    f"Mutation at position {mutation.position} ({mutation.ref}→{mutation.alt}): {known.impact}"
                )
    return notes
