"""Turn comparison results into text or HTML for display."""

from __future__ import annotations

import html
from typing import Iterable, List

from .compare import ComparisonResult
from .diff import HighlightedBase
from .exporter import format_mutation
from .impacts import IMPLICATIONS_DISCLAIMER, IMPLICATIONS_HEADING
from .issues import STRIPPED_CHARACTERS_NOTE

HIGHLIGHT_CLASS = "mutation-highlight"
NO_MUTATIONS_MESSAGE = "No mutations found. Sequences are identical."


def render_highlight_text(bases: Iterable[HighlightedBase], marker: str = "[]") -> str:
    """Wrap mutated bases in the two characters of ``marker``."""
    opening, closing = (marker[0], marker[-1]) if marker else ("", "")
    return "".join(f"{opening}{item.base}{closing}" if item.is_mutated else item.base for item in bases)


def render_highlight_html(bases: Iterable[HighlightedBase]) -> str:
    parts = []
    for item in bases:
        base = html.escape(item.base)
        if item.is_mutated:
            parts.append(f'<span class="{HIGHLIGHT_CLASS}">{base}</span>')
        else:
            parts.append(base)
    return "".join(parts)


def format_report(result: ComparisonResult, marker: str = "[]") -> str:
    lines: List[str] = [f"Comparing sequences from {result.source}."]
    if result.stripped:
        lines.append(STRIPPED_CHARACTERS_NOTE)
    if result.issue is not None:
        lines.append(f"Error: {result.issue.message}")
        return "\n".join(lines)

    if not result.has_mutations:
        lines.append(NO_MUTATIONS_MESSAGE)
        return "\n".join(lines)

    lines.append(f"Found {len(result.mutations)} mutation(s):")
    lines.extend(f"  - {format_mutation(mutation)}" for mutation in result.mutations)
    lines.append("")
    lines.append("Visual Comparison:")
    lines.append(f"  Sequence 1: {render_highlight_text(result.highlighted_a, marker)}")
    lines.append(f"  Sequence 2: {render_highlight_text(result.highlighted_b, marker)}")

    if result.show_implications:
        lines.append("")
        lines.append(IMPLICATIONS_HEADING)
        lines.extend(f"  - {note}" for note in result.notes)
        lines.append(IMPLICATIONS_DISCLAIMER)
    return "\n".join(lines)


def format_report_html(result: ComparisonResult) -> str:
    parts: List[str] = [f'<p class="info-message">Comparing sequences from {html.escape(result.source)}.</p>']
    if result.stripped:
        parts.append(f'<p class="info-message">{STRIPPED_CHARACTERS_NOTE}</p>')
    if result.issue is not None:
        parts.append(f'<p class="error-message">{html.escape(result.issue.message)}</p>')
        return "\n".join(parts)

    if not result.has_mutations:
        parts.append(f'<p class="success-message">{NO_MUTATIONS_MESSAGE}</p>')
        return "\n".join(parts)

    parts.append(f"<h3>Found {len(result.mutations)} mutation(s):</h3>")
    parts.append("<ul>" + "".join(f"<li>{html.escape(format_mutation(m))}</li>" for m in result.mutations) + "</ul>")
    parts.append("<h4>Visual Comparison:</h4>")
    parts.append(
        '<div class="sequence-display">'
        f"<p><strong>Sequence 1:</strong> {render_highlight_html(result.highlighted_a)}</p>"
        f"<p><strong>Sequence 2:</strong> {render_highlight_html(result.highlighted_b)}</p>"
        "</div>"
    )
    if result.show_implications:
        parts.append(f"<h4>{IMPLICATIONS_HEADING}</h4>")
        parts.append("<ul>" + "".join(f"<li>{html.escape(note)}</li>" for note in result.notes) + "</ul>")
        parts.append(f'<p class="disclaimer">{html.escape(IMPLICATIONS_DISCLAIMER)}</p>')
    return "\n".join(parts)
