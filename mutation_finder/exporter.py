"""Export helpers for mutation lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from .diff import Mutation
from .io.paths import ensure_dir, write_text

logger = logging.getLogger("mutation_finder.export")

EXPORT_MIME_TYPE = "text/plain;charset=utf-8"
TABLE_COLUMNS = ["position", "ref", "alt"]


@dataclass(frozen=True)
class ExportPayload:
    filename: str
    content: str
    mime_type: str = EXPORT_MIME_TYPE


def format_mutation(mutation: Mutation) -> str:
    return f"Position {mutation.position}: {mutation.ref} → {mutation.alt}"


def export_mutations(mutations: Sequence[Mutation], today: Optional[date] = None) -> ExportPayload:
    """Build the plain-text payload offered for download.

    The filename carries the UTC date at call time unless ``today`` is given.
    """
    stamp = today or datetime.now(timezone.utc).date()
    content = "\n".join(format_mutation(mutation) for mutation in mutations)
    return ExportPayload(filename=f"dna_mutations_{stamp.isoformat()}.txt", content=content)


def write_export(payload: ExportPayload, out_dir: Path) -> Path:
    path = write_text(ensure_dir(out_dir) / payload.filename, payload.content)
    logger.info("Mutation list written to %s", path)
    return path


def mutations_table(mutations: Sequence[Mutation]) -> pd.DataFrame:
    """One row per substitution, in position order."""
    rows = [{"position": m.position, "ref": m.ref, "alt": m.alt} for m in mutations]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def write_mutations_csv(mutations: Sequence[Mutation], path: Path) -> Path:
    ensure_dir(path.parent)
    mutations_table(mutations).to_csv(path, index=False)
    logger.info("Mutation table written to %s (%d rows)", path, len(mutations))
    return path
