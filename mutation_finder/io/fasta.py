"""Lightweight FASTA parsing utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..issues import ValidationIssue, no_fasta_records, oversized_file, unreadable_file

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_BYTES = 5 * 1024 * 1024
HEADER_PREVIEW_WIDTH = 70


@dataclass(frozen=True)
class FastaRecord:
    header: str
    sequence: str


@dataclass
class LoadedFasta:
    """Records read from one file, or the reason none are available."""

    path: Path
    records: List[FastaRecord] = field(default_factory=list)
    issue: Optional[ValidationIssue] = None

    @property
    def ok(self) -> bool:
        return self.issue is None


def parse_fasta(text: str) -> List[FastaRecord]:
    """Parse raw FASTA text into records, in file order."""
    return list(parse_fasta_lines(text.split("\n")))


def parse_fasta_lines(lines: Iterable[str]) -> Iterator[FastaRecord]:
    header: Optional[str] = None
    sequence = ""

    for line in lines:
        if line.startswith(">"):
            # A header with no sequence lines never becomes a record.
            if sequence and header is not None:
                yield FastaRecord(header=header.strip(), sequence=sequence.strip())
            sequence = ""
            header = line[1:]
        else:
            sequence += line.strip()

    if sequence and header is not None:
        yield FastaRecord(header=header.strip(), sequence=sequence.strip())


def read_fasta(path: Path, max_bytes: int = DEFAULT_MAX_FILE_BYTES) -> LoadedFasta:
    """Check the size ceiling, read the file and parse it.

    Raises FileNotFoundError for a missing path; every other problem is
    reported through ``LoadedFasta.issue``.
    """
    path = Path(path)
    size = path.stat().st_size
    if size > max_bytes:
        logger.warning("Rejecting %s: %d bytes exceeds the %d byte ceiling", path, size, max_bytes)
        return LoadedFasta(path=path, issue=oversized_file(path.name, size, max_bytes))

    logger.info("Reading file: %s", path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return LoadedFasta(path=path, issue=unreadable_file(path.name, str(exc)))

    records = parse_fasta(text)
    if not records:
        return LoadedFasta(path=path, issue=no_fasta_records(path.name))

    logger.info("Loaded %d FASTA record(s) from %s", len(records), path.name)
    return LoadedFasta(path=path, records=records)


def describe_record(record: FastaRecord, width: int = HEADER_PREVIEW_WIDTH) -> str:
    """Short label for record pickers: truncated header plus length in bp."""
    preview = record.header[:width].strip()
    ellipsis = "..." if len(record.header) > width else ""
    return f"{preview}{ellipsis} ({len(record.sequence)} bp)"
