"""Validation outcomes reported back to the caller instead of raised."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IssueKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    LENGTH_MISMATCH = "length_mismatch"
    NO_FASTA_RECORDS = "no_fasta_records"
    OVERSIZED_FILE = "oversized_file"
    SELECTION_MISSING = "selection_missing"
    UNREADABLE_FILE = "unreadable_file"


@dataclass(frozen=True)
class ValidationIssue:
    """A recoverable input problem; the user fixes it by re-entering input."""

    kind: IssueKind
    message: str

    def __str__(self) -> str:
        return self.message


STRIPPED_CHARACTERS_NOTE = "Note: Non-DNA characters (other than A, T, C, G) were removed from your input(s)."


def empty_input() -> ValidationIssue:
    return ValidationIssue(
        IssueKind.EMPTY_INPUT,
        "Please enter both DNA sequences manually, or upload and select from both FASTA files.",
    )


def length_mismatch(length_a: int, length_b: int) -> ValidationIssue:
    return ValidationIssue(
        IssueKind.LENGTH_MISMATCH,
        "DNA sequences must be of equal length for comparison! "
        f"Sequence 1 has {length_a} bases, Sequence 2 has {length_b} bases.",
    )


def no_fasta_records(name: str) -> ValidationIssue:
    return ValidationIssue(
        IssueKind.NO_FASTA_RECORDS,
        f'No valid FASTA sequences found in "{name}". '
        "Ensure it follows FASTA format (starts with '>') and contains sequence data.",
    )


def oversized_file(name: str, size_bytes: int, max_bytes: int) -> ValidationIssue:
    size_mb = size_bytes / (1024 * 1024)
    max_mb = max_bytes / (1024 * 1024)
    return ValidationIssue(
        IssueKind.OVERSIZED_FILE,
        f'File "{name}" is too large ({size_mb:.2f} MB). Maximum allowed size is {max_mb:g} MB.',
    )


def unreadable_file(name: str, reason: str) -> ValidationIssue:
    return ValidationIssue(
        IssueKind.UNREADABLE_FILE,
        f'Error reading "{name}": {reason}. Please ensure it\'s a valid text file.',
    )


def selection_missing() -> ValidationIssue:
    return ValidationIssue(
        IssueKind.SELECTION_MISSING,
        "Please select a sequence from both uploaded FASTA files.",
    )
