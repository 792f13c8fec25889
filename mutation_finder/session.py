"""Input selection state and the rules deciding which inputs are active.

A ``SessionState`` is owned by whatever front end drives the comparison.
Every function here takes a state and returns a new one; nothing is
mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .compare import MANUAL_SOURCE
from .io.fasta import LoadedFasta
from .issues import ValidationIssue, selection_missing

SOURCE_HEADER_WIDTH = 50


class InputMode(str, Enum):
    FASTA = "fasta"
    MANUAL = "manual"
    NONE = "none"


@dataclass(frozen=True)
class SessionState:
    manual_a: str = ""
    manual_b: str = ""
    file_a: Optional[LoadedFasta] = None
    file_b: Optional[LoadedFasta] = None
    selected_a: Optional[int] = None
    selected_b: Optional[int] = None


@dataclass(frozen=True)
class ValidationOutcome:
    mode: InputMode
    manual_enabled: bool
    files_enabled: bool
    state: SessionState


@dataclass(frozen=True)
class ResolvedInputs:
    raw_a: str
    raw_b: str
    source: str


def _has_records(loaded: Optional[LoadedFasta]) -> bool:
    return loaded is not None and loaded.ok and bool(loaded.records)


def load_file(state: SessionState, slot: str, loaded: Optional[LoadedFasta]) -> SessionState:
    """Replace one file slot wholesale; a failed load leaves the slot empty."""
    if slot not in ("a", "b"):
        raise ValueError(f"Unknown slot: {slot}")
    kept = loaded if _has_records(loaded) else None
    if slot == "a":
        return replace(state, file_a=kept, selected_a=None)
    return replace(state, file_b=kept, selected_b=None)


def select_record(state: SessionState, slot: str, index: Optional[int]) -> SessionState:
    if slot not in ("a", "b"):
        raise ValueError(f"Unknown slot: {slot}")
    if slot == "a":
        return replace(state, selected_a=index)
    return replace(state, selected_b=index)


def validate_inputs(state: SessionState) -> ValidationOutcome:
    """Decide which input family is active.

    Two loaded files win over typed text and clear it; typed text
    otherwise disables and clears the file slots.
    """
    if _has_records(state.file_a) and _has_records(state.file_b):
        cleared = replace(state, manual_a="", manual_b="")
        return ValidationOutcome(InputMode.FASTA, manual_enabled=False, files_enabled=True, state=cleared)

    if state.manual_a.strip() or state.manual_b.strip():
        cleared = replace(state, file_a=None, file_b=None, selected_a=None, selected_b=None)
        return ValidationOutcome(InputMode.MANUAL, manual_enabled=True, files_enabled=False, state=cleared)

    return ValidationOutcome(InputMode.NONE, manual_enabled=True, files_enabled=True, state=state)


def resolve_inputs(state: SessionState) -> Union[ResolvedInputs, ValidationIssue]:
    """Pick the two raw strings to compare, plus a description of where they came from."""
    outcome = validate_inputs(state)
    if outcome.mode is not InputMode.FASTA:
        return ResolvedInputs(state.manual_a.strip(), state.manual_b.strip(), MANUAL_SOURCE)

    record_a = _selected_record(state.file_a, state.selected_a)
    record_b = _selected_record(state.file_b, state.selected_b)
    if record_a is None or record_b is None:
        return selection_missing()

    source = (
        "FASTA files: "
        f"File 1: {state.file_a.path.name} (Seq: {record_a[0][:SOURCE_HEADER_WIDTH]}...); "
        f"File 2: {state.file_b.path.name} (Seq: {record_b[0][:SOURCE_HEADER_WIDTH]}...)"
    )
    return ResolvedInputs(record_a[1], record_b[1], source)


def _selected_record(loaded: Optional[LoadedFasta], index: Optional[int]) -> Optional[Tuple[str, str]]:
    if loaded is None or index is None or not 0 <= index < len(loaded.records):
        return None
    record = loaded.records[index]
    return record.header, record.sequence
