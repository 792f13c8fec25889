from mutation_finder.compare import MANUAL_SOURCE, compare_sequences
from mutation_finder.diff import Mutation
from mutation_finder.impacts import LARGE_MUTATION_NOTE
from mutation_finder.issues import IssueKind


def test_compare_reports_mutations():
    result = compare_sequences("atcg", "ATTG")
    assert result.ok
    assert result.source == MANUAL_SOURCE
    assert result.mutations == (Mutation(3, "C", "T"),)
    assert (result.length_a, result.length_b) == (4, 4)
    assert result.stripped is False
    assert result.notes == []
    assert not result.show_implications


def test_compare_empty_input():
    result = compare_sequences("xyz", "ACGT")
    assert result.issue.kind is IssueKind.EMPTY_INPUT
    assert result.mutations == ()


def test_compare_length_mismatch_reports_both_lengths():
    result = compare_sequences("ATCG", "ATC")
    assert result.issue.kind is IssueKind.LENGTH_MISMATCH
    assert "4 bases" in result.issue.message
    assert "3 bases" in result.issue.message
    assert result.mutations == ()


def test_compare_flags_stripped_characters():
    result = compare_sequences("AT-CG", "ATCG")
    assert result.ok
    assert result.stripped
    assert not result.has_mutations


def test_compare_attaches_notes():
    a = "A" * 60
    b = "A" * 49 + "T" + "A" * 10
    result = compare_sequences(a, b)
    assert len(result.mutations) == 1
    assert result.show_implications
    assert "position 50 (A→T)" in result.notes[0]


def test_compare_custom_threshold():
    result = compare_sequences("AAAA", "CCCC", threshold=3)
    assert result.notes == [LARGE_MUTATION_NOTE]
