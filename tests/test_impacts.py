from mutation_finder.diff import Mutation
from mutation_finder.impacts import (
    KNOWN_MUTATION_IMPACTS,
    LARGE_MUTATION_NOTE,
    KnownImpact,
    annotate_mutations,
)


def test_known_position_produces_one_note():
    notes = annotate_mutations([Mutation(50, "A", "T")])
    assert notes == [
        "Mutation at position 50 (A→T): associated with an increased risk of Condition X. (Illustrative)"
    ]


def test_wrong_bases_do_not_match():
    assert annotate_mutations([Mutation(50, "A", "G"), Mutation(123, "G", "C")]) == []


def test_large_count_note_comes_first_and_only_once():
    mutations = [Mutation(i, "A", "C") for i in range(1, 12)] + [Mutation(200, "T", "C")]
    notes = annotate_mutations(mutations)
    assert notes[0] == LARGE_MUTATION_NOTE
    assert notes.count(LARGE_MUTATION_NOTE) == 1
    assert len(notes) == 2
    assert notes[1].startswith("Mutation at position 200 (T→C)")


def test_threshold_is_exclusive():
    mutations = [Mutation(i, "A", "C") for i in range(1, 11)]
    assert annotate_mutations(mutations) == []


def test_duplicate_table_entries_each_emit_a_note():
    table = KNOWN_MUTATION_IMPACTS + (KnownImpact(50, "A", "T", "second note"),)
    notes = annotate_mutations([Mutation(50, "A", "T"), Mutation(123, "C", "G")], impacts=table)
    assert len(notes) == 3
    assert notes[1].endswith("second note")
    assert "Gene Y" in notes[2]
