import pytest

from mutation_finder.normalize import normalize_sequence


def test_normalize_strips_and_uppercases():
    result = normalize_sequence("atcgXX")
    assert result.cleaned == "ATCG"
    assert result.was_modified is True


def test_case_change_alone_is_not_flagged():
    result = normalize_sequence("acgt")
    assert result.cleaned == "ACGT"
    assert result.was_modified is False


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_blank_input_normalizes_to_empty(raw):
    assert normalize_sequence(raw).cleaned == ""


@pytest.mark.parametrize("raw", ["atcgXX", "A T C G", "nnACGu-t", "GATTACA"])
def test_normalize_is_idempotent(raw):
    once = normalize_sequence(raw).cleaned
    assert normalize_sequence(once).cleaned == once
    assert normalize_sequence(once).was_modified is False
