from pathlib import Path

from mutation_finder.io.fasta import FastaRecord, describe_record, parse_fasta, read_fasta
from mutation_finder.issues import IssueKind


def test_parse_fasta_merges_sequence_lines():
    records = parse_fasta(">h1\nAT\nCG\n>h2\nGG")
    assert records == [FastaRecord("h1", "ATCG"), FastaRecord("h2", "GG")]


def test_parse_fasta_empty_input():
    assert parse_fasta("") == []


def test_parse_fasta_record_count_matches_headers():
    text = "\n".join(f">seq{i} sample\nACGT\n  TTAA  \n" for i in range(5))
    records = parse_fasta(text)
    assert len(records) == 5
    assert records[3].header == "seq3 sample"
    assert records[3].sequence == "ACGTTTAA"


def test_parse_fasta_drops_header_without_sequence():
    records = parse_fasta(">empty\n>full\nACGT\n")
    assert records == [FastaRecord("full", "ACGT")]


def test_parse_fasta_without_header_yields_nothing():
    assert parse_fasta("ACGT\nTTGG\n") == []


def test_parse_fasta_keeps_raw_characters_and_strips_crlf():
    records = parse_fasta(">  weird header \r\nac-gN\r\nxx\r\n")
    assert records == [FastaRecord("weird header", "ac-gNxx")]


def test_read_fasta_from_file(tmp_path: Path):
    in_path = tmp_path / "in.fasta"
    in_path.write_text(">a\nAA\n>b c\ncc\n", encoding="utf-8")
    loaded = read_fasta(in_path)
    assert loaded.ok
    assert [r.header for r in loaded.records] == ["a", "b c"]


def test_read_fasta_reports_missing_records(tmp_path: Path):
    in_path = tmp_path / "plain.txt"
    in_path.write_text("just some text\n", encoding="utf-8")
    loaded = read_fasta(in_path)
    assert loaded.records == []
    assert loaded.issue.kind is IssueKind.NO_FASTA_RECORDS
    assert "plain.txt" in loaded.issue.message


def test_read_fasta_rejects_oversized_file(tmp_path: Path):
    in_path = tmp_path / "big.fasta"
    in_path.write_text(">a\n" + "A" * 200 + "\n", encoding="utf-8")
    loaded = read_fasta(in_path, max_bytes=100)
    assert loaded.issue.kind is IssueKind.OVERSIZED_FILE
    assert loaded.records == []


def test_read_fasta_reports_undecodable_bytes(tmp_path: Path):
    in_path = tmp_path / "binary.fasta"
    in_path.write_bytes(b">a\n\xff\xfe\x00ACGT")
    loaded = read_fasta(in_path)
    assert loaded.issue.kind is IssueKind.UNREADABLE_FILE


def test_describe_record_truncates_long_headers():
    record = FastaRecord("X" * 80, "ACGT")
    assert describe_record(record) == "X" * 70 + "... (4 bp)"
    assert describe_record(FastaRecord("short", "AC")) == "short (2 bp)"


def test_read_fasta_ignores_byte_order_mark(tmp_path: Path):
    in_path = tmp_path / "bom.fasta"
    in_path.write_text("\ufeff>h1\nACGT\n", encoding="utf-8")
    loaded = read_fasta(in_path)
    assert loaded.ok
    assert loaded.records == [FastaRecord("h1", "ACGT")]


def test_parse_fasta_drops_lines_before_first_header():
    assert parse_fasta("AC\n>h\nGG") == [FastaRecord("h", "GG")]
