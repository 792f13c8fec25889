from datetime import date
from pathlib import Path

from mutation_finder.diff import Mutation
from mutation_finder.exporter import export_mutations, mutations_table, write_export, write_mutations_csv


MUTATIONS = [Mutation(3, "C", "T"), Mutation(10, "A", "G"), Mutation(42, "G", "C")]


def test_export_payload_lines_and_name():
    payload = export_mutations(MUTATIONS, today=date(2024, 5, 1))
    assert payload.filename == "dna_mutations_2024-05-01.txt"
    assert payload.mime_type == "text/plain;charset=utf-8"
    lines = payload.content.split("\n")
    assert lines == ["Position 3: C → T", "Position 10: A → G", "Position 42: G → C"]


def test_export_uses_current_date_by_default():
    payload = export_mutations(MUTATIONS)
    assert payload.filename.startswith("dna_mutations_")
    assert payload.filename.endswith(".txt")
    assert len(payload.filename) == len("dna_mutations_2024-05-01.txt")


def test_empty_export_has_empty_content():
    assert export_mutations([], today=date(2024, 5, 1)).content == ""


def test_write_export_creates_directory(tmp_path: Path):
    payload = export_mutations(MUTATIONS, today=date(2024, 5, 1))
    path = write_export(payload, tmp_path / "nested" / "out")
    assert path.name == payload.filename
    assert path.read_text(encoding="utf-8") == payload.content


def test_mutations_table_and_csv(tmp_path: Path):
    frame = mutations_table(MUTATIONS)
    assert list(frame.columns) == ["position", "ref", "alt"]
    assert frame["position"].tolist() == [3, 10, 42]

    csv_path = write_mutations_csv(MUTATIONS, tmp_path / "m.csv")
    assert csv_path.read_text(encoding="utf-8").splitlines()[0] == "position,ref,alt"


def test_mutations_table_empty():
    assert mutations_table([]).empty
