"""IO helpers for Mutation Finder."""

from .fasta import FastaRecord, LoadedFasta, describe_record, parse_fasta, read_fasta
from .paths import ensure_dir, write_text

__all__ = [
    "FastaRecord",
    "LoadedFasta",
    "describe_record",
    "parse_fasta",
    "read_fasta",
    "ensure_dir",
    "write_text",
]
