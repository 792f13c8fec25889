"""Command-line interface for Mutation Finder."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from . import __version__
from .compare import compare_sequences
from .config import FETCH_DEFAULTS, RuntimeConfig, collect_runtime_config
from .exporter import export_mutations, write_export, write_mutations_csv
from .fetch import FetchError, FetchRequest, fetch_fasta
from .io.fasta import LoadedFasta, describe_record, read_fasta
from .issues import ValidationIssue
from .logging_utils import configure_logging, get_logger
from .render import format_report, format_report_html
from .session import SessionState, load_file, resolve_inputs, select_record

Handler = Callable[[argparse.Namespace, RuntimeConfig], int]

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mutfinder",
        description="Mutation Finder - compare two DNA sequences base by base.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_compare_parser(subparsers)
    _add_records_parser(subparsers)
    _add_fetch_parser(subparsers)
    return parser


def _add_compare_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("compare", help="Compare two sequences and list substitutions.")
    parser.add_argument("--seq-a", help="First sequence, typed directly.")
    parser.add_argument("--seq-b", help="Second sequence, typed directly.")
    parser.add_argument("--fasta-a", type=Path, help="FASTA file holding the first sequence.")
    parser.add_argument("--fasta-b", type=Path, help="FASTA file holding the second sequence.")
    parser.add_argument(
        "--index-a",
        type=int,
        default=None,
        help="Record index in --fasta-a (default: 0 when the file holds a single record).",
    )
    parser.add_argument(
        "--index-b",
        type=int,
        default=None,
        help="Record index in --fasta-b (default: 0 when the file holds a single record).",
    )
    parser.add_argument("--html", action="store_true", help="Print the report as an HTML fragment.")
    parser.add_argument(
        "--marker",
        default="[]",
        help="Characters wrapped around mutated bases in the text report (default: []).",
    )
    parser.add_argument("--export", action="store_true", help="Write the mutation list as a dated .txt file.")
    parser.add_argument("--csv", action="store_true", help="Also write the mutation list as CSV.")
    parser.add_argument(
        "--export-dir",
        type=Path,
        default=None,
        help="Directory for exported files (default: MUTFINDER_EXPORT_DIR or data/exports).",
    )
    parser.set_defaults(handler=_handle_compare)


def _add_records_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("records", help="List the records of a FASTA file.")
    parser.add_argument("fasta", type=Path, help="FASTA file path.")
    parser.set_defaults(handler=_handle_records)


def _add_fetch_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("fetch", help="Download a nucleotide FASTA record from NCBI.")
    parser.add_argument("accession", help="NCBI accession, e.g. NM_000546.6.")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=FETCH_DEFAULTS.out_dir,
        help="Directory for downloaded FASTA files.",
    )
    parser.add_argument("--email", help="Contact email for NCBI (default: NCBI_EMAIL).")
    parser.add_argument("--api-key", help="NCBI API key (default: NCBI_API_KEY).")
    parser.add_argument("--timeout", type=int, default=FETCH_DEFAULTS.timeout, help="HTTP timeout in seconds.")
    parser.add_argument(
        "--retries",
        type=int,
        default=FETCH_DEFAULTS.retries,
        help="Number of attempts for transient network errors.",
    )
    parser.set_defaults(handler=_handle_fetch)


def _handle_compare(args: argparse.Namespace, config: RuntimeConfig) -> int:
    logger = get_logger()
    use_files = args.fasta_a is not None or args.fasta_b is not None
    use_text = args.seq_a is not None or args.seq_b is not None
    if use_files and use_text:
        logger.error("Use either --seq-a/--seq-b or --fasta-a/--fasta-b, not both.")
        return EXIT_INVALID_INPUT

    state = SessionState(manual_a=args.seq_a or "", manual_b=args.seq_b or "")
    if use_files:
        if args.fasta_a is None or args.fasta_b is None:
            logger.error("Both --fasta-a and --fasta-b are required to compare FASTA records.")
            return EXIT_INVALID_INPUT
        for slot, path, index in (("a", args.fasta_a, args.index_a), ("b", args.fasta_b, args.index_b)):
            loaded = _load_fasta(path, config)
            if not loaded.ok:
                return _report_issue(loaded.issue)
            state = load_file(state, slot, loaded)
            state = _select(state, slot, loaded, index)

    resolved = resolve_inputs(state)
    if isinstance(resolved, ValidationIssue):
        return _report_issue(resolved)

    result = compare_sequences(
        resolved.raw_a,
        resolved.raw_b,
        source=resolved.source,
        threshold=config.mutation_threshold,
    )
    print(format_report_html(result) if args.html else format_report(result, marker=args.marker))
    if not result.ok:
        return EXIT_INVALID_INPUT

    if result.has_mutations and (args.export or args.csv):
        export_dir = args.export_dir or config.export_dir
        payload = export_mutations(result.mutations)
        if args.export:
            write_export(payload, export_dir)
        if args.csv:
            write_mutations_csv(result.mutations, export_dir / Path(payload.filename).with_suffix(".csv").name)
    return EXIT_OK


def _handle_records(args: argparse.Namespace, config: RuntimeConfig) -> int:
    loaded = _load_fasta(args.fasta, config)
    if not loaded.ok:
        return _report_issue(loaded.issue)
    for index, record in enumerate(loaded.records):
        print(f"{index}: {describe_record(record)}")
    return EXIT_OK


def _handle_fetch(args: argparse.Namespace, config: RuntimeConfig) -> int:
    request = FetchRequest(
        accession=args.accession,
        out_dir=args.out_dir,
        email=args.email or config.ncbi_email,
        api_key=args.api_key or config.ncbi_api_key,
        sleep=0.1 if (args.api_key or config.ncbi_api_key) else FETCH_DEFAULTS.sleep,
        timeout=args.timeout,
        retries=args.retries,
    )
    result = fetch_fasta(request, get_logger("fetch"))
    print(result.fasta_path)
    return EXIT_OK


def _load_fasta(path: Path, config: RuntimeConfig) -> LoadedFasta:
    _require_input(path)
    return read_fasta(path, max_bytes=config.max_file_bytes)


def _select(state: SessionState, slot: str, loaded: LoadedFasta, index: Optional[int]) -> SessionState:
    if index is None and len(loaded.records) == 1:
        index = 0
    return select_record(state, slot, index)


def _report_issue(issue: Optional[ValidationIssue]) -> int:
    get_logger().error("%s", issue)
    return EXIT_INVALID_INPUT


def _require_input(path: Path) -> None:
    if not Path(path).exists():
        raise FileNotFoundError(f"Input file not found: {path}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    logger = get_logger()
    handler: Handler = args.handler

    try:
        return handler(args, collect_runtime_config())
    except (FileNotFoundError, FetchError) as exc:
        logger.error(str(exc))
        return EXIT_FAILURE
    except Exception:  # pragma: no cover - safety net
        logger.exception("Unexpected error")
        return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
