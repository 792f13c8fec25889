"""Download nucleotide FASTA records from NCBI Entrez.

Network access lives here only; the comparison pipeline never imports this package.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import requests

from ..io.fasta import parse_fasta
from ..io.paths import ensure_dir, safe_filename, write_text

EFETCH_ENDPOINT = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/efetch.fcgi"


class FetchError(RuntimeError):
    """Raised when NCBI cannot deliver a usable FASTA record."""


@dataclass(slots=True)
class FetchRequest:
    """Parameters used to query NCBI."""

    accession: str
    out_dir: Path
    db: str = "nuccore"
    rettype: str = "fasta"
    retmode: str = "text"
    email: str | None = None
    tool: str = "mutfinder"
    api_key: str | None = None
    sleep: float = 0.34
    timeout: int = 30
    retries: int = 3


@dataclass(slots=True)
class FetchResult:
    accession: str
    fasta_path: Path
    record_count: int


class NCBIClient:
    """Thin wrapper around requests with retries."""

    def __init__(self, request: FetchRequest, logger, session: requests.Session | None = None) -> None:
        self.request = request
        self.logger = logger
        self.session = session or requests.Session()

    def efetch(self, accession: str) -> str:
        params = {
            "db": self.request.db,
            "id": accession,
            "rettype": self.request.rettype,
            "retmode": self.request.retmode,
            **self._shared_params(),
        }
        last_exc: Exception | None = None
        for attempt in range(1, self.request.retries + 1):
            try:
                response = self.session.get(EFETCH_ENDPOINT, params=params, timeout=self.request.timeout)
                response.raise_for_status()
                if self.request.sleep > 0:
                    time.sleep(self.request.sleep)
                return response.text
            except requests.RequestException as exc:
                last_exc = exc
                self.logger.warning(
                    "Request to %s failed (attempt %s/%s): %s",
                    EFETCH_ENDPOINT,
                    attempt,
                    self.request.retries,
                    exc,
                )
                if attempt == self.request.retries:
                    break
                time.sleep(2 ** (attempt - 1))
        raise FetchError(f"Failed to fetch {accession} from NCBI: {last_exc}") from last_exc

    def _shared_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"tool": self.request.tool}
        if self.request.email:
            params["email"] = self.request.email
        if self.request.api_key:
            params["api_key"] = self.request.api_key
        return params


def fetch_fasta(request: FetchRequest, logger, session: requests.Session | None = None) -> FetchResult:
    """Fetch one accession and store it as ``<accession>.fasta`` in ``out_dir``.

    This is an acquisition helper that sits outside the comparison core: it
    performs network I/O and raises ``FetchError``, while the parsing and
    comparison functions stay pure and never raise.
    """

    accession = request.accession.strip()
    if not accession:
        raise FetchError("An accession is required.")
    if request.retries < 1:
        raise FetchError("retries must be at least 1.")

    client = NCBIClient(request, logger, session=session)
    logger.info("Fetching %s from NCBI %s", accession, request.db)
    fasta_text = client.efetch(accession)

    records = parse_fasta(fasta_text)
    if not records:
        raise FetchError(f"NCBI returned no FASTA record for {accession}.")

    if not fasta_text.endswith("\n"):
        fasta_text += "\n"
    fasta_path = write_text(ensure_dir(request.out_dir) / f"{safe_filename(accession)}.fasta", fasta_text)
    logger.info("Saved %d record(s) to %s", len(records), fasta_path)
    return FetchResult(accession=accession, fasta_path=fasta_path, record_count=len(records))
