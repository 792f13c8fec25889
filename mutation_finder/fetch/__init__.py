"""Remote sequence sources."""

from .ncbi import FetchError, FetchRequest, FetchResult, fetch_fasta

__all__ = ["FetchError", "FetchRequest", "FetchResult", "fetch_fasta"]
