"""Defaults and environment-driven settings."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

ENVIRONMENT_VARIABLES = (
    "MUTFINDER_MAX_FILE_MB",
    "MUTFINDER_MUTATION_THRESHOLD",
    "MUTFINDER_EXPORT_DIR",
    "NCBI_EMAIL",
    "NCBI_API_KEY",
)

DEFAULT_EXPORT_DIR = Path("data") / "exports"
DEFAULT_FETCH_DIR = Path("data") / "fasta"


@dataclass(slots=True)
class CompareDefaults:
    """Limits applied around a comparison request."""

    max_file_mb: float = 5.0
    mutation_threshold: int = 10
    export_dir: Path = DEFAULT_EXPORT_DIR


@dataclass(slots=True)
class FetchDefaults:
    """Options surfaced on the CLI fetch command."""

    out_dir: Path = DEFAULT_FETCH_DIR
    db: str = "nuccore"
    rettype: str = "fasta"
    retmode: str = "text"
    tool: str = "mutfinder"
    sleep: float = 0.34
    timeout: int = 30
    retries: int = 3


COMPARE_DEFAULTS = CompareDefaults()
FETCH_DEFAULTS = FetchDefaults()

PathLike = Union[str, Path]


@dataclass
class RuntimeConfig:
    max_file_mb: float
    mutation_threshold: int
    export_dir: Path
    ncbi_email: Optional[str]
    ncbi_api_key: Optional[str]

    @property
    def max_file_bytes(self) -> int:
        return int(self.max_file_mb * 1024 * 1024)


def collect_runtime_config(env_file: Optional[PathLike] = None) -> RuntimeConfig:
    """Source the closest .env (without overriding the process env) and read settings."""
    dotenv_path = Path(env_file) if env_file else find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
        logger.debug("Loaded environment from %s", dotenv_path)

    env = os.environ
    export_dir = env.get("MUTFINDER_EXPORT_DIR")
    return RuntimeConfig(
        max_file_mb=_read_number(env, "MUTFINDER_MAX_FILE_MB", COMPARE_DEFAULTS.max_file_mb, float),
        mutation_threshold=_read_number(
            env, "MUTFINDER_MUTATION_THRESHOLD", COMPARE_DEFAULTS.mutation_threshold, int
        ),
        export_dir=Path(export_dir) if export_dir else COMPARE_DEFAULTS.export_dir,
        ncbi_email=env.get("NCBI_EMAIL") or None,
        ncbi_api_key=env.get("NCBI_API_KEY") or None,
    )


def _read_number(env, key: str, default, cast):
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s", key, raw, cast.__name__)
        return default
    if not math.isfinite(value):
        logger.warning("Ignoring %s=%r: not a finite number", key, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", key, raw)
        return default
    return value
