"""Network-assisted smoke test for the fetch command."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
PKG_ROOT = ROOT


def _run_cli(args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = f"{PKG_ROOT}{os.pathsep}{env.get('PYTHONPATH', '')}"
    env["PYTHONIOENCODING"] = "utf-8"
    return subprocess.run(
        [sys.executable, "-m", "mutation_finder.cli", *args],
        cwd=cwd or ROOT,
        env=env,
        check=False,
        text=True,
        capture_output=True,
    )


@pytest.mark.skipif(os.environ.get("MUTFINDER_SKIP_NETWORK") == "1", reason="network access disabled")
def test_fetch_single_accession(tmp_path: Path) -> None:
    out_dir = tmp_path / "fasta"
    proc = _run_cli(["fetch", "NC_045512.2", "--out-dir", str(out_dir)], cwd=tmp_path)
    assert proc.returncode == 0, proc.stderr
    fasta = out_dir / "NC_045512.2.fasta"
    assert fasta.exists() and fasta.read_text(encoding="utf-8").startswith(">")
