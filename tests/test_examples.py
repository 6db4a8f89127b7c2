"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def _run(*args: str) -> subprocess.CompletedProcess:
    script = ROOT / "examples" / "paths_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    return subprocess.run(
        [sys.executable, str(script), *args],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,
    )


def test_paths_demo_runs() -> None:
    """Test that examples/paths_demo.py runs successfully."""
    result = _run()

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    assert "6 vertices, 8 edges" in result.stdout
    assert "0 to 4 (2): 0-2-4" in result.stdout
    assert "0 to 4 (4): 0-5-3-2-4" in result.stdout
    assert "vertices reached by a longer path: [1, 2, 4]" in result.stdout


def test_paths_demo_other_graph() -> None:
    """Test the demo on the three-component graph from another source."""
    result = _run(str(ROOT / "examples" / "data" / "tinyG.txt"), "9")

    assert result.returncode == 0, result.stderr
    assert "bfs: 9,10,11,12," in result.stdout
    assert "9 to 0 (-): not connected" in result.stdout
