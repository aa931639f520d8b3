"""Import checks for the wallrnd package in a fresh interpreter."""

import os
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).parent.parent

MODULES = [
    "wallrnd",
    "wallrnd.geometry",
    "wallrnd.color",
    "wallrnd.shapes",
    "wallrnd.tiling",
    "wallrnd.paint",
    "wallrnd.scene",
    "wallrnd.config",
    "wallrnd.svg",
    "wallrnd.preview",
    "wallrnd.cli",
]


def run_python(*args):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, *args],
        cwd=ROOT_DIR, env=env, capture_output=True, text=True, timeout=120,
    )


class TestImport:
    """Tests for importing the package from scratch."""

    def test_every_module_imports(self):
        """Each module imports cleanly in a new interpreter."""
        for name in MODULES:
            result = run_python("-c", f"import {name}")
            assert result.returncode == 0, f"{name}: {result.stderr}"

    def test_cli_module_runs(self, tmp_path):
        """The command line runs as a module."""
        filepath = tmp_path / "init.json"
        result = run_python("-m", "wallrnd.cli", "--init", str(filepath))
        assert result.returncode == 0, result.stderr
        assert filepath.exists()
