"""
Run the ohhell test suite from the project root.

    python tests.py              # whole suite
    python tests.py -k bidding   # extra arguments go straight to pytest

The engine needs numpy for the simulation summaries and the suite needs pytest;
if either is missing the package is installed in editable mode with its
``dev`` extra first.
"""
from __future__ import annotations

import importlib.util
import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent
REQUIRED = ("pytest", "numpy")


def missing_modules() -> list[str]:
    return [name for name in REQUIRED if importlib.util.find_spec(name) is None]


def install_dev_extra() -> None:
    print(f"Missing {', '.join(missing_modules())}; installing ohhell[dev] ...")
    subprocess.check_call([sys.executable, "-m", "pip", "install", "-e", ".[dev]"], cwd=str(ROOT))


def main(argv: list[str] | None = None) -> int:
    if missing_modules():
        install_dev_extra()
    args = sys.argv[1:] if argv is None else argv
    return subprocess.call([sys.executable, "-m", "pytest", *args], cwd=str(ROOT))


if __name__ == "__main__":
    sys.exit(main())
