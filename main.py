"""Run the `up` CLI from a source checkout: `python -m main ...`.

Without `pip install -e .` the `src/` packages (`cli`, `core`, `adapters`)
are not importable, so the src directory is put on `sys.path` first.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Company names and addresses are Korean; legacy Windows consoles default to cp1252.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
