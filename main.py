"""Run the `lares` CLI straight from a checkout of the Lares site tooling.

Examples:
- `python main.py check-form form.json`
- `python main.py fetch pages --locale de`

Puts `src/` on the import path first, so `core`, `adapters` and `cli`
resolve without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
