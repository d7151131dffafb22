"""Atajo de desarrollo: `python main.py services` sin `pip install -e .`.

Los paquetes viven bajo `src/`, así que se añade al path antes de importar
la CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
