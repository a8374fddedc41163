"""
Module entrypoint:

  python -m johnsons_gambit play --hand left --wager 10
"""
from __future__ import annotations

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
