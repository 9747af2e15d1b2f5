"""Input discovery for a batch run.

Contract:
    list_candidates(root: Path) -> list[Path]

Behavior:
    * Looks at the entries directly inside `root` (no recursion).
    * Every non-directory entry is a candidate; there is no extension filter,
      the recognition service decides what it accepts.
    * Sorted by name so dispatch order is stable between runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union


def is_valid_directory(path: Union[str, Path, None]) -> bool:
    if not path:
        return False
    return Path(path).is_dir()


def list_candidates(root: Union[str, Path]) -> List[Path]:
    """Return the files directly under `root`, sorted by name."""
    root = Path(root)
    return sorted((p for p in root.iterdir() if not p.is_dir()), key=lambda p: p.name)
