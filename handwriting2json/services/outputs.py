# handwriting2json/services/outputs.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

TIMEOUT_MARKER = "TIMEOUT"


def _sibling(image: PathLike, suffix: str) -> Path:
    p = Path(image)
    return p.with_name(f"{p.stem}{suffix}.json")


def success_path(image: PathLike) -> Path:
    return _sibling(image, "")


def error_path(image: PathLike, code: str) -> Path:
    return _sibling(image, f"-ERROR-{code}")


def timeout_path(image: PathLike) -> Path:
    return _sibling(image, "-TIMEOUT")


def write_success(image: PathLike, text: str) -> Path:
    """Store the raw poll response as a JSON string value (not re-parsed)."""
    out = success_path(image)
    out.write_text(json.dumps(text, ensure_ascii=False), encoding="utf-8")
    return out


def write_error(image: PathLike, code: str, body: str) -> Path:
    out = error_path(image, code)
    out.write_text(body, encoding="utf-8")
    return out


def write_timeout(image: PathLike) -> Path:
    out = timeout_path(image)
    out.write_text(TIMEOUT_MARKER, encoding="utf-8")
    return out
