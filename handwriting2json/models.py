# handwriting2json/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Outcome(str, Enum):
    SUCCEEDED = "succeeded"
    SUBMISSION_ERROR = "submission_error"
    TIMEOUT = "timeout"
    FAILED = "failed"


class RecognitionError(RuntimeError):
    """The recognition service answered in a shape we cannot follow."""


@dataclass
class RecognitionResult:
    """Terminal state of one file's submit → poll → persist run."""

    path: Path
    outcome: Outcome
    output_path: Optional[Path] = None
    error_code: Optional[str] = None
    attempts: int = 0
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCEEDED
