# tests/conftest.py
from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

TESTS_DIR = Path(__file__).resolve().parent
REPO_ROOT = TESTS_DIR.parent

# Make "import handwriting2json" work when running pytest from a plain checkout
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# Fast, deterministic test defaults (must be set before the settings singleton loads)
os.environ.setdefault("COMPUTER_VISION_KEY", "test-key")
os.environ.setdefault("URI_BASE", "http://localhost:9999/vision/v2.0/recognizeText")
os.environ.setdefault("POLL_INTERVAL_SEC", "0")

SUCCEEDED_BODY = '{"status":"Succeeded","recognitionResult":{"lines":[{"text":"hello"}]}}'
RUNNING_BODY = '{"status":"Running"}'


def make_response(status_code: int = 202, text: str = "", headers=None) -> Mock:
    resp = Mock()
    resp.status_code = status_code
    resp.text = text
    resp.headers = headers or {}
    return resp


def make_session(submit: Mock, polls=()) -> Mock:
    """Session stand-in: post() returns `submit`, get() walks through `polls`."""
    session = Mock()
    session.post.return_value = submit
    session.get.side_effect = [make_response(200, text) for text in polls]
    return session


@pytest.fixture
def image(tmp_path: Path) -> Path:
    p = tmp_path / "note.jpg"
    p.write_bytes(b"\xff\xd8\xff\xe0fake-jpeg")
    return p


@pytest.fixture
def accepted():
    return make_response(
        202, headers={"Operation-Location": "http://localhost:9999/operations/abc"}
    )
