"""
Submit → poll → persist workflow for a single image.

recognize_file() runs the linear flow and returns one RecognitionResult:
    submit rejected   -> <stem>-ERROR-<code>.json  (Outcome.SUBMISSION_ERROR)
    poll budget spent -> <stem>-TIMEOUT.json       (Outcome.TIMEOUT)
    status Succeeded  -> <stem>.json               (Outcome.SUCCEEDED)

process_file() is the per-file boundary used by the batch driver: it owns the
HTTP client for that file and turns any exception into Outcome.FAILED.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from handwriting2json.config import Settings, settings as default_settings
from handwriting2json.models import Outcome, RecognitionResult
from handwriting2json.services import outputs
from handwriting2json.services.vision_client import (
    VisionClient,
    error_code,
    is_succeeded,
)

log = logging.getLogger(__name__)

ClientFactory = Callable[[Settings], VisionClient]


def _pretty(text: str) -> str:
    return json.dumps(json.loads(text), indent=2, ensure_ascii=False)


def _is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def recognize_file(
    path: Union[str, Path],
    *,
    client: VisionClient,
    poll_attempts: int,
    poll_interval: float,
    sleep: Callable[[float], None] = time.sleep,
    log: logging.Logger = log,
) -> RecognitionResult:
    """Run one image through the recognition service and write its artifact.

    Errors (unreadable file, network, malformed JSON) propagate to the caller.
    """
    path = Path(path)
    data = path.read_bytes()

    response = client.submit(data)
    if not _is_success_status(response.status_code):
        body = response.text
        log.info(f"Response:\n{_pretty(body)}")
        code = error_code(body)
        out = outputs.write_error(path, code, body)
        log.warning(f"{path.name}: submission rejected ({code}) -> {out.name}")
        return RecognitionResult(
            path=path,
            outcome=Outcome.SUBMISSION_ERROR,
            output_path=out,
            error_code=code,
        )

    location = client.operation_location(response)

    # The result is not ready immediately; wait before every poll.
    text = ""
    attempts = 0
    while attempts < poll_attempts:
        sleep(poll_interval)
        text = client.fetch(location)
        attempts += 1
        if is_succeeded(text):
            break
    else:
        log.warning(f"{path.name}: Timeout error.")
        out = outputs.write_timeout(path)
        return RecognitionResult(
            path=path, outcome=Outcome.TIMEOUT, output_path=out, attempts=attempts
        )

    log.info(f"Response:\n{_pretty(text)}")
    out = outputs.write_success(path, text)
    return RecognitionResult(
        path=path, outcome=Outcome.SUCCEEDED, output_path=out, attempts=attempts
    )


def _default_client(cfg: Settings) -> VisionClient:
    return VisionClient(cfg.COMPUTER_VISION_KEY, cfg.submit_url)


def process_file(
    path: Union[str, Path],
    *,
    settings: Optional[Settings] = None,
    client_factory: Optional[ClientFactory] = None,
    sleep: Callable[[float], None] = time.sleep,
    log: logging.Logger = log,
) -> RecognitionResult:
    """Per-file entry point: never raises, failures become Outcome.FAILED."""
    cfg = settings or default_settings
    factory = client_factory or _default_client
    path = Path(path)
    log.info(
        f"Analyzing {path} - wait a moment for the results to appear. "
        f"{datetime.now():%H:%M:%S}"
    )
    try:
        with factory(cfg) as client:
            return recognize_file(
                path,
                client=client,
                poll_attempts=cfg.POLL_ATTEMPTS,
                poll_interval=cfg.POLL_INTERVAL_SEC,
                sleep=sleep,
                log=log,
            )
    except Exception as e:
        log.error(f"{path.name}: {e}")
        return RecognitionResult(path=path, outcome=Outcome.FAILED, message=str(e))
