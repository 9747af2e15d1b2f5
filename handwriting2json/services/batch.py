# handwriting2json/services/batch.py
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional, Union

from handwriting2json.config import Settings, settings as default_settings
from handwriting2json.models import Outcome, RecognitionResult
from handwriting2json.services.discovery import is_valid_directory, list_candidates
from handwriting2json.services.recognize import process_file

log = logging.getLogger(__name__)

Worker = Callable[[Path], RecognitionResult]


def run_batch(
    directory: Union[str, Path],
    *,
    settings: Optional[Settings] = None,
    max_parallel: Optional[int] = None,
    worker: Optional[Worker] = None,
) -> List[RecognitionResult]:
    """
    Run the recognition workflow over every file in `directory`.

    - One worker call per file, at most `max_parallel` at a time
      (default: settings.MAX_PARALLEL); the rest queue for a free slot.
    - Results come back in completion order; there is no ordering across files.
    - A worker that raises only fails its own file.
    """
    cfg = settings or default_settings
    if not is_valid_directory(directory):
        raise NotADirectoryError(str(directory))

    if worker is None:

        def worker(p: Path) -> RecognitionResult:
            return process_file(p, settings=cfg)

    limit = max_parallel or cfg.MAX_PARALLEL
    files = list_candidates(directory)
    log.debug(f"dispatching {len(files)} file(s) with {limit} worker(s)")

    results: List[RecognitionResult] = []
    with ThreadPoolExecutor(max_workers=limit) as pool:
        futures = {pool.submit(worker, fp): fp for fp in files}
        for fut in as_completed(futures):
            fp = futures[fut]
            try:
                results.append(fut.result())
            except Exception as e:
                log.error(f"{fp.name}: {e}")
                results.append(
                    RecognitionResult(path=fp, outcome=Outcome.FAILED, message=str(e))
                )
    return results
