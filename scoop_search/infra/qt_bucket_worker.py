from pathlib import Path
from typing import Callable

from logly import logger
from PySide6.QtCore import QRunnable

from scoop_search.core.manifest_matcher import matching_manifests
from scoop_search.core.scoop_types import BucketResults


class BucketScanWorker(QRunnable):
    """Scans one bucket on a `QThreadPool` thread.

    Exactly one of `on_finished` or `on_failed` is called per run. Both are invoked
    on the pool thread, so they must be safe to call concurrently.
    """

    def __init__(
        self,
        bucket: str,
        manifest_dir: Path,
        term: str,
        on_finished: Callable[[str, BucketResults], None],
        on_failed: Callable[[str, Exception], None],
    ):
        super().__init__()
        self._bucket = bucket
        self._manifest_dir = manifest_dir
        self._term = term
        self._on_finished = on_finished
        self._on_failed = on_failed
        # Lifetime is owned by the scanner, not by the pool.
        self.setAutoDelete(False)

    @property
    def bucket(self) -> str:
        return self._bucket

    def run(self):
        """Matches the bucket's manifests and reports the result."""
        try:
            logger.debug(f"Scanning bucket={self._bucket} path={self._manifest_dir}")
            matches = matching_manifests(self._manifest_dir, self._term)
        except Exception as e:
            # Exceptions cannot cross the pool boundary; hand them to the scanner.
            logger.exception(f"Bucket scan failed bucket={self._bucket}")
            self._on_failed(self._bucket, e)
            return

        logger.debug(f"Bucket scanned bucket={self._bucket} matches={len(matches)}")
        self._on_finished(self._bucket, matches)
