from pathlib import Path
from typing import Final

from logly import logger
from PySide6.QtCore import QMutex, QMutexLocker, QThreadPool

from scoop_search.core.errors import BucketsRootError, ScoopNotInstalledError
from scoop_search.core.scoop_types import AggregateResults, BucketResults
from scoop_search.infra.qt_bucket_worker import BucketScanWorker

# Manifests live in this subfolder of every bucket checkout.
MANIFEST_SUBDIR: Final[str] = "bucket"


class MatchAggregator:
    """Collects per-bucket results written concurrently by scan workers."""

    def __init__(self) -> None:
        self._mutex = QMutex()
        self._results: AggregateResults = {}
        self._failures: dict[str, Exception] = {}

    def put(self, bucket: str, matches: BucketResults) -> None:
        with QMutexLocker(self._mutex):
            if bucket in self._results:
                raise RuntimeError(f"bucket {bucket!r} reported twice")
            self._results[bucket] = matches

    def fail(self, bucket: str, error: Exception) -> None:
        with QMutexLocker(self._mutex):
            self._failures[bucket] = error

    def finalize(self, buckets: list[str]) -> AggregateResults:
        """Returns the collected results, or raises the first bucket failure.

        Must only be called after every worker has finished. When several buckets
        failed, the one with the lowest name is raised so the reported error does
        not depend on thread scheduling.

        Args:
            buckets: Names of every bucket a worker was started for.

        Raises:
            RuntimeError: If the reported buckets differ from `buckets`.
        """
        with QMutexLocker(self._mutex):
            if self._failures:
                first = min(self._failures)
                raise self._failures[first]
            missing = set(buckets) - self._results.keys()
            unexpected = self._results.keys() - set(buckets)
            if missing or unexpected:
                raise RuntimeError(
                    f"bucket results incomplete: missing={sorted(missing)} "
                    f"unexpected={sorted(unexpected)}"
                )
            return dict(self._results)


class BucketScanner:
    """Searches every bucket under a Scoop buckets root concurrently."""

    def __init__(self, root: Path):
        """Initializes the scanner.

        Args:
            root: Buckets root, usually `~/scoop/buckets`.
        """
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def discover_buckets(self) -> list[str]:
        """Lists bucket names (immediate subdirectories of the root), sorted.

        Raises:
            ScoopNotInstalledError: If the root does not exist.
            BucketsRootError: If the root cannot be listed for another reason.
        """
        try:
            entries = list(self._root.iterdir())
        except FileNotFoundError as e:
            raise ScoopNotInstalledError(self._root) from e
        except OSError as e:
            raise BucketsRootError(self._root, e.strerror or str(e)) from e
        return sorted(p.name for p in entries if p.is_dir())

    def scan(self, query: str) -> AggregateResults:
        """Matches manifests in all buckets against a query.

        Args:
            query: Raw user query. It is lowercased once for every bucket.

        Returns:
            One entry per bucket, empty buckets included.

        Raises:
            ValueError: If the query is blank.
            ScoopSearchError: On any unreadable root, bucket or manifest, or a
                malformed manifest. No partial results are returned.
        """
        if not query.strip():
            raise ValueError("search term must not be blank")

        term = query.lower()
        buckets = self.discover_buckets()
        logger.debug(f"Discovered {len(buckets)} buckets under {self._root}")

        aggregator = MatchAggregator()
        if not buckets:
            return aggregator.finalize(buckets)

        pool = QThreadPool()
        pool.setMaxThreadCount(len(buckets))

        workers = [
            BucketScanWorker(
                bucket=name,
                manifest_dir=self._root / name / MANIFEST_SUBDIR,
                term=term,
                on_finished=aggregator.put,
                on_failed=aggregator.fail,
            )
            for name in buckets
        ]
        for worker in workers:
            pool.start(worker)
        pool.waitForDone()

        results = aggregator.finalize(buckets)
        logger.debug(
            f"Scan finished buckets={len(results)} "
            f"matches={sum(len(v) for v in results.values())}"
        )
        return results
