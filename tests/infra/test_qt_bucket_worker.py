from pathlib import Path

from scoop_search.core.errors import ManifestParseError
from scoop_search.core.scoop_types import Match
from scoop_search.infra import qt_bucket_worker
from scoop_search.infra.qt_bucket_worker import BucketScanWorker


def _make_worker(
    manifest_dir: Path,
) -> tuple[BucketScanWorker, list[tuple[str, list[Match]]], list[tuple[str, Exception]]]:
    finished: list[tuple[str, list[Match]]] = []
    failed: list[tuple[str, Exception]] = []
    worker = BucketScanWorker(
        bucket="main",
        manifest_dir=manifest_dir,
        term="cur",
        on_finished=lambda bucket, matches: finished.append((bucket, matches)),
        on_failed=lambda bucket, error: failed.append((bucket, error)),
    )
    return worker, finished, failed


def test_run_reports_matches(monkeypatch, tmp_path: Path) -> None:
    def fake_matching_manifests(path: Path, term: str) -> list[Match]:
        assert path == tmp_path
        assert term == "cur"
        return [Match(name="curl", version="8.0")]

    monkeypatch.setattr(qt_bucket_worker, "matching_manifests", fake_matching_manifests)
    worker, finished, failed = _make_worker(tmp_path)

    worker.run()

    assert finished == [("main", [Match(name="curl", version="8.0")])]
    assert failed == []


def test_run_reports_failure_instead_of_raising(monkeypatch, tmp_path: Path) -> None:
    error = ManifestParseError(tmp_path / "curl.json", "bad json")

    def fake_matching_manifests(path: Path, term: str) -> list[Match]:
        raise error

    monkeypatch.setattr(qt_bucket_worker, "matching_manifests", fake_matching_manifests)
    worker, finished, failed = _make_worker(tmp_path)

    worker.run()

    assert finished == []
    assert failed == [("main", error)]


def test_worker_is_not_auto_deleted(tmp_path: Path) -> None:
    worker, _, _ = _make_worker(tmp_path)

    assert worker.autoDelete() is False
    assert worker.bucket == "main"
