import json
from pathlib import Path

import pytest

from scoop_search import main as cli


@pytest.fixture
def buckets_root(monkeypatch, tmp_path: Path) -> Path:
    root = tmp_path / "buckets"
    root.mkdir()
    monkeypatch.setattr(cli, "resolve_buckets_root", lambda: root)
    monkeypatch.setattr(cli, "init_logger", lambda **kwargs: None)
    return root


def _make_bucket(root: Path, bucket: str, manifests: dict[str, object]) -> None:
    manifest_dir = root / bucket / "bucket"
    manifest_dir.mkdir(parents=True)
    for name, content in manifests.items():
        (manifest_dir / f"{name}.json").write_text(json.dumps(content), encoding="utf-8")


def test_main_prints_matches_and_returns_zero(buckets_root: Path, capsys) -> None:
    _make_bucket(
        buckets_root,
        "main",
        {"git": {"version": "2.40"}, "curl": {"version": "8.0", "bin": "curl.exe"}},
    )

    code = cli.main(["cur"])

    assert code == 0
    assert capsys.readouterr().out == "'main' bucket:\n    curl (8.0)\n\n"


def test_main_returns_one_when_nothing_matches(buckets_root: Path, capsys) -> None:
    _make_bucket(buckets_root, "main", {"git": {"version": "2.40"}})

    code = cli.main(["nothing-here"])

    assert code == 1
    assert capsys.readouterr().out == "No matches found.\n"


def test_main_reports_fatal_errors_on_stderr(buckets_root: Path, capsys) -> None:
    _make_bucket(buckets_root, "main", {})
    (buckets_root / "main" / "bucket" / "broken.json").write_text("{", encoding="utf-8")

    code = cli.main(["curl"])

    captured = capsys.readouterr()
    assert code == 2
    assert captured.out == ""
    assert "broken.json" in captured.err


def test_main_reports_missing_scoop(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setattr(cli, "resolve_buckets_root", lambda: tmp_path / "missing")
    monkeypatch.setattr(cli, "init_logger", lambda **kwargs: None)

    code = cli.main(["curl"])

    assert code == 2
    assert "is Scoop installed" in capsys.readouterr().err


def test_main_prints_hook_without_query(capsys) -> None:
    code = cli.main(["--hook"])

    assert code == 0
    assert capsys.readouterr().out.startswith("function scoop {")


@pytest.mark.parametrize("argv", [[], ["   "]])
def test_main_rejects_missing_or_blank_query(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)

    assert exc_info.value.code == 2
