"""
CLI tests, run against a temp copy of the sample docs tree.
"""

import json
from pathlib import Path

import pytest

from impltables.app_shell.cli import main


def run(docs_root: Path, *args: str) -> int:
    return main(["--rules", str(docs_root / "missing.yaml"), "--root", str(docs_root), *args])


def test_list(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "list") == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "core::iter::traits::Extend\t3 crates\t4 entries",
        "core::ops::Drop\t2 crates\t6 entries",
    ]


def test_show(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "show", "core::ops::Drop") == 0
    out = capsys.readouterr().out
    assert "Implementors of core::ops::Drop:" in out
    assert "  - impl<'stmt> Drop for Rows<'stmt>" in out


def test_show_unknown_trait(docs_root: Path) -> None:
    assert run(docs_root, "show", "core::clone::Clone") == 1


def test_dump_json(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "dump", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert set(data) == {"core::ops::Drop", "core::iter::traits::Extend"}
    assert list(data["core::ops::Drop"]) == ["postgres", "rusqlite"]


def test_dump_text(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "dump") == 0
    assert "  lru_cache: 1" in capsys.readouterr().out


def test_check_passes(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "check") == 0
    assert "Checked 2 artifacts, 0 mismatched." in capsys.readouterr().out


def test_check_reports_mismatch(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = docs_root / "implementors" / "core" / "ops" / "trait.Drop.js"
    target.write_text(target.read_text().replace('",];', '"];', 1))
    assert run(docs_root, "check") == 1
    assert "MISMATCH core/ops/trait.Drop.js" in capsys.readouterr().out


def test_malformed_artifact_skipped(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = docs_root / "implementors" / "core" / "trait.Broken.js"
    bad.write_text("not a script")
    assert run(docs_root, "list") == 0
    out = capsys.readouterr().out
    assert "core::Broken" not in out
    assert "core::ops::Drop" in out


def test_load_with_hook(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "load") == 0
    out = capsys.readouterr().out
    assert "core::ops::Drop: delivered via hook" in out
    assert "Catalog: 2 traits, 4 crates" in out
    assert "Pending slot" not in out


def test_load_without_hook(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run(docs_root, "load", "--no-hook") == 0
    out = capsys.readouterr().out
    assert "core::iter::traits::Extend: delivered via pending" in out
    # last load wins the slot
    assert "Pending slot holds 2 crates: postgres, rusqlite" in out


def test_rules_file_disables_hook(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rules = docs_root / "impltables.yaml"
    rules.write_text("loader:\n  deliver_to_hook: false\n")
    assert main(["--rules", str(rules), "--root", str(docs_root), "load"]) == 0
    assert "delivered via hook" not in capsys.readouterr().out


def test_missing_root(tmp_path: Path) -> None:
    assert main(["--root", str(tmp_path / "nope"), "list"]) == 1


def test_invalid_rules(tmp_path: Path) -> None:
    rules = tmp_path / "impltables.yaml"
    rules.write_text("bogus: true\n")
    assert main(["--rules", str(rules), "--root", str(tmp_path), "list"]) == 1


def test_undecodable_artifact_skipped(
    docs_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (docs_root / "implementors" / "core" / "trait.Bad.js").write_bytes(b"\xff\xfe garbage")
    assert run(docs_root, "list") == 0
    out = capsys.readouterr().out
    assert "core::Bad" not in out
    assert "core::ops::Drop" in out
    assert run(docs_root, "dump", "--json") == 0
    assert "core::Bad" not in json.loads(capsys.readouterr().out)


def test_check_flags_undecodable_artifact(
    docs_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (docs_root / "implementors" / "core" / "trait.Bad.js").write_bytes(b"\xff\xfe")
    assert run(docs_root, "check") == 1
    out = capsys.readouterr().out
    assert "UNREADABLE core/trait.Bad.js" in out
    assert "Checked 3 artifacts, 1 mismatched." in out


def test_show_undecodable_artifact(docs_root: Path) -> None:
    (docs_root / "implementors" / "core" / "trait.Bad.js").write_bytes(b"\xff\xfe")
    assert run(docs_root, "show", "core::Bad") == 1


@pytest.mark.parametrize("trait", ["::", "..::..::etc::Passwd"])
def test_show_bad_trait_path(docs_root: Path, trait: str) -> None:
    assert run(docs_root, "show", trait) == 1
