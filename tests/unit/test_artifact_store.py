"""
Unit tests for ArtifactStore.
"""

from pathlib import Path

import pytest

from impltables.adapters.fs.artifact_store import ArtifactStore
from impltables.domain.entities import TraitRef

DROP_PATH = Path("core/ops/trait.Drop.js")
EXTEND_PATH = Path("core/iter/traits/trait.Extend.js")


class TestDiscover:
    def test_finds_sample_artifacts(self, store: ArtifactStore) -> None:
        assert store.discover() == [EXTEND_PATH, DROP_PATH]

    def test_ignores_other_files(self, store: ArtifactStore, docs_root: Path) -> None:
        (docs_root / "implementors" / "core" / "notes.js").write_text("x")
        (docs_root / "implementors" / "core" / "trait.Bad-Name.js").write_text("x")
        assert store.discover() == [EXTEND_PATH, DROP_PATH]

    def test_missing_implementors_dir(self, tmp_path: Path) -> None:
        assert ArtifactStore(tmp_path).discover() == []

    def test_missing_root(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ArtifactStore(tmp_path / "nope")


class TestReadWrite:
    def test_read(self, store: ArtifactStore) -> None:
        text = store.read(DROP_PATH)
        assert text.startswith("(function() {var implementors = {};\n")
        assert text.endswith("})()\n")

    def test_read_missing(self, store: ArtifactStore) -> None:
        with pytest.raises(FileNotFoundError):
            store.read("core/ops/trait.Clone.js")

    def test_write_creates_parents(self, store: ArtifactStore) -> None:
        relative = store.write("alloc/vec/trait.Foo.js", "content")
        assert relative == Path("alloc/vec/trait.Foo.js")
        assert store.read(relative) == "content"

    def test_traversal_rejected(self, store: ArtifactStore) -> None:
        with pytest.raises(ValueError, match="traversal"):
            store.read("../../etc/passwd")


class TestTraitPaths:
    def test_trait_for(self, store: ArtifactStore) -> None:
        assert store.trait_for(DROP_PATH).path == "core::ops::Drop"
        assert store.trait_for(EXTEND_PATH).path == "core::iter::traits::Extend"

    def test_trait_for_absolute(self, store: ArtifactStore) -> None:
        trait = store.trait_for(store.base_path / DROP_PATH)
        assert trait == TraitRef.parse("core::ops::Drop")

    def test_trait_for_rejects_other_names(self, store: ArtifactStore) -> None:
        with pytest.raises(ValueError):
            store.trait_for("core/ops/Drop.js")

    def test_path_for_roundtrip(self, store: ArtifactStore) -> None:
        trait = TraitRef.parse("core::iter::traits::Extend")
        assert store.path_for(trait) == EXTEND_PATH

    def test_find(self, store: ArtifactStore) -> None:
        assert store.find("core::ops::Drop") == DROP_PATH
        assert store.find("core::clone::Clone") is None
