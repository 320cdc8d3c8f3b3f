import shutil
from pathlib import Path

import pytest

from impltables.adapters.fs.artifact_store import ArtifactStore

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def docs_root(tmp_path):
    """
    Copy of the sample docs tree (Drop and Extend artifacts) in a temp dir,
    so tests may write into it freely.
    """
    root = tmp_path / "doc"
    shutil.copytree(FIXTURES / "implementors", root / "implementors")
    return root


@pytest.fixture
def store(docs_root) -> ArtifactStore:
    return ArtifactStore(docs_root)
