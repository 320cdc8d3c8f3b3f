"""
Filesystem store for generated implementor artifacts.

Layout under the docs root:

    <root>/<implementors_dir>/core/ops/trait.Drop.js
    <root>/<implementors_dir>/core/iter/traits/trait.Extend.js

The directory path below the implementors dir is the trait's module path.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from impltables.domain.entities import TraitRef

logger = logging.getLogger(__name__)

_ARTIFACT_NAME_RE = re.compile(r"^trait\.(?P<name>[A-Za-z_][A-Za-z0-9_]*)\.js$")


class ArtifactStore:
    def __init__(
        self,
        root: str | Path,
        implementors_dir: str = "implementors",
        encoding: str = "utf-8",
    ):
        self.root = Path(root).resolve()
        self.encoding = encoding
        if not self.root.is_dir():
            raise FileNotFoundError(f"Docs root not found: {self.root}")
        self.base_path = (self.root / implementors_dir).resolve()

    def _safe_path(self, path: str | Path) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if target != self.base_path and self.base_path not in target.parents:
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def discover(self) -> list[Path]:
        """Artifact paths relative to the implementors dir, sorted."""
        if not self.base_path.is_dir():
            logger.info("No implementors directory under %s", self.root)
            return []
        found = sorted(
            p.relative_to(self.base_path)
            for p in self.base_path.rglob("trait.*.js")
            if p.is_file() and _ARTIFACT_NAME_RE.match(p.name)
        )
        logger.info("Discovered %d implementor artifacts under %s", len(found), self.base_path)
        return found

    def read(self, path: str | Path) -> str:
        """Read artifact text. Raises FileNotFoundError."""
        target = self._safe_path(path)
        if not target.is_file():
            raise FileNotFoundError(f"Artifact not found: {path}")
        with open(target, encoding=self.encoding, newline="") as f:
            return f.read()

    def write(self, path: str | Path, text: str) -> Path:
        target = self._safe_path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding=self.encoding, newline="") as f:
            f.write(text)
        return target.relative_to(self.base_path)

    def path_for(self, trait: TraitRef) -> Path:
        return Path(*trait.module_path, f"trait.{trait.name}.js")

    def trait_for(self, path: str | Path) -> TraitRef:
        """Derive the trait path from an artifact path."""
        relative = Path(path)
        if relative.is_absolute():
            relative = relative.resolve().relative_to(self.base_path)
        match = _ARTIFACT_NAME_RE.match(relative.name)
        if match is None:
            raise ValueError(f"Not an implementor artifact: {path}")
        return TraitRef(module_path=tuple(relative.parent.parts), name=match.group("name"))

    def find(self, trait: TraitRef | str) -> Path | None:
        if isinstance(trait, str):
            trait = TraitRef.parse(trait)
        candidate = self.path_for(trait)
        return candidate if self._safe_path(candidate).is_file() else None
