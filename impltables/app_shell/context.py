from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from impltables.adapters.fs.artifact_store import ArtifactStore
from impltables.adapters.rendering_host import RenderingHost
from impltables.components.catalog import ImplementorCatalog
from impltables.rules.models import Rules


@dataclass
class ServiceContext:
    rules: Rules
    store: ArtifactStore
    host: RenderingHost = field(default_factory=RenderingHost)
    catalog: ImplementorCatalog = field(default_factory=ImplementorCatalog)

    @classmethod
    def create(cls, rules: Rules, root: str | Path | None = None) -> ServiceContext:
        docs = rules.docs
        store = ArtifactStore(
            root if root is not None else docs.root,
            implementors_dir=docs.implementors_dir,
            encoding=docs.encoding,
        )
        return cls(rules=rules, store=store)
