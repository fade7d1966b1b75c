"""Pipeline orchestration for material generation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .builder import DescriptorBuilder
from .config import MatgenConfig, load_config
from .docs_reader import DocsReader
from .logging import get_logger
from .models import DocComponent, MaterialDescriptor, Resolution, TypeIndex
from .postproc import run_passes
from .reconcile import NameReconciler
from .tables import MaterialTables, default_tables
from .types import TypeExtractor, merge_indices
from .writer import MaterialWriter


@dataclass
class ResolveOutcome:
    """Tag resolutions computed for a project."""

    index: TypeIndex
    resolutions: List[Resolution]
    unresolved: List[str]
    components: Dict[str, List[DocComponent]] = field(default_factory=dict)


@dataclass
class RunOutcome:
    """Result of a full generation run."""

    written: List[Path]
    descriptors: List[MaterialDescriptor]
    unresolved: List[str]
    dry_run: bool


class Orchestrator:
    """Coordinates reading, extraction, reconciliation, building and writing."""

    def __init__(
        self,
        reader: DocsReader | None = None,
        extractor: TypeExtractor | None = None,
        writer: MaterialWriter | None = None,
        tables: MaterialTables | None = None,
    ) -> None:
        self.reader = reader
        self.extractor = extractor
        self.writer = writer or MaterialWriter()
        self.tables = tables or default_tables()
        self.logger = get_logger("orchestrator")

    def run(
        self,
        path: str | Path,
        *,
        locales: Optional[Sequence[str]] = None,
        output_dir: Optional[Path] = None,
        dry_run: bool = False,
    ) -> RunOutcome:
        """Generate material files for the project at ``path``."""
        config = self._load_config(path, locales)
        outcome = self._resolve(config)

        descriptors = self._build(config, outcome)
        descriptors = run_passes(descriptors, self.tables)

        target = Path(output_dir) if output_dir is not None else config.output_dir
        written = self.writer.write(descriptors, target, dry_run=dry_run)
        return RunOutcome(
            written=written,
            descriptors=descriptors,
            unresolved=outcome.unresolved,
            dry_run=dry_run,
        )

    def resolve(
        self, path: str | Path, *, locales: Optional[Sequence[str]] = None
    ) -> ResolveOutcome:
        """Resolve tags without building or writing anything."""
        return self._resolve(self._load_config(path, locales))

    # ------------------------------------------------------------------
    # Internals

    def _load_config(self, path: str | Path, locales: Optional[Sequence[str]]) -> MatgenConfig:
        root = Path(path).expanduser().resolve()
        config = load_config(root)
        if locales:
            config.locales = list(dict.fromkeys(locales))
        self.logger.info("Starting run for %s (locales: %s)", root, ", ".join(config.locales))
        return config

    def _resolve(self, config: MatgenConfig) -> ResolveOutcome:
        ignored = {name.lower() for name in (*self.tables.ignored, *config.docs.ignore)}
        reader = self.reader or DocsReader(ignore=sorted(ignored))
        components = {
            locale: list(reader.read(config.docs.root, locale)) for locale in config.locales
        }
        for locale, items in components.items():
            self.logger.info("Read %d %s documentation files", len(items), locale)

        extractor = self.extractor or TypeExtractor(
            config.extractor.output_dir,
            command=config.extractor.command,
            source=config.docs.root,
            typings=config.extractor.typings,
            cwd=config.root,
        )
        # Sequential on purpose: later locales only backfill the primary index.
        indices = [extractor.extract(locale) for locale in config.locales]
        index = reduce(merge_indices, indices)
        for name in [tag for tag in index.tags if tag.lower() in ignored]:
            self.logger.debug("Skipping ignored tag %s", name)
            del index.tags[name]

        reconciler = NameReconciler(components[config.primary_locale], self.tables)
        resolutions, unresolved = reconciler.resolve_all(index)
        return ResolveOutcome(
            index=index,
            resolutions=resolutions,
            unresolved=unresolved,
            components=components,
        )

    def _build(self, config: MatgenConfig, outcome: ResolveOutcome) -> List[MaterialDescriptor]:
        builder = DescriptorBuilder(
            package=config.package, tables=self.tables, locales=config.locales
        )
        translations: Dict[str, Dict[str, DocComponent]] = {}
        for locale, items in outcome.components.items():
            for component in items:
                translations.setdefault(component.name, {}).setdefault(locale, component)

        ordered = sorted(outcome.resolutions, key=lambda resolution: resolution.tag)
        descriptors = [
            builder.build(
                resolution,
                outcome.index.tags[resolution.tag],
                version=outcome.index.version,
                material_id=position,
                translations=translations,
            )
            for position, resolution in enumerate(ordered, start=1)
        ]
        self.logger.info("Built %d material descriptors", len(descriptors))
        return descriptors


__all__ = ["Orchestrator", "ResolveOutcome", "RunOutcome"]
