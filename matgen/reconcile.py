"""Mapping of extracted tag names back to documented components."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

from .logging import get_logger
from .models import DocComponent, Resolution, TypeIndex
from .naming import kebab_case, upper_camel
from .tables import MaterialTables, default_tables

EXACT = "exact"
OVERRIDE = "override"
SUFFIX = "suffix"


class NameReconciler:
    """Resolves kebab-case tags to documented components.

    Resolution order, first match wins:

    1. exact kebab-case match of a component title (plus the alias table);
    2. the explicit override table, whose canonical tag is itself resolved by
       exact match or suffix stripping;
    3. suffix stripping against the configured suffix list, deriving a
       component titled after the full tag.

    Tags that survive all three are logged and skipped.
    """

    def __init__(
        self,
        components: Iterable[DocComponent],
        tables: MaterialTables | None = None,
    ) -> None:
        self.tables = tables or default_tables()
        self.logger = get_logger("reconcile")
        self._by_kebab: Dict[str, DocComponent] = {}
        self._by_title: Dict[str, DocComponent] = {}
        for component in components:
            self._by_title.setdefault(component.title, component)
            key = kebab_case(component.title)
            if key in self._by_kebab:
                self.logger.debug(
                    "Duplicate title %s in %s; keeping %s",
                    component.title,
                    component.source,
                    self._by_kebab[key].source,
                )
                continue
            self._by_kebab[key] = component

    def exact(self, tag: str) -> Optional[DocComponent]:
        alias = self.tables.exact_aliases.get(tag)
        if alias is not None and alias in self._by_title:
            return self._by_title[alias]
        return self._by_kebab.get(tag)

    def resolve(self, tag: str) -> Optional[Resolution]:
        component = self.exact(tag)
        if component is not None:
            return Resolution(tag=tag, component=component, strategy=EXACT)

        canonical = self.tables.tag_overrides.get(tag)
        if canonical is not None:
            component = self.exact(canonical)
            if component is not None:
                return Resolution(tag=tag, component=component, strategy=OVERRIDE)
            parent = self._strip_suffix(canonical)
            if parent is not None:
                return Resolution(
                    tag=tag,
                    component=derive(parent, canonical),
                    strategy=OVERRIDE,
                    derived=True,
                )
            self.logger.debug("Override %s -> %s did not resolve", tag, canonical)

        parent = self._strip_suffix(tag)
        if parent is not None:
            return Resolution(
                tag=tag, component=derive(parent, tag), strategy=SUFFIX, derived=True
            )

        self.logger.warning("Tag %s has no documented component; skipping", tag)
        return None

    def resolve_all(self, index: TypeIndex) -> Tuple[List[Resolution], List[str]]:
        """Resolve every tag of ``index`` in order, collecting the leftovers."""
        resolved: List[Resolution] = []
        unresolved: List[str] = []
        for tag in index.tags:
            resolution = self.resolve(tag)
            if resolution is None:
                unresolved.append(tag)
            else:
                resolved.append(resolution)
        self.logger.info(
            "Resolved %d of %d tags (%d unresolved)",
            len(resolved),
            len(index.tags),
            len(unresolved),
        )
        return resolved, unresolved

    def _strip_suffix(self, tag: str) -> Optional[DocComponent]:
        for suffix in self.tables.suffixes:
            ending = f"-{suffix}"
            if not tag.endswith(ending):
                continue
            stem = tag[: -len(ending)]
            if not stem:
                continue
            parent = self.exact(stem)
            if parent is not None:
                self.logger.debug("Tag %s derives from %s via -%s", tag, parent.title, suffix)
                return parent
        return None


def derive(parent: DocComponent, tag: str) -> DocComponent:
    """Return ``parent`` retitled as the upper-camel form of ``tag``."""
    return replace(parent, title=upper_camel(tag))


__all__ = ["EXACT", "NameReconciler", "OVERRIDE", "SUFFIX", "derive"]
