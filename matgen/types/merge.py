"""Bilingual union of two type indices."""

from __future__ import annotations

from copy import deepcopy
from typing import Dict, List, Sequence, TypeVar

from ..models import AttributeSpec, EventSpec, SlotSpec, TagDescriptor, TypeIndex

Entry = TypeVar("Entry", AttributeSpec, EventSpec, SlotSpec)


def merge_indices(primary: TypeIndex, secondary: TypeIndex) -> TypeIndex:
    """Outer-join two indices by tag name; the primary wins on conflicts."""
    tags: Dict[str, TagDescriptor] = {}
    for name, tag in primary.tags.items():
        other = secondary.tags.get(name)
        tags[name] = merge_tags(tag, other) if other is not None else deepcopy(tag)
    for name, tag in secondary.tags.items():
        if name not in tags:
            tags[name] = deepcopy(tag)
    return TypeIndex(version=primary.version or secondary.version, tags=tags)


def merge_tags(primary: TagDescriptor, secondary: TagDescriptor) -> TagDescriptor:
    return TagDescriptor(
        name=primary.name,
        attributes=_union(primary.attributes, secondary.attributes),
        events=_union(primary.events, secondary.events),
        slots=_union(primary.slots, secondary.slots),
    )


def _union(first: Sequence[Entry], second: Sequence[Entry]) -> List[Entry]:
    merged: Dict[str, Entry] = {}
    for entry in first:
        if entry.name not in merged:
            merged[entry.name] = deepcopy(entry)
    for entry in second:
        existing = merged.get(entry.name)
        if existing is None:
            merged[entry.name] = deepcopy(entry)
            continue
        # Keep the other locale's wording for bilingual labels.
        for locale, text in entry.i18n.items():
            existing.i18n.setdefault(locale, text)
    return list(merged.values())


__all__ = ["merge_indices", "merge_tags"]
