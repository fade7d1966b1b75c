"""Default slot injection."""

from __future__ import annotations

from copy import deepcopy
from typing import List, Sequence

from ..models import MaterialDescriptor
from ..tables import MaterialTables


def inject_default_slots(
    descriptors: Sequence[MaterialDescriptor], tables: MaterialTables
) -> List[MaterialDescriptor]:
    result: List[MaterialDescriptor] = []
    for descriptor in descriptors:
        slots = descriptor.schema.get("slots") or {}
        if descriptor.component not in tables.default_slot_components or "default" in slots:
            result.append(descriptor)
            continue
        updated = deepcopy(descriptor)
        updated.schema["slots"] = {"default": deepcopy(dict(tables.default_slot)), **slots}
        result.append(updated)
    return result


__all__ = ["inject_default_slots"]
