"""Property patches for components whose generated schema is incomplete."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Sequence

from ..builder.descriptor import property_record
from ..builder.inference import select_widget
from ..models import MaterialDescriptor
from ..tables import MaterialTables


def patch_properties(
    descriptors: Sequence[MaterialDescriptor], tables: MaterialTables
) -> List[MaterialDescriptor]:
    """Update or append properties listed in ``tables.property_patches``."""
    result: List[MaterialDescriptor] = []
    for descriptor in descriptors:
        patches = tables.property_patches.get(descriptor.component)
        if not patches:
            result.append(descriptor)
            continue
        patched = deepcopy(descriptor)
        for patch in patches:
            _apply(patched, patch)
        result.append(patched)
    return result


def _apply(descriptor: MaterialDescriptor, patch: Mapping[str, Any]) -> None:
    groups = descriptor.schema.setdefault("properties", [])
    if not groups:
        groups.append(
            {"name": "0", "label": {"zh_CN": "基础属性"}, "content": [], "description": {"zh_CN": ""}}
        )
    name = patch["property"]
    for group in groups:
        for record in group.get("content", []):
            if record.get("property") != name:
                continue
            previous_type = record.get("type")
            record.update(deepcopy(dict(patch)))
            if "widget" not in patch and record.get("type") != previous_type:
                record["widget"] = select_widget(record["type"])
            return
    groups[0].setdefault("content", []).append(_new_record(patch))


def _new_record(patch: Mapping[str, Any]) -> Dict[str, Any]:
    type_ = patch.get("type", "string")
    record = property_record(
        patch["property"],
        type_,
        default=patch.get("defaultValue"),
        widget=patch.get("widget"),
    )
    record.update(deepcopy(dict(patch)))
    return record


__all__ = ["patch_properties"]
