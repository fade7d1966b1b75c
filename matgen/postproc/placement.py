"""Editor placement rules: modals, containers and hidden sub-components."""

from __future__ import annotations

from copy import deepcopy
from typing import List, Sequence

from ..models import MaterialDescriptor
from ..tables import MaterialTables


def mark_modals(
    descriptors: Sequence[MaterialDescriptor], tables: MaterialTables
) -> List[MaterialDescriptor]:
    result: List[MaterialDescriptor] = []
    for descriptor in descriptors:
        if descriptor.component not in tables.modal_components:
            result.append(descriptor)
            continue
        modal = deepcopy(descriptor)
        modal.configure.update(
            {
                "isModal": True,
                "isContainer": True,
                "isPopper": False,
                "contextMenu": deepcopy(dict(tables.modal_context_menu)),
            }
        )
        result.append(modal)
    return result


def mark_containers(
    descriptors: Sequence[MaterialDescriptor], tables: MaterialTables
) -> List[MaterialDescriptor]:
    result: List[MaterialDescriptor] = []
    for descriptor in descriptors:
        if descriptor.component in tables.container_components:
            descriptor = deepcopy(descriptor)
            descriptor.configure["isContainer"] = True
        result.append(descriptor)
    return result


def hide_components(
    descriptors: Sequence[MaterialDescriptor], tables: MaterialTables
) -> List[MaterialDescriptor]:
    """Clear the palette category of non-visual sub-components."""
    result: List[MaterialDescriptor] = []
    for descriptor in descriptors:
        if descriptor.component in tables.hidden_components:
            descriptor = deepcopy(descriptor)
            descriptor.category = ""
        result.append(descriptor)
    return result


__all__ = ["hide_components", "mark_containers", "mark_modals"]
