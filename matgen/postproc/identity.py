"""Component renames fixing capitalization drift between tags and exports."""

from __future__ import annotations

from copy import deepcopy
from typing import List, Sequence

from ..models import MaterialDescriptor
from ..tables import MaterialTables


def rename_components(
    descriptors: Sequence[MaterialDescriptor], tables: MaterialTables
) -> List[MaterialDescriptor]:
    """Rename components listed in ``tables.renames``.

    The export name and snippet names follow the new component name, with the
    package prefix of the old name dropped from the export.
    """
    result: List[MaterialDescriptor] = []
    for descriptor in descriptors:
        new_name = tables.renames.get(descriptor.component)
        if new_name is None:
            result.append(descriptor)
            continue
        renamed = deepcopy(descriptor)
        export = renamed.npm.get("exportName")
        if isinstance(export, str) and descriptor.component.endswith(export):
            prefix = descriptor.component[: len(descriptor.component) - len(export)]
            if new_name.startswith(prefix):
                renamed.npm["exportName"] = new_name[len(prefix) :]
        renamed.component = new_name
        for snippet in renamed.snippets:
            if snippet.get("snippetName") == descriptor.component:
                snippet["snippetName"] = new_name
        result.append(renamed)
    return result


__all__ = ["rename_components"]
