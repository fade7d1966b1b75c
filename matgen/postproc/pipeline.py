"""Ordered application of post-processing passes."""

from __future__ import annotations

from functools import reduce
from typing import Callable, List, Sequence

from ..logging import get_logger
from ..models import MaterialDescriptor
from ..tables import MaterialTables, default_tables
from .identity import rename_components
from .placement import hide_components, mark_containers, mark_modals
from .properties import patch_properties
from .slots import inject_default_slots

Pass = Callable[[Sequence[MaterialDescriptor], MaterialTables], List[MaterialDescriptor]]

# Renames come first so every later rule keys on the final component name.
DEFAULT_PASSES: Sequence[Pass] = (
    rename_components,
    patch_properties,
    mark_modals,
    mark_containers,
    inject_default_slots,
    hide_components,
)

logger = get_logger("postproc")


def run_passes(
    descriptors: Sequence[MaterialDescriptor],
    tables: MaterialTables | None = None,
    passes: Sequence[Pass] = DEFAULT_PASSES,
) -> List[MaterialDescriptor]:
    """Fold ``passes`` over ``descriptors`` left to right."""
    tables = tables or default_tables()

    def _step(current: List[MaterialDescriptor], step: Pass) -> List[MaterialDescriptor]:
        logger.debug("Applying %s to %d descriptors", step.__name__, len(current))
        return step(current, tables)

    return reduce(_step, passes, list(descriptors))


__all__ = ["DEFAULT_PASSES", "Pass", "run_passes"]
