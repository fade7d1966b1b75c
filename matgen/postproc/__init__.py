"""Post-processing passes over the built material descriptors."""

from .identity import rename_components
from .pipeline import DEFAULT_PASSES, Pass, run_passes
from .placement import hide_components, mark_containers, mark_modals
from .properties import patch_properties
from .slots import inject_default_slots

__all__ = [
    "DEFAULT_PASSES",
    "Pass",
    "hide_components",
    "inject_default_slots",
    "mark_containers",
    "mark_modals",
    "patch_properties",
    "rename_components",
    "run_passes",
]
