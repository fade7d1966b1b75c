"""Type index extraction and bilingual merging."""

from .extractor import WEB_TYPES_FILENAME, TypeExtractor, load_web_types
from .merge import merge_indices, merge_tags

__all__ = [
    "TypeExtractor",
    "WEB_TYPES_FILENAME",
    "load_web_types",
    "merge_indices",
    "merge_tags",
]
