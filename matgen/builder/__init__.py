"""Descriptor building for resolved component tags."""

from .descriptor import (
    DescriptorBuilder,
    default_configure,
    drop_shadowed_callbacks,
    event_key,
    property_record,
)
from .inference import (
    ALLOWED_TYPES,
    infer_type,
    literal_options,
    parse_default,
    select_widget,
    split_binding,
)

__all__ = [
    "ALLOWED_TYPES",
    "DescriptorBuilder",
    "default_configure",
    "drop_shadowed_callbacks",
    "event_key",
    "infer_type",
    "literal_options",
    "parse_default",
    "property_record",
    "select_widget",
    "split_binding",
]
