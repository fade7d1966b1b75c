"""Heuristic type inference, default parsing and widget selection."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Dict, List, Optional, Tuple

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
OBJECT = "object"
FUNCTION = "function"

ALLOWED_TYPES: Tuple[str, ...] = (STRING, NUMBER, BOOLEAN, OBJECT, FUNCTION)

PLACEHOLDER_DEFAULTS = frozenset({"", "-", "无"})

BINDING_PREFIXES: Tuple[str, ...] = ("v-model:",)
BINDING_SUFFIXES: Tuple[str, ...] = ("(v-model)",)

_QUOTES = "`'\""
_QUOTE_CHARS = re.compile(r"[`'\"]")
_OBJECT_NAMES = frozenset({"array", "cssproperties", "object", "record", "map"})
# Plain decimals only; underscores, hex and "inf" are documentation text.
_DECIMAL = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)$")
_LITERAL = re.compile(r"^([`'\"])([A-Za-z_][\w-]*)\1$")


def infer_type(raw: str | None) -> Optional[str]:
    """Map a documented type string onto one of :data:`ALLOWED_TYPES`.

    Only the first ``|`` alternative counts. Quoted literals are strings,
    anything mentioning ``function`` is a function, and array or record
    spellings collapse to ``object``. Returns ``None`` for everything else.
    """
    if not raw:
        return None
    first = raw.split("|", 1)[0].strip().lower()
    if any(quote in first for quote in _QUOTES):
        return STRING
    if "function" in first:
        return FUNCTION
    if _is_object_spelling(first):
        return OBJECT
    return first if first in ALLOWED_TYPES else None


def _is_object_spelling(value: str) -> bool:
    if value.endswith("[]") or value.startswith("{"):
        return True
    base = value.split("<", 1)[0].strip()
    return base in _OBJECT_NAMES


def parse_default(raw: Any, type_: str) -> Any:
    """Return the default for ``raw`` interpreted as ``type_``, or ``None``."""
    if raw is None:
        return None
    if isinstance(raw, str) and raw.strip() in PLACEHOLDER_DEFAULTS:
        return None

    if type_ == BOOLEAN:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            if "true" in raw:
                return True
            if "false" in raw:
                return False
        return None

    if type_ == NUMBER:
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return raw
        if isinstance(raw, float):
            return raw if math.isfinite(raw) else None
        if isinstance(raw, str):
            return _parse_number(_QUOTE_CHARS.sub("", raw).strip())
        return None

    if type_ == OBJECT:
        if not isinstance(raw, str):
            return None
        try:
            return json.loads(raw.strip().strip("`"))
        except ValueError:
            return None

    if type_ == STRING:
        return _QUOTE_CHARS.sub("", raw).strip() if isinstance(raw, str) else None

    return None


def _parse_number(text: str) -> Optional[float | int]:
    if not _DECIMAL.match(text):
        return None
    if "." in text:
        return float(text)
    return int(text)


def literal_options(raw: str | None) -> List[str]:
    """Return the alternatives of a closed union of quoted identifiers.

    An empty list means the type is open (or not a union of literals).
    """
    if not raw:
        return []
    options: List[str] = []
    for part in raw.split("|"):
        match = _LITERAL.match(part.strip())
        if match is None:
            return []
        options.append(match.group(2))
    return options


def select_widget(type_: str, raw: str | None = None) -> Dict[str, Any]:
    if type_ == BOOLEAN:
        return {"component": "MetaSwitch", "props": {}}
    if type_ == STRING:
        options = literal_options(raw)
        if options:
            return {
                "component": "MetaSelect",
                "props": {"options": [{"label": item, "value": item} for item in options]},
            }
        return {"component": "MetaInput", "props": {}}
    if type_ == NUMBER:
        return {"component": "MetaNumber", "props": {}}
    if type_ == OBJECT:
        return {"component": "MetaCodeEditor", "props": {"language": "json"}}
    return {"component": "MetaCodeEditor", "props": {"language": "javascript"}}


def split_binding(name: str) -> Tuple[str, bool]:
    """Strip a two-way binding marker, reporting whether one was present."""
    stripped = name.strip()
    for prefix in BINDING_PREFIXES:
        if stripped.startswith(prefix):
            return stripped[len(prefix) :].strip(), True
    for suffix in BINDING_SUFFIXES:
        if stripped.endswith(suffix):
            return stripped[: -len(suffix)].strip(), True
    return stripped, False


__all__ = [
    "ALLOWED_TYPES",
    "BOOLEAN",
    "FUNCTION",
    "NUMBER",
    "OBJECT",
    "PLACEHOLDER_DEFAULTS",
    "STRING",
    "infer_type",
    "literal_options",
    "parse_default",
    "select_widget",
    "split_binding",
]
