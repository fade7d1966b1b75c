"""Name conversion helpers shared by the reconciler and builder."""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[\s_]+")


def kebab_case(value: str) -> str:
    """Convert ``DatePicker`` style titles to ``date-picker``."""
    text = _ACRONYM_BOUNDARY.sub(r"\1-\2", value.strip())
    text = _WORD_BOUNDARY.sub(r"\1-\2", text)
    text = _SEPARATORS.sub("-", text)
    return text.strip("-").lower()


def upper_camel(tag: str) -> str:
    """Capitalize each hyphen-delimited segment: ``menu-item`` -> ``MenuItem``."""
    return "".join(part[:1].upper() + part[1:] for part in tag.split("-") if part)


def capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def locale_key(locale: str) -> str:
    """Return the i18n key used in material files: ``zh-CN`` -> ``zh_CN``."""
    return locale.replace("-", "_")


__all__ = ["capitalize_first", "kebab_case", "locale_key", "upper_camel"]
