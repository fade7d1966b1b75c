"""Invocation of the external type extraction tool and web-types loading."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..errors import ExtractionError
from ..logging import get_logger
from ..models import AttributeSpec, EventSpec, SlotSpec, TagDescriptor, TypeIndex
from ..naming import locale_key

WEB_TYPES_FILENAME = "web-types.json"


class TypeExtractor:
    """Runs the generator-types tool for a locale and loads its index.

    ``command`` is a list of arguments formatted with ``{locale}``,
    ``{source}``, ``{output_dir}`` and ``{typings}``. An empty command reads a
    previously generated ``web-types.json`` instead of running anything.
    """

    def __init__(
        self,
        output_dir: Path,
        *,
        command: Sequence[str] = (),
        source: Optional[Path] = None,
        typings: Optional[Path] = None,
        cwd: Optional[Path] = None,
        runner: Callable[..., Any] | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.command = list(command)
        self.source = source
        self.typings = typings
        self.cwd = cwd
        self._runner = runner or self._default_runner
        self.logger = get_logger("types")

    def index_path(self, locale: str) -> Path:
        return self.output_dir / locale / WEB_TYPES_FILENAME

    def extract(self, locale: str) -> TypeIndex:
        """Run extraction for ``locale`` to completion and return its index."""
        locale_dir = self.output_dir / locale
        if self.command:
            args = self._format_command(locale, locale_dir)
            self.logger.info("Extracting %s types: %s", locale, " ".join(args))
            locale_dir.mkdir(parents=True, exist_ok=True)
            try:
                self._runner(args, cwd=self.cwd)
            except subprocess.CalledProcessError as exc:
                raise ExtractionError(locale, _failure_reason(exc)) from exc
            except OSError as exc:
                raise ExtractionError(locale, str(exc)) from exc

        path = self.index_path(locale)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise ExtractionError(locale, f"{path} was not produced") from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise ExtractionError(locale, f"{path} is unreadable: {exc}") from exc

        index = load_web_types(payload, locale=locale)
        self.logger.info("Loaded %d %s tags from %s", len(index.tags), locale, path)
        return index

    def _format_command(self, locale: str, locale_dir: Path) -> List[str]:
        values = {
            "locale": locale,
            "source": str(self.source or ""),
            "output_dir": str(locale_dir),
            "typings": str(self.typings or ""),
        }
        return [part.format(**values) for part in self.command]

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Optional[Path] = None) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd) if cwd else None,
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


def _failure_reason(exc: subprocess.CalledProcessError) -> str:
    stderr = exc.stderr
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    if isinstance(stderr, str) and stderr.strip():
        return f"{exc}\n{stderr.strip()}"
    return str(exc)


def load_web_types(payload: Mapping[str, Any], *, locale: str) -> TypeIndex:
    """Convert a web-types document into a :class:`TypeIndex`."""
    if not isinstance(payload, Mapping):
        raise ExtractionError(locale, "web-types root is not an object")
    contributions = payload.get("contributions")
    html = contributions.get("html") if isinstance(contributions, Mapping) else None
    raw_tags = html.get("tags") if isinstance(html, Mapping) else None
    if not isinstance(raw_tags, list):
        raise ExtractionError(locale, "web-types has no contributions.html.tags list")

    key = locale_key(locale)
    tags: Dict[str, TagDescriptor] = {}
    for raw in raw_tags:
        if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
            continue
        tag = TagDescriptor(
            name=raw["name"],
            attributes=[_attribute(item, key) for item in _entries(raw.get("attributes"))],
            events=[
                EventSpec(name=item["name"], description=_text(item), i18n=_i18n(item, key))
                for item in _entries(raw.get("events"))
            ],
            slots=[
                SlotSpec(name=item["name"], description=_text(item), i18n=_i18n(item, key))
                for item in _entries(raw.get("slots"))
            ],
        )
        tags.setdefault(tag.name, tag)
    return TypeIndex(version=str(payload.get("version") or ""), tags=tags)


def _entries(value: Any) -> List[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping) and isinstance(item.get("name"), str)]


def _text(item: Mapping[str, Any]) -> str:
    description = item.get("description")
    return description if isinstance(description, str) else ""


def _i18n(item: Mapping[str, Any], key: str) -> Dict[str, str]:
    return {key: _text(item)}


def _attribute(item: Mapping[str, Any], key: str) -> AttributeSpec:
    value = item.get("value")
    value = value if isinstance(value, Mapping) else {}
    raw_type = value.get("type")
    return AttributeSpec(
        name=item["name"],
        description=_text(item),
        default=item.get("default"),
        type=raw_type if isinstance(raw_type, str) else "",
        kind=str(value.get("kind") or "expression"),
        i18n=_i18n(item, key),
    )


__all__ = ["TypeExtractor", "WEB_TYPES_FILENAME", "load_web_types"]
