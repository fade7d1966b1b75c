"""Documentation scanning and front-matter parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence

from .errors import FrontMatterError
from .logging import get_logger
from .models import DocComponent

_DELIMITER = re.compile(r"^-{3}\s*$")
_HEADING = re.compile(r"^#")

_KNOWN_KEYS = {"title", "subtitle", "type", "icon", "cover"}


@dataclass(frozen=True)
class ParsedDocument:
    """Front-matter fields and free-text description of one markdown file."""

    header: Dict[str, str]
    description: str


def parse_document(text: str, *, source: Path | str = "<string>") -> ParsedDocument:
    """Split a documentation file into front-matter and description.

    The first two delimiter lines bound the front-matter. The description is
    the text after the second delimiter up to the first heading line; when
    that is empty the ``subtitle`` field stands in.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    delimiters = [index for index, line in enumerate(lines) if _DELIMITER.match(line)]
    if len(delimiters) < 2:
        raise FrontMatterError(source, "missing front-matter delimiters")

    start, end = delimiters[0], delimiters[1]
    header = _parse_header(lines[start + 1 : end])

    body: List[str] = []
    for line in lines[end + 1 :]:
        if _HEADING.match(line):
            break
        body.append(line)
    description = "\n".join(body).strip()
    if not description:
        description = header.get("subtitle", "")

    return ParsedDocument(header=header, description=description)


def _parse_header(lines: Iterable[str]) -> Dict[str, str]:
    header: Dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        key, _, value = line.partition(":")
        header[key.strip()] = value.strip()
    return header


class DocsReader:
    """Yields documented components for one locale below a docs root."""

    PATTERN = "**/index.{locale}.md*"

    def __init__(self, ignore: Sequence[str] = ()) -> None:
        self._ignore = {item.lower() for item in ignore}
        self.logger = get_logger("docs")

    def read(self, root: Path, locale: str) -> Iterator[DocComponent]:
        """Lazily yield one component per matching documentation file."""
        pattern = self.PATTERN.format(locale=locale)
        for path in sorted(Path(root).glob(pattern)):
            if not path.is_file():
                continue
            name = path.parent.name
            if name.lower() in self._ignore:
                self.logger.debug("Skipping ignored docs %s", path)
                continue
            parsed = parse_document(path.read_text(encoding="utf-8"), source=path)
            title = parsed.header.get("title", "")
            if title.lower() in self._ignore:
                self.logger.debug("Skipping ignored component %s", title)
                continue
            yield _component_from(parsed, name=name, locale=locale, source=path)


def _component_from(
    parsed: ParsedDocument, *, name: str, locale: str, source: Path
) -> DocComponent:
    header = parsed.header
    return DocComponent(
        name=name,
        locale=locale,
        title=header.get("title", ""),
        subtitle=header.get("subtitle", ""),
        type=header.get("type", ""),
        icon=header.get("icon") or None,
        cover=header.get("cover") or header.get("coverDark") or None,
        description=parsed.description,
        source=str(source),
        extra={key: value for key, value in header.items() if key not in _KNOWN_KEYS},
    )


__all__ = ["DocsReader", "ParsedDocument", "parse_document"]
