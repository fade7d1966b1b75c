"""Serialization of material descriptors to JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

from .logging import get_logger
from .models import MaterialDescriptor


def render(descriptor: MaterialDescriptor) -> str:
    """Return the pretty-printed JSON text for ``descriptor``."""
    return json.dumps(descriptor.to_dict(), indent=2, ensure_ascii=False) + "\n"


class MaterialWriter:
    """Writes one ``<component>.json`` file per descriptor."""

    def __init__(self) -> None:
        self.logger = get_logger("writer")

    def write(
        self,
        descriptors: Sequence[MaterialDescriptor],
        output_dir: Path,
        *,
        dry_run: bool = False,
    ) -> List[Path]:
        output_dir = Path(output_dir)
        written: List[Path] = []
        seen = set()
        for descriptor in descriptors:
            if descriptor.component in seen:
                self.logger.warning(
                    "Duplicate component %s; keeping the first descriptor",
                    descriptor.component,
                )
                continue
            seen.add(descriptor.component)
            path = output_dir / f"{descriptor.component}.json"
            if not dry_run:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(render(descriptor), encoding="utf-8")
            written.append(path)
        self.logger.info(
            "%s %d material files in %s",
            "Planned" if dry_run else "Wrote",
            len(written),
            output_dir,
        )
        return written


__all__ = ["MaterialWriter", "render"]
