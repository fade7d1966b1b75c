"""Tests for material file writing."""

from __future__ import annotations

import json
from pathlib import Path

from matgen.builder import default_configure
from matgen.models import MaterialDescriptor
from matgen.writer import MaterialWriter, render


def _descriptor(component: str, description: str = "") -> MaterialDescriptor:
    return MaterialDescriptor(
        id=1,
        version="4.2.6",
        name={"zh_CN": "按钮"},
        component=component,
        icon="button",
        description=description,
        npm={"package": "ant-design-vue"},
        group="component",
        category="通用",
        configure=default_configure("Vue"),
        schema={"properties": [], "events": {}, "slots": {}},
    )


def test_render_is_pretty_printed_utf8_json() -> None:
    text = render(_descriptor("AButton"))

    assert text.endswith("}\n")
    assert '\n  "component": "AButton",' in text
    assert "按钮" in text
    assert list(json.loads(text))[:4] == ["id", "version", "name", "component"]


def test_write_creates_one_file_per_component(tmp_path: Path) -> None:
    output = tmp_path / "out"

    written = MaterialWriter().write([_descriptor("AButton"), _descriptor("ACard")], output)

    assert written == [output / "AButton.json", output / "ACard.json"]
    payload = json.loads((output / "ACard.json").read_text(encoding="utf-8"))
    assert payload["component"] == "ACard"


def test_write_keeps_first_duplicate_component(tmp_path: Path) -> None:
    written = MaterialWriter().write(
        [_descriptor("AButton", "first"), _descriptor("AButton", "second")], tmp_path
    )

    assert written == [tmp_path / "AButton.json"]
    payload = json.loads((tmp_path / "AButton.json").read_text(encoding="utf-8"))
    assert payload["description"] == "first"


def test_write_overwrites_existing_files(tmp_path: Path) -> None:
    target = tmp_path / "AButton.json"
    target.write_text("stale", encoding="utf-8")

    MaterialWriter().write([_descriptor("AButton")], tmp_path)

    assert target.read_text(encoding="utf-8") == render(_descriptor("AButton"))


def test_dry_run_does_not_touch_disk(tmp_path: Path) -> None:
    output = tmp_path / "out"

    written = MaterialWriter().write([_descriptor("AButton")], output, dry_run=True)

    assert written == [output / "AButton.json"]
    assert not output.exists()
