"""Tests for documentation front-matter parsing and scanning."""

from __future__ import annotations

from typing import Iterator

import pytest

from matgen.docs_reader import DocsReader, parse_document
from matgen.errors import FrontMatterError
from tests._fixtures.docs_builder import DocsBuilder


def test_parse_document_reads_header_and_description() -> None:
    text = (
        "---\n"
        "category: Components\n"
        "type: 通用\n"
        "title: Button\n"
        "subtitle: 按钮\n"
        "cover: https://gw.alipayobjects.com/zos/button.svg\n"
        "\n"
        "---\n"
        "\n"
        "按钮用于开始一个即时操作。\n"
        "\n"
        "## 何时使用\n"
        "\n"
        "标记了一个操作命令。\n"
    )

    parsed = parse_document(text)

    assert parsed.header == {
        "category": "Components",
        "type": "通用",
        "title": "Button",
        "subtitle": "按钮",
        "cover": "https://gw.alipayobjects.com/zos/button.svg",
    }
    assert parsed.description == "按钮用于开始一个即时操作。"


def test_parse_document_falls_back_to_subtitle() -> None:
    text = "---\ntitle: Space\nsubtitle: 间距\n---\n\n## 何时使用\n"
    assert parse_document(text).description == "间距"


def test_parse_document_keeps_horizontal_rules_out_of_header() -> None:
    text = "---\ntitle: Table\n---\n\nTable intro\n\n| a | b |\n| --- | --- |\n# API\n"
    parsed = parse_document(text)
    assert parsed.header == {"title": "Table"}
    assert "| --- | --- |" in parsed.description


@pytest.mark.parametrize(
    "body, subtitle, expected",
    [
        ("正文描述", "", "正文描述"),
        ("", "副标题", "副标题"),
        ("正文描述", "副标题", "正文描述"),
    ],
)
def test_description_is_non_empty_when_body_or_subtitle_present(
    body: str, subtitle: str, expected: str
) -> None:
    header = "title: Demo\n" + (f"subtitle: {subtitle}\n" if subtitle else "")
    text = f"---\n{header}---\n\n{body}\n\n## 示例\n"
    assert parse_document(text).description == expected


def test_parse_document_rejects_missing_delimiter() -> None:
    with pytest.raises(FrontMatterError) as excinfo:
        parse_document("title: Button\n\nNo front-matter here.\n", source="button.md")
    assert excinfo.value.path.name == "button.md"


def test_reader_yields_components_lazily_in_path_order(docs_builder: DocsBuilder) -> None:
    docs_builder.component("button", title="Button", subtitle="按钮", body="按钮描述")
    docs_builder.component("alert", title="Alert", subtitle="警告提示", extra={"cols": "1"})
    docs_builder.component("alert", title="Alert", locale="en-US", body="Alert text")

    result = DocsReader().read(docs_builder.path(), "zh-CN")

    assert isinstance(result, Iterator)
    components = list(result)
    assert [component.title for component in components] == ["Alert", "Button"]
    alert = components[0]
    assert alert.name == "alert"
    assert alert.locale == "zh-CN"
    assert alert.description == "警告提示"
    assert alert.extra == {"cols": "1"}
    assert alert.icon is None


def test_reader_skips_ignored_directories_and_titles(docs_builder: DocsBuilder) -> None:
    docs_builder.component("button", title="Button")
    docs_builder.component("config-provider", title="ConfigProvider")
    docs_builder.component("locale", title="LocaleProvider")

    reader = DocsReader(ignore=["config-provider", "LocaleProvider"])
    titles = [component.title for component in reader.read(docs_builder.path(), "zh-CN")]

    assert titles == ["Button"]


def test_reader_propagates_front_matter_errors(docs_builder: DocsBuilder) -> None:
    broken = docs_builder.path() / "components" / "broken" / "index.zh-CN.md"
    broken.parent.mkdir(parents=True)
    broken.write_text("# Broken\n", encoding="utf-8")

    with pytest.raises(FrontMatterError):
        list(DocsReader().read(docs_builder.path(), "zh-CN"))
