"""Tests for tag to component reconciliation."""

from __future__ import annotations

import logging

import pytest

from matgen.config import PackageConfig
from matgen.docs_reader import DocsReader
from matgen.models import DocComponent, TagDescriptor, TypeIndex
from matgen.naming import kebab_case, upper_camel
from matgen.reconcile import EXACT, OVERRIDE, SUFFIX, NameReconciler
from matgen.tables import MaterialTables, default_tables
from tests._fixtures.docs_builder import DocsBuilder


def _component(title: str, **kwargs) -> DocComponent:
    defaults = {
        "name": kebab_case(title),
        "locale": "zh-CN",
        "subtitle": f"{title} 组件",
        "type": "通用",
        "description": f"{title} description",
    }
    defaults.update(kwargs)
    return DocComponent(title=title, **defaults)


COMPONENTS = [
    _component("Button", icon="button"),
    _component("Radio", subtitle="单选框"),
    _component("Menu", subtitle="导航菜单"),
    _component("DatePicker"),
    _component("QRCode", name="qrcode"),
    _component("Input"),
    _component("InputNumber", name="input-number"),
]


@pytest.mark.parametrize(
    "title, expected",
    [
        ("Button", "button"),
        ("DatePicker", "date-picker"),
        ("QRCode", "qr-code"),
        ("TreeSelect", "tree-select"),
    ],
)
def test_kebab_case(title: str, expected: str) -> None:
    assert kebab_case(title) == expected


def test_upper_camel_capitalizes_each_segment() -> None:
    assert upper_camel("menu-item-group") == "MenuItemGroup"
    assert upper_camel("radio-button") == "RadioButton"


def test_exact_match_returns_documented_component() -> None:
    resolution = NameReconciler(COMPONENTS).resolve("date-picker")

    assert resolution is not None
    assert resolution.strategy == EXACT
    assert resolution.derived is False
    assert resolution.component.title == "DatePicker"


def test_exact_match_wins_over_suffix_table() -> None:
    tables = MaterialTables(suffixes=("number",), tag_overrides={})
    resolution = NameReconciler(COMPONENTS, tables).resolve("input-number")

    assert resolution is not None
    assert resolution.strategy == EXACT
    assert resolution.component.title == "InputNumber"


def test_qrcode_alias_matches_component() -> None:
    resolution = NameReconciler(COMPONENTS).resolve("qrcode")

    assert resolution is not None
    assert resolution.component.title == "QRCode"
    assert resolution.strategy == EXACT


@pytest.mark.parametrize(
    "tag, parent, expected_title",
    [
        ("menu-item", "Menu", "MenuItem"),
        ("menu-item-group", "Menu", "MenuItemGroup"),
        ("menu-sub-menu", "Menu", "MenuSubMenu"),
        ("button-group", "Button", "ButtonGroup"),
        ("input-search", "Input", "InputSearch"),
    ],
)
def test_suffix_fallback_derives_upper_camel_title(
    tag: str, parent: str, expected_title: str
) -> None:
    resolution = NameReconciler(COMPONENTS).resolve(tag)

    assert resolution is not None
    assert resolution.strategy == SUFFIX
    assert resolution.derived is True
    assert resolution.component.title == expected_title
    source = next(component for component in COMPONENTS if component.title == parent)
    assert resolution.component.subtitle == source.subtitle
    assert resolution.component.type == source.type
    assert resolution.component.description == source.description


def test_derived_component_inherits_icon() -> None:
    resolution = NameReconciler(COMPONENTS).resolve("button-group")

    assert resolution is not None
    assert resolution.component.icon == "button"


def test_override_table_takes_precedence_over_suffix_heuristic() -> None:
    naive = NameReconciler(
        COMPONENTS, MaterialTables(tag_overrides={})
    ).resolve("radio-radio-button")
    overridden = NameReconciler(COMPONENTS).resolve("radio-radio-button")

    assert naive is not None and overridden is not None
    assert naive.strategy == SUFFIX
    assert naive.component.title == "RadioRadioButton"
    assert overridden.strategy == OVERRIDE
    assert overridden.component.title == "RadioButton"
    assert overridden.component.subtitle == "单选框"


def test_override_to_documented_tag_returns_component_unchanged() -> None:
    tables = MaterialTables(tag_overrides={"grid-row": "button"})
    resolution = NameReconciler(COMPONENTS, tables).resolve("grid-row")

    assert resolution is not None
    assert resolution.strategy == OVERRIDE
    assert resolution.derived is False
    assert resolution.component.title == "Button"


def test_unresolved_tag_is_logged_and_skipped(caplog: pytest.LogCaptureFixture) -> None:
    reconciler = NameReconciler(COMPONENTS)
    index = TypeIndex(
        version="1.0.0",
        tags={
            "button": TagDescriptor(name="button"),
            "mystery-widget": TagDescriptor(name="mystery-widget"),
            "item": TagDescriptor(name="item"),
        },
    )

    with caplog.at_level(logging.WARNING, logger="matgen.reconcile"):
        resolved, unresolved = reconciler.resolve_all(index)

    assert [resolution.tag for resolution in resolved] == ["button"]
    assert unresolved == ["mystery-widget", "item"]
    assert "mystery-widget" in caplog.text


LIBRARY = {
    "breadcrumb": "Breadcrumb",
    "button": "Button",
    "card": "Card",
    "collapse": "Collapse",
    "drawer": "Drawer",
    "form": "Form",
    "grid": "Grid",
    "layout": "Layout",
    "menu": "Menu",
    "modal": "Modal",
    "select": "Select",
    "space": "Space",
    "tabs": "Tabs",
    "tag": "Tag",
    "tree": "Tree",
}

LIBRARY_TAGS = [
    "breadcrumb-separator",
    "button",
    "card",
    "col",
    "collapse-panel",
    "drawer",
    "form",
    "form-item",
    "layout",
    "layout-content",
    "layout-header",
    "menu-divider",
    "modal",
    "row",
    "select-opt-group",
    "select-option",
    "space",
    "tabs-tab-pane",
    "tag",
    "tree-node",
]


def _library_components(docs_builder: DocsBuilder) -> list[DocComponent]:
    for name, title in LIBRARY.items():
        docs_builder.component(name, title=title)
    return list(DocsReader().read(docs_builder.path(), "zh-CN"))


def test_grid_and_select_sub_tags_resolve(docs_builder: DocsBuilder) -> None:
    reconciler = NameReconciler(_library_components(docs_builder))

    tags = ("row", "col", "select-opt-group", "layout-header")
    titles = {tag: reconciler.resolve(tag) for tag in tags}

    assert {tag: resolution.component.title for tag, resolution in titles.items() if resolution} == {
        "row": "GridRow",
        "col": "GridCol",
        "select-opt-group": "SelectOptGroup",
        "layout-header": "LayoutHeader",
    }
    assert titles["row"].strategy == OVERRIDE
    assert titles["select-opt-group"].strategy == SUFFIX


def test_every_table_component_is_reachable(docs_builder: DocsBuilder) -> None:
    tables = default_tables()
    reconciler = NameReconciler(_library_components(docs_builder), tables)
    prefix = PackageConfig().prefix

    produced = set()
    for tag in LIBRARY_TAGS:
        resolution = reconciler.resolve(tag)
        assert resolution is not None, tag
        name = f"{prefix}{resolution.component.title}"
        produced.add(tables.renames.get(name, name))

    named = (
        set(tables.container_components)
        | set(tables.default_slot_components)
        | set(tables.hidden_components)
        | set(tables.modal_components)
        | set(tables.property_patches)
    )
    assert named - produced == set()
