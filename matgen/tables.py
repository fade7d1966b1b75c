"""Static lookup tables steering reconciliation, building and post-processing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

SUFFIXES: Tuple[str, ...] = (
    "radio-button",
    "item-group",
    "opt-group",
    "tab-pane",
    "sub-menu",
    "step",
    "item",
    "panel",
    "group",
    "divider",
    "title",
    "paragraph",
    "text",
    "button",
    "search",
    "password",
    "textarea",
    "meta",
    "separator",
    "countdown",
    "node",
    "file",
    "ribbon",
    "option",
    "link",
    "row",
    "col",
    "header",
    "footer",
    "sider",
    "content",
)

# Composite tags whose suffix alone would pick the wrong derived name.
TAG_OVERRIDES: Dict[str, str] = {
    "radio-radio-button": "radio-button",
    "radio-radio-group": "radio-group",
    "checkbox-checkbox-group": "checkbox-group",
    "avatar-avatar-group": "avatar-group",
    "button-button-group": "button-group",
    # Grid exposes its parts as bare top-level tags.
    "row": "grid-row",
    "col": "grid-col",
}

EXACT_ALIASES: Dict[str, str] = {
    "qrcode": "QRCode",
}

IGNORED: Tuple[str, ...] = (
    "app",
    "config-provider",
    "locale-provider",
    "style",
)

SNIPPETS: Dict[str, Dict[str, Any]] = {
    "Button": {
        "props": {"type": "primary"},
        "children": [{"componentName": "Text", "props": {"text": "按钮文本"}}],
    },
    "Input": {"props": {"placeholder": "请输入"}},
    "Card": {
        "props": {"title": "卡片标题"},
        "children": [{"componentName": "Text", "props": {"text": "卡片内容"}}],
    },
    "Modal": {
        "props": {"title": "对话框标题", "open": True},
        "children": [{"componentName": "Text", "props": {"text": "对话框内容"}}],
    },
    "Drawer": {
        "props": {"title": "抽屉标题", "open": True},
        "children": [{"componentName": "Text", "props": {"text": "抽屉内容"}}],
    },
    "Select": {
        "props": {
            "style": "width: 120px",
            "options": [
                {"label": "选项一", "value": "1"},
                {"label": "选项二", "value": "2"},
            ],
        }
    },
    "Tabs": {
        "children": [
            {
                "componentName": "ATabPane",
                "props": {"key": "1", "tab": "标签一"},
                "children": [{"componentName": "Text", "props": {"text": "内容一"}}],
            },
            {
                "componentName": "ATabPane",
                "props": {"key": "2", "tab": "标签二"},
                "children": [{"componentName": "Text", "props": {"text": "内容二"}}],
            },
        ]
    },
    "Space": {
        "children": [
            {"componentName": "AButton", "children": [{"componentName": "Text", "props": {"text": "按钮一"}}]},
            {"componentName": "AButton", "children": [{"componentName": "Text", "props": {"text": "按钮二"}}]},
        ]
    },
    "Switch": {"props": {"checked": False}},
    "Tag": {"children": [{"componentName": "Text", "props": {"text": "标签"}}]},
}

MODAL_COMPONENTS: Tuple[str, ...] = ("AModal", "ADrawer")

MODAL_CONTEXT_MENU: Dict[str, List[str]] = {
    "actions": ["copy", "remove", "updateAttr", "bindEevent"],
    "disable": ["insert", "createBlock"],
}

CONTAINER_COMPONENTS: Tuple[str, ...] = (
    "ACard",
    "ACol",
    "ACollapsePanel",
    "AForm",
    "AFormItem",
    "ALayout",
    "ARow",
    "ASpace",
    "ATabPane",
)

DEFAULT_SLOT: Dict[str, Any] = {
    "label": {"zh_CN": "default"},
    "description": {"zh_CN": "自定义默认内容"},
}

DEFAULT_SLOT_COMPONENTS: Tuple[str, ...] = (
    "AButton",
    "ACard",
    "ACol",
    "ACollapsePanel",
    "AFormItem",
    "ARow",
    "ASpace",
    "ATabPane",
    "ATag",
)

HIDDEN_COMPONENTS: Tuple[str, ...] = (
    "ABreadcrumbSeparator",
    "AMenuDivider",
    "ASelectOptGroup",
    "ASelectOption",
    "ATreeNode",
)

RENAMES: Dict[str, str] = {
    "AQrcode": "AQRCode",
    "AInputTextarea": "ATextarea",
    "ATabsTabPane": "ATabPane",
    "AMenuSubMenu": "ASubMenu",
    "AGridRow": "ARow",
    "AGridCol": "ACol",
}

PROPERTY_PATCHES: Dict[str, List[Dict[str, Any]]] = {
    "AButton": [{"property": "type", "type": "string", "defaultValue": "default"}],
    "AModal": [{"property": "open", "type": "boolean", "defaultValue": False}],
    "ADrawer": [{"property": "open", "type": "boolean", "defaultValue": False}],
    "ATabPane": [{"property": "tab", "type": "string", "defaultValue": "标签"}],
}


@dataclass(frozen=True)
class MaterialTables:
    """Bundle of lookup tables; tests substitute their own fixtures."""

    suffixes: Tuple[str, ...] = SUFFIXES
    tag_overrides: Mapping[str, str] = field(default_factory=lambda: dict(TAG_OVERRIDES))
    exact_aliases: Mapping[str, str] = field(default_factory=lambda: dict(EXACT_ALIASES))
    ignored: Tuple[str, ...] = IGNORED
    snippets: Mapping[str, Dict[str, Any]] = field(default_factory=lambda: dict(SNIPPETS))
    modal_components: Tuple[str, ...] = MODAL_COMPONENTS
    modal_context_menu: Mapping[str, List[str]] = field(
        default_factory=lambda: dict(MODAL_CONTEXT_MENU)
    )
    container_components: Tuple[str, ...] = CONTAINER_COMPONENTS
    default_slot: Mapping[str, Any] = field(default_factory=lambda: dict(DEFAULT_SLOT))
    default_slot_components: Tuple[str, ...] = DEFAULT_SLOT_COMPONENTS
    hidden_components: Tuple[str, ...] = HIDDEN_COMPONENTS
    renames: Mapping[str, str] = field(default_factory=lambda: dict(RENAMES))
    property_patches: Mapping[str, List[Dict[str, Any]]] = field(
        default_factory=lambda: dict(PROPERTY_PATCHES)
    )


def default_tables() -> MaterialTables:
    return MaterialTables()


__all__ = ["MaterialTables", "default_tables"]
