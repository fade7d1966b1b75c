"""Material descriptor construction for resolved tags."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from ..config import DEFAULT_LOCALE, PackageConfig
from ..logging import get_logger
from ..models import (
    AttributeSpec,
    DocComponent,
    EventSpec,
    MaterialDescriptor,
    Resolution,
    SlotSpec,
    TagDescriptor,
)
from ..naming import capitalize_first, locale_key
from ..tables import MaterialTables, default_tables
from .inference import FUNCTION, infer_type, parse_default, select_widget, split_binding

GROUP_LABELS = {"zh_CN": "基础属性", "en_US": "Basic properties"}

UPDATE_EVENT_LABELS = {
    "zh_CN": "{name} 变化时触发",
    "en_US": "Fired when {name} changes",
}

UPDATE_PARAM_DESCRIPTIONS = {
    "zh_CN": "双向绑定的 {name} 属性值",
    "en_US": "New value of the two-way bound {name}",
}

DEFAULT_CONTEXT_MENU = ["copy", "remove", "insert", "updateAttr", "bindEevent", "createBlock"]

Translations = Mapping[str, Mapping[str, DocComponent]]


def event_key(name: str) -> str:
    """Return the editor event key for ``name``: ``change`` -> ``onChange``."""
    return f"on{capitalize_first(name)}"


def property_record(
    name: str,
    type_: str,
    *,
    default: Any = None,
    widget: Dict[str, Any] | None = None,
    label: Dict[str, str] | None = None,
    description: Dict[str, str] | None = None,
) -> Dict[str, Any]:
    """Return one entry of a property group's ``content`` list.

    ``defaultValue`` is omitted entirely when there is no default.
    """
    record: Dict[str, Any] = {
        "property": name,
        "label": {"text": label or {"zh_CN": name}},
        "description": description or {"zh_CN": ""},
        "required": False,
        "readOnly": False,
        "disabled": False,
        "cols": 12,
        "labelPosition": "top",
        "type": type_,
    }
    if default is not None:
        record["defaultValue"] = default
    record["widget"] = widget or select_widget(type_)
    record["device"] = []
    return record


def default_configure(framework: str) -> Dict[str, Any]:
    return {
        "loop": True,
        "condition": True,
        "styles": True,
        "isContainer": False,
        "isModal": False,
        "isPopper": False,
        "nestingRule": {
            "childWhitelist": "",
            "parentWhitelist": "",
            "descendantBlacklist": "",
            "ancestorWhitelist": "",
        },
        "isNullNode": False,
        "isLayout": False,
        "rootSelector": "",
        "shortcuts": {"properties": []},
        "contextMenu": {"actions": list(DEFAULT_CONTEXT_MENU), "disable": []},
        "invalidity": [""],
        "clickCapture": True,
        "framework": framework,
    }


class DescriptorBuilder:
    """Builds one :class:`MaterialDescriptor` per resolved tag."""

    def __init__(
        self,
        *,
        package: PackageConfig | None = None,
        tables: MaterialTables | None = None,
        locales: Sequence[str] = (DEFAULT_LOCALE,),
    ) -> None:
        self.package = package or PackageConfig()
        self.tables = tables or default_tables()
        self.locale_keys = [locale_key(locale) for locale in locales]
        self.logger = get_logger("builder")

    def build(
        self,
        resolution: Resolution,
        tag: TagDescriptor,
        *,
        version: str,
        material_id: int = 1,
        translations: Translations | None = None,
    ) -> MaterialDescriptor:
        component = resolution.component
        localized = self._localized(resolution, translations or {})

        properties, bound = self.build_properties(tag.attributes)
        events = self.build_events(tag.events, bound)
        properties = drop_shadowed_callbacks(properties, events)
        slots = self.build_slots(tag.slots)

        name = self._names(resolution, localized)
        component_name = f"{self.package.prefix}{component.title}"
        icon = component.icon or tag.name

        return MaterialDescriptor(
            id=material_id,
            version=version,
            name=name,
            component=component_name,
            icon=icon,
            description=component.description,
            screenshot=component.cover or "",
            npm={
                "package": self.package.name,
                "version": self.package.version,
                "script": self.package.script_url(),
                "css": self.package.css_url(),
                "dependencies": None,
                "exportName": component.title,
            },
            group="component",
            category=component.type,
            configure=default_configure(self.package.framework),
            schema={
                "properties": [
                    {
                        "name": "0",
                        "label": self._fixed(GROUP_LABELS),
                        "content": properties,
                        "description": {key: "" for key in self.locale_keys},
                    }
                ],
                "events": events,
                "slots": slots,
            },
            snippets=[self.build_snippet(component, name, component_name, icon)],
        )

    # ------------------------------------------------------------------
    # Schema sections

    def build_properties(
        self, attributes: Sequence[AttributeSpec]
    ) -> Tuple[List[Dict[str, Any]], List[Tuple[str, str]]]:
        """Return property records and the ``(name, type)`` of bound ones."""
        records: List[Dict[str, Any]] = []
        bound: List[Tuple[str, str]] = []
        seen = set()
        for attribute in attributes:
            name, is_bound = split_binding(attribute.name)
            type_ = infer_type(attribute.type)
            if type_ is None:
                self.logger.debug("Dropping %s: unsupported type %r", attribute.name, attribute.type)
                continue
            if name in seen:
                continue
            seen.add(name)
            records.append(
                property_record(
                    name,
                    type_,
                    default=parse_default(attribute.default, type_),
                    widget=select_widget(type_, attribute.type),
                    label={key: name for key in self.locale_keys},
                    description=self._texts(attribute.description, attribute.i18n),
                )
            )
            if is_bound:
                bound.append((name, type_))
        return records, bound

    def build_events(
        self, events: Sequence[EventSpec], bound: Sequence[Tuple[str, str]] = ()
    ) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for event in events:
            key = event_key(event.name)
            if key in result:
                continue
            description = self._texts(event.description, event.i18n)
            result[key] = {
                "label": {k: v or event.name for k, v in description.items()},
                "description": description,
                "type": "event",
                "functionInfo": {"params": [], "returns": {}},
                "defaultValue": "",
            }
        for name, type_ in bound:
            key = event_key(f"update:{name}")
            if key in result:
                continue
            result[key] = {
                "label": self._fixed(UPDATE_EVENT_LABELS, name=name),
                "description": self._fixed(UPDATE_EVENT_LABELS, name=name),
                "type": "event",
                "functionInfo": {
                    "params": [
                        {
                            "name": name,
                            "type": type_,
                            "defaultValue": "",
                            "description": self._fixed(UPDATE_PARAM_DESCRIPTIONS, name=name),
                        }
                    ],
                    "returns": {},
                },
                "defaultValue": "",
            }
        return result

    def build_slots(self, slots: Sequence[SlotSpec]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for slot in slots:
            name = "default" if slot.name.startswith("default") else slot.name
            if name in result:
                continue
            result[name] = {
                "label": {key: name for key in self.locale_keys},
                "description": self._texts(slot.description, slot.i18n),
            }
        return result

    def build_snippet(
        self,
        component: DocComponent,
        name: Dict[str, str],
        component_name: str,
        icon: str,
    ) -> Dict[str, Any]:
        template = self.tables.snippets.get(component.title)
        return {
            "name": dict(name),
            "icon": icon,
            "screenshot": "",
            "snippetName": component_name,
            "schema": deepcopy(template) if template is not None else {},
        }

    # ------------------------------------------------------------------
    # Internals

    def _localized(
        self, resolution: Resolution, translations: Translations
    ) -> Dict[str, DocComponent]:
        localized = {
            locale_key(locale): component
            for locale, component in translations.get(resolution.component.name, {}).items()
        }
        localized[locale_key(resolution.component.locale)] = resolution.component
        return localized

    def _names(
        self, resolution: Resolution, localized: Mapping[str, DocComponent]
    ) -> Dict[str, str]:
        title = resolution.component.title
        names: Dict[str, str] = {}
        for key in self.locale_keys:
            component = localized.get(key)
            if resolution.derived or component is None:
                names[key] = title
            else:
                names[key] = component.subtitle or component.title
        return names

    def _texts(self, description: str, i18n: Mapping[str, str]) -> Dict[str, str]:
        texts: Dict[str, str] = {}
        for key in self.locale_keys:
            texts[key] = i18n.get(key, "")
        if not any(texts.values()) and description:
            texts[self.locale_keys[0]] = description
        return texts

    def _fixed(self, labels: Mapping[str, str], **values: str) -> Dict[str, str]:
        return {
            key: labels.get(key, labels["en_US"]).format(**values) for key in self.locale_keys
        }


def drop_shadowed_callbacks(
    properties: Sequence[Dict[str, Any]], events: Mapping[str, Any]
) -> List[Dict[str, Any]]:
    """Remove function properties that duplicate a declared event."""
    kept: List[Dict[str, Any]] = []
    for record in properties:
        name = record["property"]
        if record["type"] == FUNCTION and (name in events or event_key(name) in events):
            continue
        kept.append(record)
    return kept


__all__ = [
    "DescriptorBuilder",
    "default_configure",
    "drop_shadowed_callbacks",
    "event_key",
    "property_record",
]
