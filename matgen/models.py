"""Core data models shared across matgen components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DocComponent:
    """Component metadata read from one documentation file."""

    name: str
    locale: str
    title: str
    subtitle: str = ""
    type: str = ""
    icon: Optional[str] = None
    cover: Optional[str] = None
    description: str = ""
    source: str = ""
    extra: Dict[str, str] = field(default_factory=dict)


@dataclass
class AttributeSpec:
    """Attribute entry from the extracted type index."""

    name: str
    description: str = ""
    default: Any = None
    type: str = ""
    kind: str = "expression"
    i18n: Dict[str, str] = field(default_factory=dict)


@dataclass
class EventSpec:
    """Event entry from the extracted type index."""

    name: str
    description: str = ""
    i18n: Dict[str, str] = field(default_factory=dict)


@dataclass
class SlotSpec:
    """Slot entry from the extracted type index."""

    name: str
    description: str = ""
    i18n: Dict[str, str] = field(default_factory=dict)


@dataclass
class TagDescriptor:
    """Attributes, events, and slots documented for one kebab-case tag."""

    name: str
    attributes: List[AttributeSpec] = field(default_factory=list)
    events: List[EventSpec] = field(default_factory=list)
    slots: List[SlotSpec] = field(default_factory=list)


@dataclass
class TypeIndex:
    """Tag-indexed table produced by the type extraction tool."""

    version: str
    tags: Dict[str, TagDescriptor] = field(default_factory=dict)


@dataclass(frozen=True)
class Resolution:
    """Outcome of mapping a tag to a documented component."""

    tag: str
    component: DocComponent
    strategy: str
    derived: bool = False


@dataclass
class MaterialDescriptor:
    """Material record consumed by the low-code editor."""

    id: int
    version: str
    name: Dict[str, str]
    component: str
    icon: str
    description: str
    npm: Dict[str, Any]
    group: str
    category: str
    configure: Dict[str, Any]
    schema: Dict[str, Any]
    snippets: List[Dict[str, Any]] = field(default_factory=list)
    doc_url: str = ""
    screenshot: str = ""
    tags: str = ""
    keywords: str = ""
    dev_mode: str = "proCode"

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON layout in the editor's field order."""
        return {
            "id": self.id,
            "version": self.version,
            "name": self.name,
            "component": self.component,
            "icon": self.icon,
            "description": self.description,
            "doc_url": self.doc_url,
            "screenshot": self.screenshot,
            "tags": self.tags,
            "keywords": self.keywords,
            "dev_mode": self.dev_mode,
            "npm": self.npm,
            "group": self.group,
            "category": self.category,
            "configure": self.configure,
            "schema": self.schema,
            "snippets": self.snippets,
        }
