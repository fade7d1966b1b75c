"""Configuration loading for matgen (.matgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".matgen.yml"

DEFAULT_LOCALE = "zh-CN"


@dataclass
class DocsConfig:
    """Where documentation lives and which components to skip."""

    root: Path
    ignore: List[str] = field(default_factory=list)


@dataclass
class PackageConfig:
    """npm package the materials point at."""

    name: str = "ant-design-vue"
    version: str = "4.2.6"
    prefix: str = "A"
    script: str = "https://unpkg.com/{name}@{version}/dist/antd.esm.min.js"
    css: str = "https://unpkg.com/{name}@{version}/dist/reset.css"
    framework: str = "Vue"

    def script_url(self) -> str:
        return self.script.format(name=self.name, version=self.version)

    def css_url(self) -> str:
        return self.css.format(name=self.name, version=self.version)


@dataclass
class ExtractorConfig:
    """External type extraction command and its output location."""

    output_dir: Path
    command: List[str] = field(default_factory=list)
    typings: Optional[Path] = None


@dataclass
class MatgenConfig:
    """Represents the high-level settings defined in .matgen.yml."""

    root: Path
    docs: DocsConfig
    extractor: ExtractorConfig
    output_dir: Path
    locales: List[str] = field(default_factory=lambda: [DEFAULT_LOCALE])
    package: PackageConfig = field(default_factory=PackageConfig)

    @property
    def primary_locale(self) -> str:
        return self.locales[0]


def default_config(root: Path) -> MatgenConfig:
    """Return the settings used when no .matgen.yml is present."""
    return MatgenConfig(
        root=root,
        docs=DocsConfig(root=root / "components"),
        extractor=ExtractorConfig(output_dir=root / "dsl" / "metadata"),
        output_dir=root / "dsl" / "components" / "tiny-engine",
    )


def load_config(config_path: Path) -> MatgenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = default_config(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    docs_data = _as_dict(data.get("docs"))
    if docs_data:
        docs_root = _as_str(docs_data.get("root"))
        if docs_root:
            config.docs.root = root / docs_root
        config.docs.ignore = _as_str_list(docs_data.get("ignore"))

    locales = _as_str_list(data.get("locales"))
    if locales:
        config.locales = locales

    package_data = _as_dict(data.get("package"))
    if package_data:
        package = config.package
        for attr in ("name", "version", "prefix", "script", "css", "framework"):
            value = _as_str(package_data.get(attr))
            if value is not None:
                setattr(package, attr, value)

    extractor_data = _as_dict(data.get("extractor"))
    if extractor_data:
        raw_command = extractor_data.get("command")
        if isinstance(raw_command, str):
            config.extractor.command = raw_command.split()
        else:
            config.extractor.command = _as_str_list(raw_command)
        output_dir = _as_str(extractor_data.get("output_dir"))
        if output_dir:
            config.extractor.output_dir = root / output_dir
        typings = _as_str(extractor_data.get("typings"))
        if typings:
            config.extractor.typings = root / typings

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config.output_dir = root / output_dir

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_LOCALE",
    "DocsConfig",
    "ExtractorConfig",
    "MatgenConfig",
    "PackageConfig",
    "default_config",
    "load_config",
]
