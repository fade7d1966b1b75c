"""Tests for matgen.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from matgen.config import MatgenConfig, PackageConfig, load_config
from matgen.errors import ConfigError


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    root = tmp_path.resolve()
    assert isinstance(config, MatgenConfig)
    assert config.root == root
    assert config.locales == ["zh-CN"]
    assert config.primary_locale == "zh-CN"
    assert config.docs.root == root / "components"
    assert config.docs.ignore == []
    assert config.extractor.command == []
    assert config.extractor.output_dir == root / "dsl" / "metadata"
    assert config.output_dir == root / "dsl" / "components" / "tiny-engine"
    assert config.package == PackageConfig()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".matgen.yml"
    config_file.write_text(
        """
docs:
  root: "site/components"
  ignore: [affix, back-top]
locales:
  - zh-CN
  - en-US
package:
  name: "my-ui"
  version: 1.2
  prefix: "M"
  framework: "Vue"
extractor:
  command: ["node", "tools/generator-types.js", "--locale", "{locale}"]
  output_dir: "build/types"
  typings: "typings/global.d.ts"
output_dir: "build/materials"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    root = tmp_path.resolve()
    assert config.docs.root == root / "site" / "components"
    assert config.docs.ignore == ["affix", "back-top"]
    assert config.locales == ["zh-CN", "en-US"]
    assert config.package.name == "my-ui"
    assert config.package.version == "1.2"
    assert config.package.prefix == "M"
    assert config.package.script_url() == "https://unpkg.com/my-ui@1.2/dist/antd.esm.min.js"
    assert config.extractor.command == ["node", "tools/generator-types.js", "--locale", "{locale}"]
    assert config.extractor.output_dir == root / "build" / "types"
    assert config.extractor.typings == root / "typings" / "global.d.ts"
    assert config.output_dir == root / "build" / "materials"


def test_load_config_splits_string_command(tmp_path: Path) -> None:
    (tmp_path / ".matgen.yml").write_text(
        "extractor:\n  command: node gen.js --test {locale}\n", encoding="utf-8"
    )

    config = load_config(tmp_path)

    assert config.extractor.command == ["node", "gen.js", "--test", "{locale}"]


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".matgen.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".matgen.yml").write_text("docs: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
