from __future__ import annotations

from pathlib import Path

import pytest

from util import utils
from util.utils import config_section, load_config


@pytest.mark.integration
# What this tests
# - load_config reads configs/default.yaml from the repository root.
def test_load_config_reads_default_yaml():
    cfg = load_config()
    assert cfg.get("palette_store", {}).get("key") == "savedPalettes"
    assert config_section("generation").get("default_count") == 5


@pytest.mark.integration
# - Root config.yaml overrides top-level keys; broken files are ignored.
def test_load_config_root_override_and_broken_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "palette_store:\n  key: base\ngeneration:\n  default_count: 5\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("palette_store:\n  key: override\n", encoding="utf-8")
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)

    cfg = load_config()
    assert cfg["palette_store"] == {"key": "override"}
    assert cfg["generation"] == {"default_count": 5}

    (tmp_path / "config.yaml").write_text("palette_store: [unclosed\n", encoding="utf-8")
    load_config.cache_clear()
    assert load_config()["palette_store"] == {"key": "base"}


def test_config_section_tolerates_non_dict(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(utils, "load_config", lambda: {"palette_store": ["not", "a", "dict"]})
    assert config_section("palette_store") == {}
    assert config_section("missing") == {}


@pytest.mark.integration
# - The parsed config is cached; cache_clear() picks up edits on disk.
def test_load_config_is_read_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "configs").mkdir()
    default_yaml = tmp_path / "configs" / "default.yaml"
    default_yaml.write_text("generation:\n  default_count: 3\n", encoding="utf-8")
    monkeypatch.setattr(utils, "_find_project_root", lambda start: tmp_path)

    reads: list[Path] = []
    real_load = utils._safe_load_yaml

    def counting_load(path: Path):
        reads.append(path)
        return real_load(path)

    monkeypatch.setattr(utils, "_safe_load_yaml", counting_load)

    assert config_section("generation") == {"default_count": 3}
    assert config_section("generation") == {"default_count": 3}
    assert config_section("palette_store") == {}
    assert reads == [default_yaml]

    config_section("generation")["default_count"] = 99
    assert config_section("generation") == {"default_count": 3}

    default_yaml.write_text("generation:\n  default_count: 7\n", encoding="utf-8")
    assert config_section("generation") == {"default_count": 3}
    load_config.cache_clear()
    assert config_section("generation") == {"default_count": 7}
    assert len(reads) == 2
