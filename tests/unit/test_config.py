"""
Unit tests for loading and validating folding configuration files.
"""
import pytest

from rna_nussinov_fold.config import (
    apply_overrides,
    default_config_path,
    load_folding_config,
    parse_folding_config,
)
from rna_nussinov_fold.errors import ConfigError
from rna_nussinov_fold.folding.nussinov.nussinov_recurrences import NussinovFoldingConfig
from rna_nussinov_fold.rules import CANONICAL_RULE, WOBBLE_RULE


def test_bundled_defaults():
    assert default_config_path().exists()
    config = load_folding_config()
    assert config == NussinovFoldingConfig()
    assert config.rule == CANONICAL_RULE


def test_load_yaml_file(tmp_path):
    path = tmp_path / "folding.yaml"
    path.write_text("folding:\n  allow_wobble: true\n  min_hairpin_unpaired: 3\n", encoding="utf-8")

    config = load_folding_config(path)
    assert config.allow_wobble is True
    assert config.min_hairpin_unpaired == 3
    assert config.rule == WOBBLE_RULE


def test_top_level_settings():
    assert parse_folding_config({"allow_wobble": True}).allow_wobble is True


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_folding_config(path) == NussinovFoldingConfig()


@pytest.mark.parametrize("raw", [
    {"folding": {"energy_model": "turner"}},
    {"folding": {"allow_wobble": "yes"}},
    {"folding": {"min_hairpin_unpaired": 2.5}},
    {"folding": {"min_hairpin_unpaired": True}},
    {"folding": {"min_hairpin_unpaired": -1}},
    {"folding": ["allow_wobble"]},
])
def test_invalid_settings_raise(raw):
    with pytest.raises(ConfigError):
        parse_folding_config(raw)


def test_non_mapping_raises():
    with pytest.raises(ConfigError):
        parse_folding_config(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_unreadable_files_raise_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_folding_config(tmp_path / "missing.yaml")

    wrong_ext = tmp_path / "folding.json"
    wrong_ext.write_text("{}", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_folding_config(wrong_ext)

    broken = tmp_path / "broken.yaml"
    broken.write_text("folding: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_folding_config(broken)


def test_apply_overrides():
    base = NussinovFoldingConfig(allow_wobble=False, min_hairpin_unpaired=3)
    updated = apply_overrides(base, allow_wobble=True, min_hairpin_unpaired=None)

    assert updated.allow_wobble is True
    assert updated.min_hairpin_unpaired == 3
    assert base.allow_wobble is False

    with pytest.raises(ConfigError):
        apply_overrides(base, colour="red")
