"""
Unit tests for the engine config model and YAML I/O (chiplabel.config).

Tests Pydantic validation of the manufacturing window, defaults, and the
YAML serialization round-trip.
"""

import pytest
from pydantic import ValidationError

from chiplabel.config import DEFAULT_CONFIG, EngineConfig, load_config, save_config
from chiplabel.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# EngineConfig
# ---------------------------------------------------------------------------

class TestEngineConfig:
    """Tests for EngineConfig validation and defaults."""

    def test_defaults(self):
        cfg = EngineConfig()
        assert cfg.earliest_year == 1988
        assert cfg.latest_year == 2009
        assert cfg.warn_on_ambiguity is True
        assert cfg.categories_dir is None
        assert cfg.max_workers is None

    def test_default_instance_matches_defaults(self):
        assert DEFAULT_CONFIG == EngineConfig()

    def test_window_bounds_inclusive(self):
        cfg = EngineConfig()
        assert cfg.year_in_window(1988)
        assert cfg.year_in_window(2009)
        assert not cfg.year_in_window(1987)
        assert not cfg.year_in_window(2010)

    def test_single_year_window(self):
        cfg = EngineConfig(earliest_year=1998, latest_year=1998)
        assert cfg.year_in_window(1998)

    def test_inverted_window_rejected(self):
        with pytest.raises(ValidationError, match="after"):
            EngineConfig(earliest_year=2000, latest_year=1999)

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError, match="earliest_year"):
            EngineConfig(earliest_year="soon")


# ---------------------------------------------------------------------------
# YAML round-trip
# ---------------------------------------------------------------------------

class TestYamlRoundTrip:
    """Tests for save_config -> load_config."""

    def test_round_trip_defaults(self, tmp_path):
        yaml_path = tmp_path / "chiplabel.yaml"
        save_config(EngineConfig(), yaml_path)
        assert load_config(yaml_path) == EngineConfig()

    def test_round_trip_custom(self, tmp_path):
        cfg = EngineConfig(
            earliest_year=1989,
            latest_year=2003,
            warn_on_ambiguity=False,
            categories_dir="catalog",
            max_workers=4,
        )
        yaml_path = tmp_path / "chiplabel.yaml"
        save_config(cfg, yaml_path)
        assert load_config(yaml_path) == cfg

    def test_creates_parent_directories(self, tmp_path):
        yaml_path = tmp_path / "nested" / "dir" / "chiplabel.yaml"
        save_config(EngineConfig(), yaml_path)
        assert yaml_path.exists()

    def test_yaml_file_has_header_comment(self, tmp_path):
        yaml_path = tmp_path / "chiplabel.yaml"
        save_config(EngineConfig(), yaml_path)
        assert yaml_path.read_text(encoding="utf-8").startswith("# chiplabel engine configuration")

    def test_header_states_year_window(self, tmp_path):
        yaml_path = tmp_path / "chiplabel.yaml"
        save_config(EngineConfig(earliest_year=1989, latest_year=2003), yaml_path)
        header = yaml_path.read_text(encoding="utf-8").split("\n\n", 1)[0]
        assert "1989-2003" in header
        assert "Category catalog: built-in" in header

    def test_partial_file_uses_defaults(self, tmp_path):
        yaml_path = tmp_path / "chiplabel.yaml"
        yaml_path.write_text("latest_year: 2005\n", encoding="utf-8")
        cfg = load_config(yaml_path)
        assert cfg.latest_year == 2005
        assert cfg.earliest_year == 1988


class TestLoadConfigErrors:
    """Tests for error handling in load_config."""

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "nonexistent.yaml")

    def test_empty_file(self, tmp_path):
        yaml_path = tmp_path / "empty.yaml"
        yaml_path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="empty"):
            load_config(yaml_path)

    def test_non_mapping_file(self, tmp_path):
        yaml_path = tmp_path / "list.yaml"
        yaml_path.write_text("- 1988\n- 2009\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(yaml_path)

    def test_invalid_window_in_file(self, tmp_path):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text("earliest_year: 2001\nlatest_year: 1990\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(yaml_path)
