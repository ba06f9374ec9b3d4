"""
Unit tests for the category catalog loader (chiplabel.category_registry).

Uses tmp_path catalogs to cover validation, duplicate detection and the
skip-and-warn behavior for broken files, plus a sanity check of the
shipped catalog.
"""

import logging
import textwrap

import pytest

from chiplabel.category_registry import Category, load_all_categories, load_category_file
from chiplabel.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def _write(path, text: str):
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


_VALID = """\
    group: marks
    categories:
      - id: battery
        name: CRxxxx battery
        part: DateOnly
        families: [BATTERY]
      - id: dmg_stamp
        name: DMG mainboard stamp
        part: DateOnly
        families: [DMG_STAMP]
    """


# ---------------------------------------------------------------------------
# load_category_file
# ---------------------------------------------------------------------------

class TestLoadCategoryFile:
    """Tests for loading a single catalog file."""

    def test_valid_file(self, tmp_path):
        categories = load_category_file(_write(tmp_path / "marks.yaml", _VALID))
        assert [c.id for c in categories] == ["battery", "dmg_stamp"]
        assert categories[0].families == ["BATTERY"]

    def test_group_copied_to_categories(self, tmp_path):
        categories = load_category_file(_write(tmp_path / "marks.yaml", _VALID))
        assert {c.group for c in categories} == {"marks"}

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path / "empty.yaml", "")
        with pytest.raises(ConfigurationError, match="empty"):
            load_category_file(path)

    def test_empty_family_list_rejected(self, tmp_path):
        path = _write(
            tmp_path / "bad.yaml",
            """\
            group: x
            categories:
              - id: nothing
                name: Nothing
                part: DateOnly
                families: []
            """,
        )
        with pytest.raises(ConfigurationError, match="families"):
            load_category_file(path)

    def test_unknown_part_type_rejected(self, tmp_path):
        path = _write(
            tmp_path / "bad.yaml",
            """\
            group: x
            categories:
              - id: thing
                name: Thing
                part: Resistor
                families: [BATTERY]
            """,
        )
        with pytest.raises(ConfigurationError, match="part"):
            load_category_file(path)

    def test_missing_group_rejected(self, tmp_path):
        path = _write(tmp_path / "bad.yaml", "categories: []\n")
        with pytest.raises(ConfigurationError, match="group"):
            load_category_file(path)


# ---------------------------------------------------------------------------
# load_all_categories
# ---------------------------------------------------------------------------

class TestLoadAllCategories:
    """Tests for directory-wide catalog loading."""

    def test_merges_files(self, tmp_path):
        _write(tmp_path / "a.yaml", _VALID)
        _write(
            tmp_path / "b.yaml",
            """\
            group: crystals
            categories:
              - id: dmg_crystal
                name: DMG crystal
                part: Crystal
                families: [KDS_D419_OLD]
            """,
        )
        catalog = load_all_categories(tmp_path)
        assert list(catalog) == ["battery", "dmg_stamp", "dmg_crystal"]
        assert isinstance(catalog["dmg_crystal"], Category)

    def test_duplicate_id_raises(self, tmp_path):
        _write(tmp_path / "a.yaml", _VALID)
        _write(tmp_path / "b.yaml", _VALID)
        with pytest.raises(ConfigurationError, match="Duplicate category id 'battery'"):
            load_all_categories(tmp_path)

    def test_broken_file_skipped_with_warning(self, tmp_path, caplog):
        _write(tmp_path / "a.yaml", _VALID)
        _write(tmp_path / "b.yaml", "")
        with caplog.at_level(logging.WARNING, logger="chiplabel.category_registry"):
            catalog = load_all_categories(tmp_path)
        assert list(catalog) == ["battery", "dmg_stamp"]
        assert "b.yaml" in caplog.text

    def test_non_yaml_files_ignored(self, tmp_path):
        _write(tmp_path / "a.yaml", _VALID)
        _write(tmp_path / "notes.txt", "not a catalog")
        assert len(load_all_categories(tmp_path)) == 2

    def test_empty_directory(self, tmp_path):
        assert load_all_categories(tmp_path) == {}


class TestBuiltinCatalog:
    """Sanity checks on the shipped catalog."""

    def test_loads(self):
        catalog = load_all_categories()
        assert "mgb_soc_qfp_80" in catalog
        assert catalog["battery"].part == "DateOnly"

    def test_every_category_has_group(self):
        assert all(c.group for c in load_all_categories().values())

    def test_no_family_listed_twice_in_one_category(self):
        for category in load_all_categories().values():
            assert len(set(category.families)) == len(category.families), category.id
