"""
Unit tests for batch parsing into DataFrames (chiplabel.batch).

Tests row order, per-row error capture, DataFrame input validation and
the threaded path.
"""

import logging
from io import StringIO

import pandas as pd
import pytest

from chiplabel.batch import COLUMNS, parse_labels
from tests.conftest import DMG_STAMP_LABEL, MGB_CPU_LABEL, SST_FLASH_LABEL


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def _make_rows() -> list[tuple[str, str]]:
    return [
        ("mgb_soc_qfp_80", MGB_CPU_LABEL),
        ("flash_tsop_i_32_3v3", SST_FLASH_LABEL),
        ("mgb_soc_qfp_80", "not a cpu"),
        ("toaster", MGB_CPU_LABEL),
        ("dmg_stamp", DMG_STAMP_LABEL),
        ("dmg_stamp", ""),
    ]


# ---------------------------------------------------------------------------
# parse_labels
# ---------------------------------------------------------------------------

class TestParseLabels:
    """Tests for parse_labels on (category, label) pairs."""

    def test_columns_and_order(self, registry):
        df = parse_labels(_make_rows(), registry=registry)
        assert list(df.columns) == COLUMNS
        assert list(df["category"]) == [c for c, _ in _make_rows()]

    def test_parsed_row(self, registry):
        df = parse_labels(_make_rows(), registry=registry)
        row = df.iloc[0]
        assert row["kind"] == "CPU MGB"
        assert row["manufacturer"] == "Sharp"
        assert row["year"] == 1998
        assert row["week"] == 8
        assert row["calendar"] == "Week 8/1998"
        assert pd.isna(row["error"])

    def test_failures_recorded_per_row(self, registry):
        df = parse_labels(_make_rows(), registry=registry)
        assert df.iloc[2]["error"].startswith("NoFamilyMatchedError: ")
        assert df.iloc[3]["error"].startswith("ConfigurationError: ")
        assert pd.isna(df.iloc[2]["kind"])

    def test_empty_label_is_not_an_error(self, registry):
        df = parse_labels(_make_rows(), registry=registry)
        row = df.iloc[5]
        assert pd.isna(row["kind"])
        assert pd.isna(row["error"])

    def test_year_hint_applies_to_all_rows(self, registry):
        df = parse_labels([("dmg_stamp", DMG_STAMP_LABEL)], year_hint=1990, registry=registry)
        assert df.iloc[0]["calendar"] == "October/1990"
        assert df.iloc[0]["month"] == 10

    def test_summary_logged(self, registry, caplog):
        with caplog.at_level(logging.INFO, logger="chiplabel.batch"):
            parse_labels(_make_rows(), registry=registry)
        assert "Parsed 6 labels (2 failed)" in caplog.text

    def test_empty_input(self, registry):
        df = parse_labels([], registry=registry)
        assert df.empty
        assert list(df.columns) == COLUMNS

    def test_threaded_matches_serial(self, registry):
        rows = _make_rows() * 5
        serial = parse_labels(rows, year_hint=1995, max_workers=1, registry=registry)
        threaded = parse_labels(rows, year_hint=1995, max_workers=4, registry=registry)
        pd.testing.assert_frame_equal(serial, threaded)


class TestDataFrameInput:
    """Tests for DataFrame input."""

    def test_dataframe_input(self, registry):
        frame = pd.DataFrame(
            {"category": ["mgb_soc_qfp_80"], "label": [MGB_CPU_LABEL], "board": ["MGB-CPU-01"]}
        )
        df = parse_labels(frame, registry=registry)
        assert df.iloc[0]["kind"] == "CPU MGB"

    def test_blank_csv_cell_is_empty_slot(self, registry):
        csv_text = f"category,label\nmgb_soc_qfp_80,{MGB_CPU_LABEL}\nmgb_soc_qfp_80,\n"
        frame = pd.read_csv(StringIO(csv_text))
        df = parse_labels(frame, registry=registry)
        assert len(df) == 2
        assert df.iloc[0]["kind"] == "CPU MGB"
        assert pd.isna(df.iloc[1]["label"])
        assert pd.isna(df.iloc[1]["kind"])
        assert pd.isna(df.iloc[1]["error"])

    def test_none_label_in_pairs(self, registry):
        df = parse_labels([("mgb_soc_qfp_80", None)], registry=registry)
        assert pd.isna(df.iloc[0]["error"])

    def test_blank_label_with_unknown_category_is_error_row(self, registry):
        frame = pd.read_csv(StringIO("category,label\ntoaster,\n"))
        df = parse_labels(frame, registry=registry)
        assert df.iloc[0]["error"].startswith("ConfigurationError: ")

    def test_missing_columns(self, registry):
        frame = pd.DataFrame({"label": [MGB_CPU_LABEL]})
        with pytest.raises(ValueError, match="category"):
            parse_labels(frame, registry=registry)
