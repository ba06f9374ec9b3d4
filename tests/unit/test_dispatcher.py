"""
Unit tests for family parsers and the category dispatcher
(chiplabel.parsers.base).

Covers first-match-wins ordering, error precedence when no family
succeeds, the ambiguity warning and the exactly-once Lazy initializer.
"""

import logging
import threading
import time

import pytest

from chiplabel.datecode import Year, YearWeek
from chiplabel.exceptions import InvalidFieldError, NoFamilyMatchedError
from chiplabel.grammar import YEAR2_WEEK2, group, lines
from chiplabel.manufacturer import Manufacturer
from chiplabel.parsers.base import FamilyParser, Lazy, MultiParser, date_only, generic
from chiplabel.parts import DateOnly, GenericPart


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def _make_family(name: str, kind: str, manufacturer=Manufacturer.SHARP) -> FamilyParser:
    return FamilyParser(
        name,
        lines(group("kind", kind), str(YEAR2_WEEK2)),
        generic("{kind}", manufacturer),
        (f"{kind} 9808",),
    )


def _make_dispatcher(*families: FamilyParser, warn: bool = True) -> MultiParser:
    return MultiParser("test_category", families, warn_on_ambiguity=warn)


# ---------------------------------------------------------------------------
# FamilyParser
# ---------------------------------------------------------------------------

class TestFamilyParser:
    """Tests for a single family."""

    def test_full_match_only(self):
        family = _make_family("A", "LH5164")
        assert family.parse("LH5164 9808") == GenericPart(
            "LH5164", Manufacturer.SHARP, YearWeek(Year.full(1998), 8)
        )
        with pytest.raises(NoFamilyMatchedError):
            family.parse("XLH5164 9808")

    def test_alternatives_tried_in_order(self):
        family = FamilyParser(
            "alt",
            [lines("X", str(YEAR2_WEEK2)), "X ([0-9]{4})"],
            date_only,
        )
        assert family.parse("X 9808") == DateOnly(YearWeek(Year.full(1998), 8))

    def test_invalid_field_reported_after_all_alternatives(self):
        family = FamilyParser("bad", [lines("X", str(YEAR2_WEEK2))], date_only)
        with pytest.raises(InvalidFieldError, match="week"):
            family.parse("X 9899")

    def test_later_alternative_recovers_from_invalid_field(self):
        family = FamilyParser(
            "recover",
            [lines("X", str(YEAR2_WEEK2)), "X [0-9]{4}"],
            generic("X", None),
        )
        assert family.parse("X 9899") == GenericPart("X", None, None)

    def test_error_names_family(self):
        with pytest.raises(NoFamilyMatchedError, match="Sharp thing"):
            _make_family("Sharp thing", "LH5164").parse("nope")

    def test_repr(self):
        assert repr(_make_family("Sharp thing", "LH5164")) == "FamilyParser('Sharp thing')"


# ---------------------------------------------------------------------------
# MultiParser
# ---------------------------------------------------------------------------

class TestMultiParser:
    """Tests for ordered alternation over families."""

    def test_first_success_wins(self):
        first = _make_family("first", "LH[0-9]{4}", Manufacturer.SHARP)
        second = _make_family("second", "LH5164", Manufacturer.MITSUMI)
        dispatcher = _make_dispatcher(first, second, warn=False)
        assert dispatcher.parse("LH5164 9808").manufacturer is Manufacturer.SHARP

    def test_falls_through_to_later_family(self):
        dispatcher = _make_dispatcher(_make_family("a", "AAA"), _make_family("b", "BBB"))
        assert dispatcher.parse("BBB 9808").kind == "BBB"

    def test_no_match_names_category(self):
        dispatcher = _make_dispatcher(_make_family("a", "AAA"))
        with pytest.raises(NoFamilyMatchedError, match="test_category") as excinfo:
            dispatcher.parse("CCC 9808")
        assert excinfo.value.label == "CCC 9808"

    def test_invalid_field_beats_no_match(self):
        dispatcher = _make_dispatcher(_make_family("a", "AAA"), _make_family("b", "BBB"))
        with pytest.raises(InvalidFieldError):
            dispatcher.parse("BBB 9860")

    def test_success_beats_invalid_field(self):
        strict = _make_family("strict", "BBB")
        loose = FamilyParser("loose", "BBB [0-9]{4}", generic("BBB", None))
        dispatcher = _make_dispatcher(strict, loose, warn=False)
        assert dispatcher.parse("BBB 9860") == GenericPart("BBB", None, None)

    def test_first_invalid_field_is_raised(self):
        a = FamilyParser("a", lines("X", str(YEAR2_WEEK2)), date_only)
        b = FamilyParser("b", "X (?P<y2>[0-9]{2})(?P<m2>[0-9]{2})", date_only)
        dispatcher = _make_dispatcher(a, b)
        with pytest.raises(InvalidFieldError, match="week"):
            dispatcher.parse("X 9860")

    def test_ambiguity_warning(self, caplog):
        first = _make_family("first", "LH[0-9]{4}")
        second = _make_family("second", "LH5164")
        dispatcher = _make_dispatcher(first, second)
        with caplog.at_level(logging.WARNING, logger="chiplabel.parsers.base"):
            dispatcher.parse("LH5164 9808")
        assert "multiple matches" in caplog.text
        assert "first wins over second" in caplog.text

    def test_ambiguity_warning_disabled(self, caplog):
        dispatcher = _make_dispatcher(
            _make_family("first", "LH[0-9]{4}"), _make_family("second", "LH5164"), warn=False
        )
        with caplog.at_level(logging.WARNING, logger="chiplabel.parsers.base"):
            dispatcher.parse("LH5164 9808")
        assert caplog.text == ""

    def test_matching_families(self):
        dispatcher = _make_dispatcher(
            _make_family("first", "LH[0-9]{4}"),
            _make_family("other", "XX"),
            _make_family("second", "LH5164"),
        )
        assert dispatcher.matching_families("LH5164 9808") == ["first", "second"]
        assert dispatcher.matching_families("nothing") == []

    def test_accepts(self):
        dispatcher = _make_dispatcher(_make_family("a", "AAA"))
        assert dispatcher.accepts("AAA 9808")
        assert not dispatcher.accepts("AAA 9860")


# ---------------------------------------------------------------------------
# Lazy
# ---------------------------------------------------------------------------

class TestLazy:
    """Tests for the one-time initializer."""

    def test_value_cached(self):
        calls = []
        lazy = Lazy(lambda: calls.append(1) or len(calls))
        assert not lazy.initialized
        assert lazy.get() == 1
        assert lazy.get() == 1
        assert lazy.initialized
        assert calls == [1]

    def test_concurrent_first_access_runs_once(self):
        calls = []

        def factory():
            calls.append(1)
            time.sleep(0.05)
            return object()

        lazy = Lazy(factory)
        results = []
        threads = [threading.Thread(target=lambda: results.append(lazy.get())) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len({id(r) for r in results}) == 1

    def test_failed_factory_is_retried(self):
        attempts = []

        def factory():
            attempts.append(1)
            if len(attempts) == 1:
                raise RuntimeError("boom")
            return "ok"

        lazy = Lazy(factory)
        with pytest.raises(RuntimeError):
            lazy.get()
        assert lazy.get() == "ok"
