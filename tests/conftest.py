"""
Shared test fixtures and constants for chiplabel tests.

Label samples used by more than one test module are defined here as
module-level constants for easy discovery.
"""

import pytest

from chiplabel.parsers.base import FamilyParser
from chiplabel.registry import ParserRegistry, index_families

# ---------------------------------------------------------------------------
# Label samples -- real transcriptions of component markings
# ---------------------------------------------------------------------------
MGB_CPU_LABEL = "CPU MGB Ⓜ © 1996 Nintendo JAPAN 9808 D"
SST_FLASH_LABEL = "39VF512 70-4C-WH 0216049-D"
KDS_DMG_CRYSTAL_LABEL = "D419A2"
MGB_CRYSTAL_LABEL = "4.1943 RVR 841"
DMG_STAMP_LABEL = "010 23"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def families() -> dict[str, FamilyParser]:
    """Every family constant of the built-in parser modules, by name."""
    return index_families()


@pytest.fixture
def registry() -> ParserRegistry:
    """A fresh registry over the built-in catalog (no shared lazy state)."""
    return ParserRegistry()


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full category catalog)",
    )
