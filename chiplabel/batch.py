"""
Batch parsing of many (category, label) pairs into a pandas DataFrame.

One output row per input row, in input order. A label that fails to parse
does not abort the batch: its row keeps the category and label, leaves
the parsed columns empty and records "<ErrorClass>: <message>" in the
``error`` column.

Parsers are pure functions, so ``max_workers > 1`` simply fans the rows
out over a ThreadPoolExecutor; the registry's one-time lazy initializers
are the only synchronization point.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

import pandas as pd

from chiplabel.exceptions import ChipLabelError
from chiplabel.process import process_label
from chiplabel.registry import ParserRegistry, default_registry

logger = logging.getLogger(__name__)

COLUMNS = [
    "category", "label", "kind", "manufacturer", "year", "month", "week",
    "calendar", "rom_id", "error",
]


def _row(
    category: str,
    label: str | None,
    year_hint: int | None,
    registry: ParserRegistry,
) -> dict:
    row: dict = {"category": category, "label": label}
    try:
        part = process_label(category, label, year_hint, registry=registry)
    except ChipLabelError as e:
        logger.debug("Failed to parse %r in %s: %s", label, category, e)
        row["error"] = f"{type(e).__name__}: {e}"
        return row
    if part is None:
        return row
    date = part.date_code
    row.update(
        {
            "kind": part.kind,
            "manufacturer": part.manufacturer.display_name if part.manufacturer else None,
            "year": date.year,
            "month": int(date.month) if date.month is not None else None,
            "week": date.week,
            "calendar": date.calendar(),
            "rom_id": part.rom_id,
        }
    )
    return row


def _label(value: object) -> str | None:
    # Blank cells read by pandas arrive as NaN
    if value is None or pd.isna(value):
        return None
    return value if isinstance(value, str) else str(value)


def _pairs(rows: Iterable[tuple[str, str]] | pd.DataFrame) -> list[tuple[str, str | None]]:
    if isinstance(rows, pd.DataFrame):
        missing = {"category", "label"} - set(rows.columns)
        if missing:
            raise ValueError(f"DataFrame is missing required columns: {sorted(missing)}")
        rows = zip(rows["category"], rows["label"])
    return [(category, _label(label)) for category, label in rows]


def parse_labels(
    rows: Iterable[tuple[str, str]] | pd.DataFrame,
    year_hint: int | None = None,
    max_workers: int | None = None,
    registry: ParserRegistry | None = None,
) -> pd.DataFrame:
    """Parse many labels and tabulate the results.

    Args:
        rows: ``(category, label)`` pairs, or a DataFrame with ``category``
            and ``label`` columns. Missing labels (None or NaN, as from a
            blank CSV cell) are empty slots and produce an empty row.
        year_hint: Context year for resolving one-digit years, shared by
            every row.
        max_workers: Thread count. None falls back to the registry config's
            ``max_workers``; 1 or None there parses serially.
        registry: Registry to use; defaults to the shared one.

    Returns:
        DataFrame with the columns in ``COLUMNS``, one row per input row.

    Raises:
        ValueError: If a DataFrame input lacks the category/label columns.
    """
    registry = registry or default_registry()
    pairs = _pairs(rows)
    workers = max_workers if max_workers is not None else registry.config.max_workers

    if workers and workers > 1 and len(pairs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(
                pool.map(lambda pair: _row(pair[0], pair[1], year_hint, registry), pairs)
            )
    else:
        results = [_row(category, label, year_hint, registry) for category, label in pairs]

    failed = sum(1 for r in results if r.get("error"))
    logger.info("Parsed %d labels (%d failed)", len(results), failed)

    # Explicit column order keeps the schema stable for empty input
    return pd.DataFrame(results, columns=COLUMNS)
