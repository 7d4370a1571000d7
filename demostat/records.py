"""Demographic records: CSV loading and per-column statistics."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union

NUM_COLUMNS = 7
MIN_COLUMN = 2
MAX_COLUMN = 6


class Column(IntEnum):
    """Column numbers of a demographic CSV file, the region column excluded."""

    YEAR = 1
    NATURAL_GROWTH = 2
    BIRTH_RATE = 3
    DEATH_RATE = 4
    DEMOGRAPHIC_WEIGHT = 5
    URBANIZATION = 6


@dataclass
class DemographicRecord:
    """One row of demographic data for a region and a year."""

    year: int
    region: str
    natural_population_growth: float = 0.0
    birth_rate: float = 0.0
    death_rate: float = 0.0
    general_demographic_weight: float = 0.0
    urbanization: float = 0.0


_METRIC_FIELDS = {
    Column.NATURAL_GROWTH: "natural_population_growth",
    Column.BIRTH_RATE: "birth_rate",
    Column.DEATH_RATE: "death_rate",
    Column.DEMOGRAPHIC_WEIGHT: "general_demographic_weight",
    Column.URBANIZATION: "urbanization",
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_int(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _parse_float(text: str) -> float:
    """Read the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_line(line: str) -> Optional[DemographicRecord]:
    """Parse one data line, or return None when it has too few fields."""
    tokens = [token for token in line.split(",") if token][:NUM_COLUMNS]
    if len(tokens) < NUM_COLUMNS:
        return None
    year, region, *rates = (token.lstrip(' "') for token in tokens)
    return DemographicRecord(_parse_int(year), region, *(_parse_float(rate) for rate in rates))


def load_data(
    filename: Union[str, os.PathLike], region: Optional[str] = None
) -> list[DemographicRecord]:
    """Load the records of a CSV file, skipping its header line.

    Rows with fewer than seven fields are dropped; when ``region`` is given
    only rows of that exact region are kept. Raises OSError when the file
    cannot be opened.
    """
    with open(filename, encoding="utf-8", errors="replace", newline="\n") as stream:
        if not stream.readline():
            return []
        records = []
        for line in stream:
            if line[:1] in ("\n", "\r"):
                continue
            record = _parse_line(line)
            if record is not None and (region is None or record.region == region):
                records.append(record)
    return records


def select_value(record: DemographicRecord, column: int) -> float:
    """Return the value of a metric column; 0.0 for any other column."""
    field_name = _METRIC_FIELDS.get(column)
    return getattr(record, field_name) if field_name else 0.0


def sorted_values(records: Iterable[DemographicRecord], column: int) -> list[float]:
    """Return the values of a metric column in ascending order."""
    if column not in _METRIC_FIELDS:
        raise ValueError(f"column {column} is not a metric column")
    return sorted(select_value(record, column) for record in records)


def calculate_min(records: list[DemographicRecord], column: int) -> float:
    """Smallest value of a column; 0.0 for no records or a non-metric column."""
    if not records or column not in _METRIC_FIELDS:
        return 0.0
    return sorted_values(records, column)[0]


def calculate_max(records: list[DemographicRecord], column: int) -> float:
    """Largest value of a column; 0.0 for no records or a non-metric column."""
    if not records or column not in _METRIC_FIELDS:
        return 0.0
    return sorted_values(records, column)[-1]


def calculate_median(records: list[DemographicRecord], column: int) -> float:
    """Median value of a column; 0.0 for no records.

    Raises ValueError for a non-metric column.
    """
    if not records:
        return 0.0
    values = sorted_values(records, column)
    middle = len(values) // 2
    if len(values) % 2 == 0:
        return (values[middle - 1] + values[middle]) / 2.0
    return values[middle]