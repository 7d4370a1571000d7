"""Application state around a loaded data set and its metrics."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

from demostat.records import (
    MAX_COLUMN,
    MIN_COLUMN,
    DemographicRecord,
    calculate_max,
    calculate_median,
    calculate_min,
    load_data,
)


class ContextError(Exception):
    """Base error of context operations."""

    code = 3


class DataLoadError(ContextError):
    """The data file could not be read or held no matching records."""

    code = 1


class MetricsError(ContextError):
    """Metrics cannot be computed for the current data or column."""

    code = 2


class Operation(IntEnum):
    """Operations accepted by Context.do_operation."""

    INIT = 0
    LOAD_DATA = 1
    CALCULATE = 2
    CALCULATE_AND_DRAW = 3
    FREE = 4


@dataclass(frozen=True)
class Metrics:
    """Minimum, maximum and median of one column."""

    minimum: float
    maximum: float
    median: float


@dataclass
class Context:
    """Loaded records, the region filter and the selected column."""

    records: list[DemographicRecord] = field(default_factory=list)
    region: Optional[str] = None
    column: int = -1

    def load(self, filename: Union[str, os.PathLike]) -> None:
        """Replace the records with those of ``filename`` for the current region."""
        self.records = []
        try:
            records = load_data(filename, self.region)
        except OSError as exc:
            raise DataLoadError(f"cannot read {filename}: {exc}") from exc
        if not records:
            raise DataLoadError(f"no matching records in {filename}")
        self.records = records

    def calculate_metrics(self) -> Metrics:
        """Compute the metrics of the selected column over the loaded records."""
        if not self.records or not MIN_COLUMN <= self.column <= MAX_COLUMN:
            raise MetricsError(f"cannot compute metrics for column {self.column}")
        return Metrics(
            calculate_min(self.records, self.column),
            calculate_max(self.records, self.column),
            calculate_median(self.records, self.column),
        )

    def clear(self) -> None:
        """Drop the loaded records and the region filter."""
        self.records = []
        self.region = None

    def do_operation(
        self, operation: Union[Operation, int], filename: Optional[Union[str, os.PathLike]] = None
    ) -> Optional[Metrics]:
        """Run one operation; calculations return their metrics."""
        try:
            operation = Operation(operation)
        except ValueError:
            raise ContextError(f"unknown operation: {operation!r}") from None

        if operation is Operation.INIT:
            self.records = []
            self.region = None
            self.column = -1
        elif operation is Operation.LOAD_DATA:
            if filename is not None:
                self.load(filename)
        elif operation in (Operation.CALCULATE, Operation.CALCULATE_AND_DRAW):
            return self.calculate_metrics()
        else:
            self.clear()
        return None