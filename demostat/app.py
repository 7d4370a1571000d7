"""Session state behind the demographic viewer and its command line."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Sequence, Union

from demostat.context import Context, ContextError, DataLoadError, Metrics, MetricsError, Operation
from demostat.graph import GraphModel
from demostat.records import NUM_COLUMNS, Column, select_value

ALL_REGIONS = "Все регионы"

TABLE_HEADERS = (
    "Year",
    "Region",
    "Natural Growth",
    "Birth Rate",
    "Death Rate",
    "Demographic Weight",
    "Urbanization",
)

COLUMN_CHOICES = {
    Column.YEAR: "Год",
    Column.NATURAL_GROWTH: "Естественный прирост",
    Column.BIRTH_RATE: "Рождаемость",
    Column.DEATH_RATE: "Смертность",
    Column.DEMOGRAPHIC_WEIGHT: "Демография",
    Column.URBANIZATION: "Урбанизация",
}

_AXIS_LABELS = {
    Column.YEAR: "Year",
    Column.NATURAL_GROWTH: "Natural Growth",
    Column.BIRTH_RATE: "Birth Rate",
    Column.DEATH_RATE: "Death Rate",
    Column.DEMOGRAPHIC_WEIGHT: "Demographic Weight",
    Column.URBANIZATION: "Urbanization",
}


@dataclass
class MetricsSettings:
    """Last computed metrics and the range of selectable columns."""

    min: float = 0.0
    max: float = 0.0
    median: float = 0.0

    MIN_COL: ClassVar[int] = 1
    MAX_COL: ClassVar[int] = 6

    @staticmethod
    def is_column_valid(column: int) -> bool:
        """Whether ``column`` is one of the selectable columns."""
        return MetricsSettings.MIN_COL <= column <= MetricsSettings.MAX_COL

    def update(self, metrics: Metrics) -> None:
        self.min, self.max, self.median = metrics.minimum, metrics.maximum, metrics.median

    def as_metrics(self) -> Metrics:
        return Metrics(self.min, self.max, self.median)


def _region_filter(region: Optional[str]) -> Optional[str]:
    """Map the "all regions" choice and empty text to no filter."""
    if not region or region == ALL_REGIONS:
        return None
    return region


def _number(value: float) -> str:
    """Format a value the way the data table shows it."""
    return f"{value:.6g}"


@dataclass
class Session:
    """Loaded data, the chart model and the last computed metrics."""

    context: Context = field(default_factory=Context)
    graph: GraphModel = field(default_factory=GraphModel)
    metrics: MetricsSettings = field(default_factory=MetricsSettings)

    def __post_init__(self) -> None:
        self.context.do_operation(Operation.INIT)
        self.graph.set_axis_labels("Year", "Value")

    def load(self, filename: Union[str, os.PathLike], region: Optional[str] = None) -> None:
        """Load a CSV file, keeping only ``region`` unless all regions are asked for."""
        if not str(filename):
            raise DataLoadError("no file selected")
        self.context.region = _region_filter(region)
        self.context.do_operation(Operation.LOAD_DATA, filename)

    def available_regions(self) -> list[str]:
        """Regions of the loaded records, in order of first appearance."""
        return list(dict.fromkeys(record.region for record in self.context.records))

    def available_years(self) -> list[int]:
        """Distinct years of the loaded records, ascending."""
        return sorted({record.year for record in self.context.records})

    def table_rows(self) -> list[tuple[str, ...]]:
        """The loaded records as rows of display text."""
        return [
            (
                str(record.year),
                record.region,
                _number(record.natural_population_growth),
                _number(record.birth_rate),
                _number(record.death_rate),
                _number(record.general_demographic_weight),
                _number(record.urbanization),
            )
            for record in self.context.records
        ]

    def _points(self, column: int, region: Optional[str], years: Optional[range] = None):
        return [
            (record.year, select_value(record, column))
            for record in self.context.records
            if (region is None or record.region == region)
            and (years is None or record.year in years)
        ]

    def calculate(self, column: int, region: Optional[str] = None) -> Metrics:
        """Compute the metrics of ``column`` and lay the chart out for it.

        Raises ValueError for an unknown column, DataLoadError when nothing is
        loaded, LookupError for a region absent from the data and MetricsError
        when the column has no metrics.
        """
        if not MetricsSettings.is_column_valid(column):
            raise ValueError(f"invalid column number: {column}")
        if not self.context.records:
            raise DataLoadError("no data loaded")
        region = _region_filter(region)
        if region is not None and region not in self.available_regions():
            raise LookupError(f"region {region!r} not found")

        self.context.column = column
        metrics = self.context.do_operation(Operation.CALCULATE_AND_DRAW)
        self.metrics.update(metrics)

        self.graph.set_axis_labels("Year", _AXIS_LABELS.get(column, "Value"))
        self.graph.set_data(self._points(column, region), metrics.minimum, metrics.maximum, metrics.median)
        scope = "всех регионов" if region is None else f"региона '{region}'"
        self.graph.set_title(f"Данные для {scope} (колонка {column})")
        return metrics

    def filter_by_year(
        self, min_year: int, max_year: int, column: int, region: Optional[str] = None
    ) -> Metrics:
        """Restrict the chart to the years ``min_year`` to ``max_year``.

        Metrics are those of the whole data set; when they cannot be computed
        for ``column`` the previous ones are kept.
        """
        if min_year > max_year:
            raise ValueError("the minimum year cannot be greater than the maximum year")

        self.context.column = column
        try:
            metrics = self.context.do_operation(Operation.CALCULATE)
        except MetricsError:
            pass
        else:
            self.metrics.update(metrics)

        if self.context.records:
            points = self._points(column, _region_filter(region), range(min_year, max_year + 1))
            if points:
                self.graph.set_data(points, self.metrics.min, self.metrics.max, self.metrics.median)

        title = f"Данные за {min_year}-{max_year} годы"
        if region:
            title += f" для региона '{region}'"
        self.graph.set_title(title)
        return self.metrics.as_metrics()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="demostat", description="Show demographic data and the metrics of one column."
    )
    parser.add_argument("file", help="CSV file with a header line and seven columns")
    parser.add_argument("--region", default=None, help="keep only this region")
    parser.add_argument(
        "--column",
        type=int,
        default=None,
        help="column to compute metrics for (2-6)",
    )
    parser.add_argument("--min-year", type=int, default=None)
    parser.add_argument("--max-year", type=int, default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a file, print its rows and, when a column is given, its metrics."""
    args = _build_parser().parse_args(argv)
    session = Session()
    try:
        session.load(args.file, args.region)
        print("\t".join(TABLE_HEADERS[:NUM_COLUMNS]))
        for row in session.table_rows():
            print("\t".join(row))
        if args.column is not None:
            metrics = session.calculate(args.column, args.region)
            if args.min_year is not None or args.max_year is not None:
                years = session.available_years()
                low = args.min_year if args.min_year is not None else years[0]
                high = args.max_year if args.max_year is not None else years[-1]
                metrics = session.filter_by_year(low, high, args.column, args.region)
            print(f"Min: {metrics.minimum:.2f}")
            print(f"Max: {metrics.maximum:.2f}")
            print(f"Median: {metrics.median:.2f}")
    except (ContextError, ValueError, LookupError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())