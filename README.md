# demostat

`demostat` reads regional demographic statistics from a CSV file, lets you
narrow them to one region or a range of years, and computes the minimum,
maximum and median of a chosen column. It also lays out a line graph of the
selected values with their metric lines. The layout is returned as plain
drawing primitives, so any rendering back end can paint it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input format

The first line of the file is a header and is skipped. Empty lines are
skipped too. Every other line holds seven comma-separated fields:

| # | Field                      |
|---|----------------------------|
| 1 | year                       |
| 2 | region                     |
| 3 | natural population growth  |
| 4 | birth rate                 |
| 5 | death rate                 |
| 6 | general demographic weight |
| 7 | urbanization               |

Leading spaces and double quotes are stripped from each field. Empty fields
do not count, and lines left with fewer than seven fields are ignored. A
field that does not start with a number reads as 0.

Metrics can be computed for the numeric columns, 2 to 6 in
`demostat.records.Column`: `NATURAL_GROWTH`, `BIRTH_RATE`, `DEATH_RATE`,
`DEMOGRAPHIC_WEIGHT` and `URBANIZATION`. `Column.YEAR` (1) can be chosen for
display, but no metrics are computed for it.

## Using the library

The `demostat.records` module holds `DemographicRecord`, `Column` and the
statistics:

```python
from demostat.records import Column, load_data, calculate_min, calculate_max, calculate_median

records = load_data("regions.csv")             # or load_data("regions.csv", "Some Region")
low = calculate_min(records, Column.BIRTH_RATE)
high = calculate_max(records, Column.BIRTH_RATE)
median = calculate_median(records, Column.BIRTH_RATE)
```

`load_data` raises `OSError` when the file cannot be opened. `calculate_min`
and `calculate_max` return 0.0 for an empty list or a non-metric column.
`calculate_median` returns 0.0 for an empty list and raises `ValueError` for a
non-metric column. `sorted_values` and `select_value` give the sorted values of
a column and the value of a single record.

`demostat.context.Context` holds the loaded records, the region filter and the
selected column. `load(filename)` raises `DataLoadError` when the file cannot
be read or has no matching records. `calculate_metrics()` returns a `Metrics`
(`minimum`, `maximum`, `median`), or raises `MetricsError` when nothing is
loaded or the column is not 2 to 6. Both errors are subclasses of
`ContextError`. `clear()` drops the records and the region.
`do_operation(operation, filename)` runs one `Operation`: `INIT`, `LOAD_DATA`,
`CALCULATE`, `CALCULATE_AND_DRAW` or `FREE`.

`demostat.app.Session` puts these together:

- `load(filename, region)` loads a file. The region `"Все регионы"` or an
  empty region means all regions.
- `available_regions()` lists the regions in order of first appearance.
- `available_years()` lists the distinct years, ascending.
- `table_rows()` gives the records as rows of text.
- `calculate(column, region)` computes the metrics and fills the session's
  `graph`. It raises `ValueError` for a column outside 1 to 6,
  `DataLoadError` when nothing is loaded, `LookupError` for an unknown region
  and `MetricsError` for the year column.
- `filter_by_year(min_year, max_year, column, region)` restricts the graph
  points to a range of years. Its metrics are those of the whole data set.

`MetricsSettings.is_column_valid(column)` tells whether a column number is
selectable (1 to 6).

`demostat.graph.GraphModel` holds points, metrics, axis labels and a title.
`render(width, height)` lays them out as `Line`, `Text`, `Ellipse` and
`Polyline` primitives for a canvas of that size. With no points it returns a
single centred placeholder text. `graph_rect(width, height)` gives the plotting
area. The look is set by `GraphSettings`.

## Command line

The package installs a `demostat` command:

```
demostat regions.csv --region "Some Region" --column 3 --min-year 2000 --max-year 2010
```

It prints the header and the loaded rows, tab-separated. When `--column` is
given, it also prints `Min`, `Max` and `Median` with two decimals. Errors go
to standard error, and the exit status is 1. See all options with:

```
demostat --help
```

## What it does not do

`demostat` has no graphical window and paints nothing itself. The command
prints text only. Putting the primitives from `GraphModel.render` on screen
or into an image is up to the caller.