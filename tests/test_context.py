import pytest

from demostat.context import (
    Context,
    ContextError,
    DataLoadError,
    Metrics,
    MetricsError,
    Operation,
)
from demostat.records import Column, DemographicRecord, calculate_max, calculate_median, calculate_min

HEADER = "year,region,npg,birth_rate,death_rate,gdw,urbanization\n"
ROWS = (
    "1990,Alpha,1,3.0,3,4,5\n",
    "1991,Alpha,1,1.0,3,4,5\n",
    "1992,Beta,1,2.0,3,4,5\n",
)


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(HEADER + "".join(ROWS), encoding="utf-8")
    return path


def test_load_reads_all_rows(csv_path):
    context = Context()
    context.load(csv_path)
    assert [record.year for record in context.records] == [1990, 1991, 1992]


def test_load_uses_region_filter(csv_path):
    context = Context(region="Beta")
    context.load(csv_path)
    assert [record.region for record in context.records] == ["Beta"]


def test_load_missing_file_raises(tmp_path, csv_path):
    context = Context()
    context.load(csv_path)
    with pytest.raises(DataLoadError) as info:
        context.load(tmp_path / "absent.csv")
    assert info.value.code == 1
    assert context.records == []


def test_load_without_matching_rows_raises(csv_path):
    context = Context(region="Delta")
    with pytest.raises(DataLoadError):
        context.load(csv_path)
    assert context.records == []


def test_reload_replaces_records(tmp_path, csv_path):
    other = tmp_path / "other.csv"
    other.write_text(HEADER + "2000,Gamma,1,2,3,4,5\n", encoding="utf-8")
    context = Context()
    context.load(csv_path)
    context.load(other)
    assert [record.region for record in context.records] == ["Gamma"]


def test_calculate_metrics(csv_path):
    context = Context(column=Column.BIRTH_RATE)
    context.load(csv_path)
    assert context.calculate_metrics() == Metrics(1.0, 3.0, 2.0)


def test_calculate_metrics_agrees_with_record_functions():
    records = [DemographicRecord(1990 + i, "Alpha", urbanization=v) for i, v in enumerate([4.0, 9.0, 1.0, 6.0])]
    context = Context(records=records, column=Column.URBANIZATION)
    metrics = context.calculate_metrics()
    assert metrics.minimum == calculate_min(records, Column.URBANIZATION)
    assert metrics.maximum == calculate_max(records, Column.URBANIZATION)
    assert metrics.median == calculate_median(records, Column.URBANIZATION)


def test_calculate_metrics_without_data_raises():
    context = Context(column=Column.BIRTH_RATE)
    with pytest.raises(MetricsError) as info:
        context.calculate_metrics()
    assert info.value.code == 2


@pytest.mark.parametrize("column", [-1, Column.YEAR, 7])
def test_calculate_metrics_invalid_column_raises(csv_path, column):
    context = Context(column=column)
    context.load(csv_path)
    with pytest.raises(MetricsError):
        context.calculate_metrics()


def test_clear_drops_records_and_region(csv_path):
    context = Context(region="Alpha")
    context.load(csv_path)
    context.clear()
    assert context.records == []
    assert context.region is None


def test_do_operation_init_resets(csv_path):
    context = Context(region="Alpha", column=Column.BIRTH_RATE)
    context.load(csv_path)
    assert context.do_operation(Operation.INIT) is None
    assert context == Context()


def test_do_operation_load_and_calculate(csv_path):
    context = Context()
    context.do_operation(Operation.LOAD_DATA, csv_path)
    context.column = Column.BIRTH_RATE
    assert context.do_operation(Operation.CALCULATE) == Metrics(1.0, 3.0, 2.0)
    assert context.do_operation(Operation.CALCULATE_AND_DRAW) == Metrics(1.0, 3.0, 2.0)


def test_do_operation_load_without_filename_keeps_records(csv_path):
    context = Context()
    context.load(csv_path)
    context.do_operation(Operation.LOAD_DATA)
    assert len(context.records) == len(ROWS)


def test_do_operation_load_failure_raises(tmp_path):
    with pytest.raises(DataLoadError):
        Context().do_operation(Operation.LOAD_DATA, tmp_path / "absent.csv")


def test_do_operation_free_clears(csv_path):
    context = Context(region="Alpha")
    context.load(csv_path)
    context.do_operation(Operation.FREE)
    assert context.records == []
    assert context.region is None


def test_do_operation_accepts_plain_integers(csv_path):
    context = Context(column=Column.BIRTH_RATE)
    context.do_operation(int(Operation.LOAD_DATA), csv_path)
    assert context.do_operation(int(Operation.CALCULATE)).maximum == 3.0


def test_do_operation_unknown_raises():
    with pytest.raises(ContextError) as info:
        Context().do_operation(42)
    assert info.value.code == 3