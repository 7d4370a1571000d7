import pytest

from demostat.app import ALL_REGIONS, MetricsSettings, Session, main
from demostat.context import DataLoadError, MetricsError

CSV = (
    "year,region,npg,birth_rate,death_rate,gdw,urbanization\n"
    "2001,North,1.5,10,8,50,70\n"
    "2002,North,2.5,14,9,51,71\n"
    "2003,North,3.5,12,7,52,72\n"
    "2001,South,-1.0,20,11,60,40\n"
    "2004,South,0.5,16,12,61,41\n"
)


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


@pytest.mark.parametrize("column,expected", [(0, False), (1, True), (6, True), (7, False)])
def test_is_column_valid(column, expected):
    assert MetricsSettings.is_column_valid(column) is expected


def test_load_all_regions(csv_file):
    session = Session()
    session.load(csv_file, ALL_REGIONS)
    assert session.available_regions() == ["North", "South"]
    assert session.available_years() == [2001, 2002, 2003, 2004]


def test_load_with_region(csv_file):
    session = Session()
    session.load(csv_file, "South")
    assert session.available_regions() == ["South"]
    assert session.available_years() == [2001, 2004]


def test_load_missing_file(tmp_path):
    session = Session()
    with pytest.raises(DataLoadError):
        session.load(tmp_path / "absent.csv")


def test_table_rows(csv_file):
    session = Session()
    session.load(csv_file, "North")
    rows = session.table_rows()
    assert len(rows) == 3
    assert rows[0] == ("2001", "North", "1.5", "10", "8", "50", "70")


def test_calculate_metrics(csv_file):
    session = Session()
    session.load(csv_file, "North")
    metrics = session.calculate(3, "North")
    assert (metrics.minimum, metrics.maximum, metrics.median) == (10.0, 14.0, 12.0)
    assert session.metrics.as_metrics() == metrics
    assert session.graph.y_label == "Birth Rate"
    assert session.graph.points == [(2001.0, 10.0), (2002.0, 14.0), (2003.0, 12.0)]
    assert "North" in session.graph.title


def test_calculate_region_filters_points(csv_file):
    session = Session()
    session.load(csv_file)
    session.calculate(4, "South")
    assert [x for x, _ in session.graph.points] == [2001.0, 2004.0]


def test_calculate_errors(csv_file):
    session = Session()
    with pytest.raises(DataLoadError):
        session.calculate(3)
    session.load(csv_file)
    with pytest.raises(ValueError):
        session.calculate(7)
    with pytest.raises(MetricsError):
        session.calculate(1)
    with pytest.raises(LookupError):
        session.calculate(3, "East")


def test_filter_by_year(csv_file):
    session = Session()
    session.load(csv_file)
    full = session.calculate(2)
    metrics = session.filter_by_year(2002, 2003, 2, "North")
    assert metrics == full
    assert session.graph.points == [(2002.0, 2.5), (2003.0, 3.5)]
    assert "2002-2003" in session.graph.title


def test_filter_by_year_rejects_reversed_range(csv_file):
    session = Session()
    session.load(csv_file)
    with pytest.raises(ValueError):
        session.filter_by_year(2004, 2001, 2)


def test_main_prints_metrics(csv_file, capsys):
    assert main([str(csv_file), "--column", "3", "--region", "North"]) == 0
    out = capsys.readouterr().out
    assert "Min: 10.00" in out
    assert "Max: 14.00" in out
    assert "Median: 12.00" in out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.csv")]) == 1
    assert "error" in capsys.readouterr().err