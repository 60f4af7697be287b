import pytest

from simulations.config import ConfigurationError
from simulations.results import COLUMNS, ResultsStore


def test_rows_land_in_their_year_block():
    store = ResultsStore(n_individuals=3, start_year=2013, horizon=3)
    # Years may be written in any order; each has a fixed slot
    store.record_year(2015, [0, 1, 2], [1, 0, 0], [0, 0, 1])
    store.record_year(2013, [0, 1, 2], [0, 0, 0], [0, 0, 0])

    assert len(store) == 6
    assert store.recorded_years() == [2013, 2015]

    df = store.to_frame()
    assert tuple(df.columns) == COLUMNS
    assert list(df["year"]) == [2013] * 3 + [2015] * 3
    assert list(df["chd"]) == [0, 0, 0, 1, 0, 0]

    records = list(store.records())
    assert records[3] == {"year": 2015, "id": 0, "chd": 1, "mortality": 0}


def test_yearly_means():
    store = ResultsStore(n_individuals=4, start_year=2020, horizon=2)
    store.record_year(2020, [0, 1, 2, 3], [1, 1, 0, 0], [0, 0, 0, 1])
    store.record_year(2021, [0, 1, 2, 3], [1, 1, 1, 1], [0, 0, 0, 0])

    means = store.yearly_means()
    assert list(means.index) == [2020, 2021]
    assert means.loc[2020, "chd"] == pytest.approx(0.5)
    assert means.loc[2020, "mortality"] == pytest.approx(0.25)
    assert means.loc[2021, "chd"] == pytest.approx(1.0)


def test_invalid_writes_are_rejected():
    store = ResultsStore(n_individuals=2, start_year=2013, horizon=2)
    with pytest.raises(ValueError):
        store.record_year(2012, [0, 1], [0, 0], [0, 0])
    with pytest.raises(ValueError):
        store.record_year(2015, [0, 1], [0, 0], [0, 0])
    with pytest.raises(ValueError):
        store.record_year(2013, [0], [0], [0])

    store.record_year(2013, [0, 1], [0, 1], [0, 0])
    with pytest.raises(ValueError):
        store.record_year(2013, [0, 1], [0, 1], [0, 0])


def test_frozen_store_is_read_only():
    store = ResultsStore(n_individuals=1, start_year=2013, horizon=2)
    store.record_year(2013, [7], [0], [1])
    store.freeze()
    with pytest.raises(RuntimeError):
        store.record_year(2014, [7], [0], [0])
    assert len(store.to_frame()) == 1


def test_store_dimensions_must_be_positive():
    with pytest.raises(ConfigurationError):
        ResultsStore(n_individuals=0, start_year=2013, horizon=5)
    with pytest.raises(ConfigurationError):
        ResultsStore(n_individuals=10, start_year=2013, horizon=0)
    with pytest.raises(ConfigurationError):
        ResultsStore(n_individuals=10, start_year=2013, horizon=-2)
