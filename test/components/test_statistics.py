import math

import pytest

from rttbench.components import Statistics


@pytest.fixture
def statistics() -> Statistics:
    stats = Statistics()
    for sample in [0.1, 0.2, 0.3]:
        stats.add(sample)
    return stats


def test_mean(statistics: Statistics):
    assert statistics.mean == pytest.approx(0.2)


def test_population_std(statistics: Statistics):
    expected = math.sqrt(((0.1 - 0.2) ** 2 + 0 + (0.3 - 0.2) ** 2) / 3)

    assert statistics.std == pytest.approx(expected)
    assert statistics.std * 1e3 == pytest.approx(81.65, abs=1e-2)


def test_single_sample_has_no_deviation():
    stats = Statistics()
    stats.add(0.042)

    summary = stats.summary()
    assert summary.count == 1
    assert summary.mean == pytest.approx(0.042)
    assert summary.std == 0


def test_summary_in_milliseconds(statistics: Statistics):
    summary = statistics.summary()

    assert summary.count == 3
    assert summary.mean_ms == pytest.approx(200)
    assert summary.as_dict() == {
        "count": 3,
        "mean_ms": pytest.approx(200),
        "std_ms": pytest.approx(81.6497, abs=1e-4),
    }


def test_empty_statistics():
    stats = Statistics()

    assert len(stats) == 0
    with pytest.raises(ValueError):
        stats.summary()


def test_negative_sample():
    with pytest.raises(ValueError):
        Statistics().add(-0.001)
