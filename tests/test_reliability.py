import numpy as np
import pytest

from secded.config import SimulationConfig
from secded.reliability import measure, plot, predict, random_error_patterns, simulate


def test_no_errors_means_everything_recovered(rng):
    point = measure(rng, 1000, 0.0)
    assert point.recovered == 1.0
    assert point.detected == 0.0
    assert point.miscorrected == 0.0


def test_every_bit_flipped(rng):
    # All 16 bits flipped is an even error count with syndrome 0, which is
    # the complement codeword
    point = measure(rng, 1000, 1.0)
    assert point.recovered == 0.0
    assert point.detected == 0.0
    assert point.miscorrected == 1.0


def test_error_patterns(rng):
    assert np.all(random_error_patterns(rng, 100, 0.0) == 0)
    assert np.all(random_error_patterns(rng, 100, 1.0) == 0xFFFF)


def test_fractions_add_up(rng):
    point = measure(rng, 5000, 0.1)
    assert point.recovered + point.detected + point.miscorrected == pytest.approx(1.0)


def test_matches_binomial_prediction():
    config = SimulationConfig(trials=20_000, bit_error_rates=[0.02, 0.05], seed=3)
    for point in simulate(config):
        expected = predict(point.bit_error_rate)
        assert point.trials == 20_000
        assert point.recovered == pytest.approx(expected.recovered, abs=0.02)
        assert point.detected >= expected.detected - 0.02
        assert point.miscorrected >= expected.miscorrected - 0.02


def test_simulation_is_reproducible():
    config = SimulationConfig(trials=2000, bit_error_rates=[0.05], seed=11)
    assert simulate(config) == simulate(config)


def test_prediction_edges():
    assert predict(0.0).recovered == pytest.approx(1.0)
    p = predict(0.1)
    assert p.recovered + p.detected + p.miscorrected < 1.0


def test_plot(tmp_path):
    config = SimulationConfig(trials=1000, bit_error_rates=[0.01, 0.1], seed=0)
    path = tmp_path / 'reliability.png'
    fig = plot(simulate(config), str(path))
    assert path.exists()
    assert len(fig.axes[0].lines) == 5


@pytest.mark.parametrize('p', [0.0, 0.01, 0.1, 0.5])
def test_prediction_buckets_cover_every_error_count(p):
    pr = predict(p)
    assert pr.recovered + pr.detected + pr.miscorrected + pr.undecided == pytest.approx(1.0)


def test_silent_failure_bounds():
    config = SimulationConfig(trials=20_000, bit_error_rates=[0.1], seed=5)
    (point,) = simulate(config)
    pr = predict(0.1)
    assert pr.miscorrected - 0.02 <= point.miscorrected <= pr.miscorrected + pr.undecided + 0.02
