"""
Maximum-likelihood fitting on series-system data.
"""
import numpy as np
import pandas as pd
import pytest

from core.config import FitConfig
from data_prep import make_exact_data, right_censor
from distributions import ExponentialHazard, WeibullHazard
from inference import FitResult, fit, hess_loglik, score
from series import SeriesSystem

from _factories import make_exp_series


def test_recovers_total_rate_of_exponential_series():
    sys = make_exp_series((0.1, 0.2, 0.3))
    df = make_exact_data(sys.sample(500, rng=42))

    # Only the sum of rates is identifiable from system-level data
    result = fit(sys, df, par=[0.15, 0.25, 0.35])

    assert isinstance(result, FitResult)
    assert np.isfinite(result.loglik)
    assert np.sum(result.coef) == pytest.approx(0.6, abs=0.15)


def test_handles_right_censored_data():
    sys = make_exp_series((0.1, 0.2, 0.3))
    df = right_censor(sys.sample(300, rng=42), tau=2.0)
    assert (df["delta"] == 0).any()

    result = fit(sys, df, par=[0.15, 0.25, 0.35])
    assert np.sum(result.coef) == pytest.approx(0.6, abs=0.2)


def test_mixed_type_fit_produces_positive_parameters():
    sys = SeriesSystem([WeibullHazard(shape=2.0, scale=100.0), ExponentialHazard(0.01)])
    df = make_exact_data(sys.sample(500, rng=42))

    result = fit(sys, df, par=[1.5, 80.0, 0.02])

    assert result.converged
    assert np.all(result.coef > 0)
    assert 1.0 < result.coef[0] < 3.0      # shape
    assert 50.0 < result.coef[1] < 150.0   # scale
    assert result.coef[2] < 0.03           # rate


def test_fit_result_contents():
    sys = make_exp_series((0.5, 0.5))
    df = make_exact_data(sys.sample(200, rng=42))

    result = fit(sys, df, par=[0.6, 0.6])

    assert len(result.coef) == 2
    assert result.vcov.shape == (2, 2)
    assert result.n_obs == 200
    assert result.method == "Nelder-Mead"
    assert result.aic == pytest.approx(2 * 2 - 2 * result.loglik)

    assert isinstance(result.model, SeriesSystem)
    np.testing.assert_allclose(result.model.params(), result.coef)

    summary = result.summary()
    assert isinstance(summary, pd.DataFrame)
    assert list(summary["Param"]) == ["par[0]", "par[1]"]


def test_fit_does_not_modify_input_distribution():
    sys = make_exp_series((0.5, 0.5))
    df = make_exact_data(sys.sample(100, rng=1))
    fit(sys, df, par=[0.6, 0.6])
    np.testing.assert_allclose(sys.params(), [0.5, 0.5])


def test_score_near_zero_at_mle_for_exponential_series():
    sys = make_exp_series((0.5, 0.5))
    df = make_exact_data(sys.sample(500, rng=42))

    result = fit(sys, df, par=[0.6, 0.6])
    assert np.all(np.abs(score(sys, df, par=result.coef)) < 0.5)


def test_hessian_negative_definite_at_mle():
    sys = SeriesSystem([WeibullHazard(shape=2.0, scale=50.0)])
    df = make_exact_data(sys.sample(300, rng=42))

    result = fit(sys, df, par=[1.5, 40.0])
    assert result.converged
    assert np.all(np.abs(score(sys, df, par=result.coef)) < 0.5)

    evals = np.linalg.eigvalsh(hess_loglik(sys, df, par=result.coef))
    assert np.all(evals < 0)
    assert np.all(np.isfinite(result.se))


def test_alternative_optimizer():
    sys = SeriesSystem([ExponentialHazard(0.4)])
    df = make_exact_data(sys.sample(400, rng=3))

    result = fit(sys, df, config=FitConfig(method="Powell"))
    assert result.method == "Powell"
    # closed-form MLE for a single exponential: n / sum(t)
    assert result.coef[0] == pytest.approx(len(df) / df["t"].sum(), rel=0.05)
