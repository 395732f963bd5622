"""
Log-likelihood, score and Hessian for series systems.

Score and Hessian are numerical; they are checked against closed-form
results for exponential models.
"""
import numpy as np
import pandas as pd
import pytest

from core.errors import InvalidRecordTableError, MissingParametersError
from data_prep import make_exact_data, make_left_censored_data, make_mixed_data
from distributions import ExponentialHazard
from inference import hess_loglik, loglik, score
from series import SeriesSystem

EXACT_TIMES = [1.0, 2.0, 3.0, 0.5, 1.5]


class TestLoglik:

    def test_exponential_series_matches_single_exponential(self, exp_series):
        ref = ExponentialHazard(0.6)
        df = make_exact_data([1.0, 2.0, 3.0, 0.5])
        assert loglik(exp_series, df, par=[0.1, 0.2, 0.3]) == pytest.approx(
            loglik(ref, df, par=[0.6]), abs=1e-10
        )

        mixed = make_mixed_data([1.0, 2.0], [5.0, 10.0])
        assert loglik(exp_series, mixed) == pytest.approx(loglik(ref, mixed), abs=1e-10)

    def test_closed_form_exact_and_right_censored(self):
        lam = 0.4
        df = make_mixed_data([1.0, 2.5], [4.0])
        expected = 2 * np.log(lam) - lam * (1.0 + 2.5) - lam * 4.0
        assert loglik(ExponentialHazard(lam), df) == pytest.approx(expected, rel=1e-12)

    def test_left_censored_contribution(self):
        lam = 0.3
        df = make_left_censored_data([2.0, 5.0])
        expected = np.log(1 - np.exp(-lam * 2.0)) + np.log(1 - np.exp(-lam * 5.0))
        assert loglik(ExponentialHazard(lam), df) == pytest.approx(expected, rel=1e-12)

    def test_row_order_is_immaterial(self, weibull_series):
        df = make_mixed_data([30.0, 80.0, 120.0], [60.0, 150.0])
        shuffled = df.sample(frac=1.0, random_state=0).reset_index(drop=True)
        assert loglik(weibull_series, df) == pytest.approx(loglik(weibull_series, shuffled), rel=1e-12)

    def test_invalid_parameters_surface_as_nan(self, exp_series):
        df = make_exact_data(EXACT_TIMES)
        assert np.isnan(loglik(exp_series, df, par=[-1.0, 0.2, 0.3]))

    def test_rejects_invalid_censoring_codes(self, exp_series):
        df = pd.DataFrame({"t": [1.0, 2.0], "delta": [1, 2]})
        with pytest.raises(InvalidRecordTableError, match="delta"):
            loglik(exp_series, df)

    def test_rejects_missing_columns(self, exp_series):
        with pytest.raises(InvalidRecordTableError, match="Missing required columns"):
            loglik(exp_series, pd.DataFrame({"time": [1.0]}))

    def test_requires_parameters(self):
        sys = SeriesSystem([ExponentialHazard(), ExponentialHazard()], n_par=[1, 1])
        with pytest.raises(MissingParametersError):
            loglik(sys, make_exact_data(EXACT_TIMES))


class TestScore:

    def test_matches_closed_form_for_exponential_series(self, exp_series):
        df = make_exact_data(EXACT_TIMES)
        # d/d lambda_j [n log(sum lambda) - sum(lambda) sum(t)] = n / sum(lambda) - sum(t)
        expected = len(EXACT_TIMES) / 0.6 - sum(EXACT_TIMES)
        np.testing.assert_allclose(score(exp_series, df), np.full(3, expected), rtol=1e-5)

    def test_matches_finite_difference_of_loglik(self, exp_series):
        df = make_exact_data(EXACT_TIMES)
        par = np.array([0.1, 0.2, 0.3])
        eps = 1e-5
        fd = np.empty(3)
        for k in range(3):
            up, down = par.copy(), par.copy()
            up[k] += eps
            down[k] -= eps
            fd[k] = (loglik(exp_series, df, par=up) - loglik(exp_series, df, par=down)) / (2 * eps)
        np.testing.assert_allclose(score(exp_series, df, par=par), fd, rtol=1e-4)


class TestHessian:

    def test_single_exponential_closed_form(self):
        df = make_exact_data(EXACT_TIMES)
        hess = hess_loglik(ExponentialHazard(0.6), df)
        assert hess.shape == (1, 1)
        assert hess[0, 0] == pytest.approx(-len(EXACT_TIMES) / 0.36, rel=1e-4)

    def test_weibull_series_dimensions_and_symmetry(self, weibull_series):
        df = make_exact_data([50.0, 80.0, 120.0, 30.0, 90.0])
        hess = hess_loglik(weibull_series, df, par=[2.0, 100.0, 1.5, 200.0])
        assert hess.shape == (4, 4)
        np.testing.assert_allclose(hess, hess.T, atol=1e-6)
        assert np.all(np.isfinite(hess))
