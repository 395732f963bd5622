"""
SeriesSystem — a system that fails the instant any one of its components fails.

    h_sys(t) = Σ_j h_j(t; θ_j)          H_sys(t) = Σ_j H_j(t; θ_j)
    S_sys(t) = exp(-H_sys(t)) = Π_j S_j(t; θ_j)

The parameters of all components live in one flat vector
θ = (θ_1, ..., θ_m); the parameter layout records which block belongs to
which component and is applied on every evaluation. A SeriesSystem is a
HazardDistribution itself, so it can be fitted, sampled, and nested as a
component of another system.

Flow at construction:
  1. validate components                → TypeMismatchError
  2. resolve per-component counts n_par → MissingParameterCountError / LayoutArityError
  3. build the parameter layout
  4. resolve the flat parameter vector  → ParameterLengthError
  5. decide once whether every component has a closed-form cumulative hazard
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from core.config import NumericsConfig
from core.errors import (
    ComponentIndexError,
    LayoutArityError,
    MissingParameterCountError,
    ParameterLengthError,
    TypeMismatchError,
)
from core.utils import ArrayLike, as_param_vector
from distributions.base import HazardDistribution

from .layout import ParamLayout, build_param_layout, slice_params, total_params
from .sampler import ComponentSamples, sample_components

logger = logging.getLogger(__name__)


SERIES_ASSUMPTIONS: Tuple[str, ...] = (
    "Series system: system fails when any component fails",
    "Component independence: component lifetimes are independent",
    "Non-negative hazard: h_j(t) >= 0 for all j, t > 0",
    "Cumulative hazard diverges: lim(t->Inf) H_sys(t) = Inf",
    "Support is positive reals: t in (0, Inf)",
    "Observations are independent",
    "Censoring indicator: 1=exact, 0=right-censored, -1=left-censored",
    "Non-informative censoring",
)


@dataclass(frozen=True)
class ComponentHazard:
    """
    Hazard of a single component inside a system, for failure attribution.

    `par` passed to a call is component-local (length n_par[j]), not the
    system's flat vector; omitted, the component's default block is used.
    """

    component: HazardDistribution
    index: int
    default_par: Optional[np.ndarray]

    def __call__(self, t: ArrayLike, par: Optional[ArrayLike] = None):
        if par is None:
            par = self.default_par
        return self.component.hazard(t, par=par)


def _validate_components(components) -> Tuple[HazardDistribution, ...]:
    if isinstance(components, HazardDistribution) or not isinstance(components, Sequence):
        raise TypeMismatchError(
            "components must be a non-empty sequence of HazardDistribution objects"
        )
    if len(components) == 0:
        raise TypeMismatchError("A series system needs at least one component")
    for j, comp in enumerate(components, start=1):
        if not isinstance(comp, HazardDistribution):
            raise TypeMismatchError(
                f"All components must be HazardDistribution objects; "
                f"component {j} is {type(comp).__name__}"
            )
    return tuple(components)


def _resolve_n_par(
    components: Tuple[HazardDistribution, ...],
    n_par: Optional[Sequence[int]],
) -> Tuple[int, ...]:
    m = len(components)
    if n_par is None:
        counts = []
        for j, comp in enumerate(components, start=1):
            if comp.par is None:
                raise MissingParameterCountError(
                    f"Cannot infer parameter count: component {j} has no parameters. "
                    f"Provide n_par or set par in each component."
                )
            counts.append(len(comp.par))
        return tuple(counts)

    n_par = tuple(np.asarray(n_par).reshape(-1).tolist())
    if len(n_par) != m:
        raise LayoutArityError(
            f"n_par length ({len(n_par)}) must equal number of components ({m})"
        )
    return n_par


class SeriesSystem(HazardDistribution):
    """
    Series composition of m independent component distributions.

    Usage:
        sys = SeriesSystem([ExponentialHazard(0.1), ExponentialHazard(0.2), ExponentialHazard(0.3)])
        sys.hazard(10.0)            # 0.6
        sys.cum_haz(10.0)           # 6.0 (closed form: every component has one)
        sys.component(2)            # ExponentialHazard(rate=0.2), detached copy
        sys.sample_components(1000).system_lifetimes()

    Parameters
    ----------
    components : sequence of HazardDistribution
        Components in layout order. Held by reference and never mutated.
    par : array-like, optional
        Flat parameter vector of length sum(n_par). Defaults to the
        concatenation of the components' own parameters when all have them.
    n_par : sequence of int, optional
        Parameters per component. Inferred from the components' parameters
        when omitted; required if any component has none.
    numerics : NumericsConfig, optional
        Quadrature / root-finding settings for the numerical fallbacks.
    """

    def __init__(
        self,
        components: Sequence[HazardDistribution],
        par: Optional[ArrayLike] = None,
        n_par: Optional[Sequence[int]] = None,
        numerics: Optional[NumericsConfig] = None,
    ):
        self._components = _validate_components(components)
        self._n_par = _resolve_n_par(self._components, n_par)
        self._layout = build_param_layout(self._n_par)

        if par is None and all(c.par is not None for c in self._components):
            par = np.concatenate([c.par for c in self._components])
        self.par = self._check_par(as_param_vector(par)) if par is not None else None

        self._analytical = all(c.has_cum_haz_rate for c in self._components)
        if numerics is not None:
            self.numerics = numerics

        logger.debug(
            "Built series system: %d components, %d parameters, analytical cum_haz=%s",
            self.m, total_params(self._layout), self._analytical,
        )

    # ----- structure -----

    @property
    def components(self) -> Tuple[HazardDistribution, ...]:
        return self._components

    @property
    def m(self) -> int:
        return len(self._components)

    @property
    def ncomponents(self) -> int:
        return self.m

    @property
    def n_par(self) -> Tuple[int, ...]:
        return self._n_par

    def param_layout(self) -> ParamLayout:
        return self._layout

    def _check_par(self, par: np.ndarray) -> np.ndarray:
        expected = total_params(self._layout)
        if len(par) != expected:
            raise ParameterLengthError(expected, len(par))
        par.setflags(write=False)
        return par

    def _check_index(self, j: int) -> None:
        if not 1 <= j <= self.m:
            raise ComponentIndexError(j, self.m)

    # ----- composite hazard engine -----

    def rate(self, t: np.ndarray, par: np.ndarray) -> np.ndarray:
        h = np.zeros(np.shape(t), dtype=float)
        for comp, block in zip(self._components, self._layout):
            h = h + comp.rate(t, slice_params(par, block))
        return h

    @property
    def has_cum_haz_rate(self) -> bool:
        return self._analytical

    def cum_haz_rate(self, t: np.ndarray, par: np.ndarray) -> np.ndarray:
        if not self._analytical:
            return super().cum_haz_rate(t, par)
        H = np.zeros(np.shape(t), dtype=float)
        for comp, block in zip(self._components, self._layout):
            H = H + comp.cum_haz_rate(t, slice_params(par, block))
        return H

    # ----- component access -----

    def component(self, j: int) -> HazardDistribution:
        """
        Component j (1-based) as a standalone distribution carrying its block
        of the system's parameters. The copy is detached from the system.
        """
        self._check_index(j)
        comp = self._components[j - 1]
        if self.par is None:
            return copy.deepcopy(comp)
        return comp.with_params(slice_params(self.par, self._layout[j - 1]))

    def component_hazard(self, j: int) -> ComponentHazard:
        """Hazard evaluator for component j alone, with component-local parameters."""
        self._check_index(j)
        comp = self._components[j - 1]
        if self.par is not None:
            default_par = slice_params(self.par, self._layout[j - 1]).copy()
        else:
            default_par = comp.params()
        return ComponentHazard(component=comp, index=j, default_par=default_par)

    def sample_components(
        self, n: int, par: Optional[ArrayLike] = None, rng=None
    ) -> ComponentSamples:
        """n × m matrix of independent component lifetimes (see series.sampler)."""
        return sample_components(self, n, par=par, rng=rng)

    # ----- presentation -----

    def assumptions(self) -> List[str]:
        return list(SERIES_ASSUMPTIONS)

    def summary(self) -> pd.DataFrame:
        """One row per component: family, parameter count, flat indices, values."""
        rows = []
        for j, (comp, block) in enumerate(zip(self._components, self._layout), start=1):
            par_j = None if self.par is None else slice_params(self.par, block)
            rows.append({
                "Component": j,
                "Family": type(comp).__name__,
                "NumParams": len(block),
                "Indices": list(block),
                "Params": None if par_j is None else par_j.tolist(),
            })
        return pd.DataFrame(rows)

    def describe(self) -> str:
        lines = [f"Series system distribution with {self.m} components"]
        for j, (np_j, block) in enumerate(zip(self._n_par, self._layout), start=1):
            if self.par is None:
                par_str = "unknown"
            else:
                par_str = ", ".join(f"{v:.4g}" for v in slice_params(self.par, block))
            lines.append(f"  Component {j}: {np_j} param(s) [{par_str}]")
        lines.append("System hazard: h_sys(t) = sum_j h_j(t, theta_j)")
        lines.append("Survival: S_sys(t) = exp(-H_sys(t)) = prod_j S_j(t, theta_j)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"SeriesSystem(m={self.m}, n_par={list(self._n_par)})"
