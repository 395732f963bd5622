"""
Inference — likelihood, numerical score / Hessian, and maximum-likelihood fitting
for any HazardDistribution (leaf or series system).
"""

from .fit import FitResult, fit
from .likelihood import hess_loglik, loglik, prepare_records, score

__all__ = [
    "FitResult",
    "fit",
    "hess_loglik",
    "loglik",
    "prepare_records",
    "score",
]
