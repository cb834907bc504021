from .grid import build_hypothesis_grid
from .logistic import logistic
from .integration import integrate
from .likelihood import sample_likelihood
from .sequential import update_posterior, posterior_moments, SequentialUpdater, CrooksBayesResult, estimate

__all__ = ["build_hypothesis_grid",
           "logistic",
           "integrate",
           "sample_likelihood",
           "update_posterior",
           "posterior_moments",
           "SequentialUpdater",
           "CrooksBayesResult",
           "estimate"
           ]
