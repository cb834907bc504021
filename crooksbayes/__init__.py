from openmm import unit

estimation_parameters = {"step": 0.1,
                         "temperature": 298 * unit.kelvin,
                         }

from .exceptions import CrooksBayesError, InvalidRangeError, SampleLengthMismatchError, \
    DegenerateLikelihoodError, DegeneratePosteriorError
from .estimation import build_hypothesis_grid, logistic, integrate, sample_likelihood, \
    update_posterior, posterior_moments, SequentialUpdater, CrooksBayesResult, estimate

__all__ = ["estimation_parameters",
           "build_hypothesis_grid", "logistic", "integrate", "sample_likelihood",
           "update_posterior", "posterior_moments", "SequentialUpdater", "CrooksBayesResult", "estimate",
           "CrooksBayesError", "InvalidRangeError", "SampleLengthMismatchError",
           "DegenerateLikelihoodError", "DegeneratePosteriorError"
           ]
