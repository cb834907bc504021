class CrooksBayesError(Exception):
    """Base class for errors raised during Crooks-Bayes estimation."""


class InvalidRangeError(CrooksBayesError, ValueError):
    """Hypothesis bounds or step size can't produce a usable grid."""


class SampleLengthMismatchError(CrooksBayesError, ValueError):
    """Forward and backward work arrays have different lengths."""


class DegenerateLikelihoodError(CrooksBayesError, RuntimeError):
    """A work sample's likelihood integrates to zero (or to something non-finite)
    over the hypothesis range.

    Usually means the hypothesis range doesn't cover the region where the work
    values put their weight, or beta * work is far outside floating-point range.
    """


class DegeneratePosteriorError(DegenerateLikelihoodError):
    """The product of the posterior and a new likelihood vanishes on the grid."""
