import numpy as np

from crooksbayes.exceptions import DegenerateLikelihoodError
from .integration import integrate
from .logistic import logistic


def sample_likelihood(work_F, work_R, beta, delta_g):
    """Likelihood of a single forward / backward work pair over the hypothesis grid.

        L(delta_g) = logistic(beta (W_F - delta_g)) * logistic(beta (W_R + delta_g))

    normalized to integrate to 1 over `delta_g`, so that its magnitude doesn't drift
    with beta or the work scale.

    Reference: P. Maragakis et al., J Chem Phys 129, 024102 (2008)
    """
    exponent_F = beta * (work_F - delta_g)
    exponent_R = beta * (work_R + delta_g)
    likelihood = logistic(exponent_F) * logistic(exponent_R)

    normalization = integrate(delta_g, likelihood)
    if not (np.isfinite(normalization) and normalization > 0):
        raise DegenerateLikelihoodError(
            "Likelihood of work pair (W_F={}, W_R={}) at beta={} integrates to {} over [{}, {}]; "
            "revisit the hypothesis range".format(work_F, work_R, beta, normalization, delta_g[0], delta_g[-1]))
    return likelihood / normalization
