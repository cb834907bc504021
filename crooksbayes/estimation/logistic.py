import numpy as np
from scipy.special import expit


def logistic(z):
    """Acceptance function 1 / (1 + exp(z)), elementwise.

    Note the sign: this is *decreasing* in z, i.e. expit(-z). Saturates to 1 for
    z -> -inf and to 0 for z -> +inf without overflow.
    """
    return expit(-np.asarray(z, dtype=float))
