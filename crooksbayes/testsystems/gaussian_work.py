import numpy as np


class GaussianWorkModel():
    """Forward / backward work distributions that satisfy the Crooks fluctuation theorem exactly.

    If forward work is Gaussian with mean delta_g + dissipation and variance sigma^2, Crooks
    requires sigma^2 = 2 * dissipation / beta, and backward work to be Gaussian with mean
    -delta_g + dissipation and the same variance. Useful as ground truth, since delta_g is known.
    """

    def __init__(self, delta_g, dissipation, beta=1.0, name="gaussian_work"):
        if dissipation < 0:
            raise ValueError("Mean dissipation must be non-negative, got {}".format(dissipation))
        if beta <= 0:
            raise ValueError("Inverse temperature must be positive, got {}".format(beta))
        self.delta_g = delta_g
        self.dissipation = dissipation
        self.beta = beta
        self.sigma = np.sqrt(2.0 * dissipation / beta)
        self.name = name

    def sample_forward_work(self, n_samples, random_state=np.random):
        return random_state.normal(self.delta_g + self.dissipation, self.sigma, size=n_samples)

    def sample_backward_work(self, n_samples, random_state=np.random):
        return random_state.normal(-self.delta_g + self.dissipation, self.sigma, size=n_samples)

    def collect_protocol_samples(self, n_protocol_samples, random_state=None):
        """Draw n_protocol_samples independent (W_F, W_R) pairs.

        `random_state` can be a seed, a numpy.random.RandomState / Generator, or None
        to use the global numpy random state.
        """
        if random_state is None:
            random_state = np.random
        elif np.isscalar(random_state):
            random_state = np.random.RandomState(random_state)
        W_shads_F = self.sample_forward_work(n_protocol_samples, random_state)
        W_shads_R = self.sample_backward_work(n_protocol_samples, random_state)
        return W_shads_F, W_shads_R
