from collections import namedtuple

import numpy as np
from tqdm import tqdm

from crooksbayes.exceptions import DegeneratePosteriorError, SampleLengthMismatchError
from .grid import build_hypothesis_grid
from .integration import integrate
from .likelihood import sample_likelihood

CrooksBayesResult = namedtuple("CrooksBayesResult", ["final_mean", "final_stddev",
                                                     "grid", "posterior",
                                                     "mean_trace", "stddev_trace"])


def update_posterior(posterior, likelihood, delta_g):
    """Bayes' rule on the grid: return likelihood * posterior, renormalized.

    Returns a new array; `posterior` is left untouched.
    """
    new_posterior = likelihood * posterior
    normalization = integrate(delta_g, new_posterior)
    if not (np.isfinite(normalization) and normalization > 0):
        raise DegeneratePosteriorError(
            "Posterior integrates to {} after absorbing a sample: the new likelihood has no overlap "
            "with the current posterior on [{}, {}]".format(normalization, delta_g[0], delta_g[-1]))
    return new_posterior / normalization


def posterior_moments(delta_g, posterior):
    """Posterior mean (optimal under squared error) and standard deviation.

    The variance is clamped at 0 before the square root: once the posterior has
    collapsed onto a single grid point, <g^2> - <g>^2 can come out slightly negative.
    """
    mean = integrate(delta_g, posterior * delta_g)
    variance = integrate(delta_g, posterior * delta_g * delta_g) - mean ** 2
    return mean, np.sqrt(max(variance, 0.0))


class SequentialUpdater():
    """Owns the running posterior over delta_g and absorbs one work pair at a time.

    Starts from a flat prior. Absorbing a sample is one-way: there is no rollback, and
    the intermediate trace depends on the order in which samples are absorbed.
    """

    def __init__(self, delta_g, beta):
        self.delta_g = delta_g
        self.beta = beta
        self._posterior = np.ones(len(delta_g))
        self._delta_g_ests = []
        self._delta_g_errs = []

    @property
    def n_samples(self):
        return len(self._delta_g_ests)

    @property
    def posterior(self):
        """Read-only view of the current (normalized) posterior."""
        if self.n_samples == 0:
            posterior = self._posterior / integrate(self.delta_g, self._posterior)
        else:
            posterior = self._posterior.view()
        posterior.flags.writeable = False
        return posterior

    @property
    def mean_trace(self):
        return np.array(self._delta_g_ests)

    @property
    def stddev_trace(self):
        return np.array(self._delta_g_errs)

    def absorb(self, work_F, work_R):
        """Fold a single forward / backward work pair into the posterior.
        Returns the updated (mean, stddev)."""
        likelihood = sample_likelihood(work_F, work_R, self.beta, self.delta_g)
        self._posterior = update_posterior(self._posterior, likelihood, self.delta_g)

        delta_g_est, delta_g_err = posterior_moments(self.delta_g, self._posterior)
        self._delta_g_ests.append(delta_g_est)
        self._delta_g_errs.append(delta_g_err)
        return delta_g_est, delta_g_err

    def result(self):
        posterior = self.posterior
        if self.n_samples > 0:
            final_mean, final_stddev = self._delta_g_ests[-1], self._delta_g_errs[-1]
        else:
            final_mean, final_stddev = posterior_moments(self.delta_g, posterior)
        return CrooksBayesResult(final_mean=final_mean, final_stddev=final_stddev,
                                 grid=self.delta_g, posterior=posterior,
                                 mean_trace=self.mean_trace, stddev_trace=self.stddev_trace)


def check_work_samples(work_forwards, work_backwards):
    """Return forward / backward work as 1D float arrays of equal length."""
    work_forwards = np.asarray(work_forwards, dtype=float)
    work_backwards = np.asarray(work_backwards, dtype=float)
    if work_forwards.ndim != 1 or work_backwards.ndim != 1:
        raise ValueError("Expected 1D arrays of work values, got shapes {} and {}".format(
            work_forwards.shape, work_backwards.shape))
    if len(work_forwards) != len(work_backwards):
        raise SampleLengthMismatchError(
            "The number of forward protocols ({}) must equal the number of backward protocols ({})".format(
                len(work_forwards), len(work_backwards)))
    return work_forwards, work_backwards


def estimate(work_forwards, work_backwards, beta, delta_g_min, delta_g_max, step=None,
             progress=False, should_stop=None):
    """Crooks-Bayes estimate of the free energy difference from paired work measurements.

    Reference: P. Maragakis et al., J Chem Phys 129, 024102 (2008)

    Parameters
    ----------
    work_forwards, work_backwards : array-like of float
        Work needed to implement the forward / backward protocol, one entry per trial
    beta : float
        Inverse temperature of the bath, in inverse units of work
    delta_g_min, delta_g_max : float
        Hypothesis range for the free energy difference
    step : float, optional, default=estimation_parameters["step"]
        Hypothesis grid spacing
    progress : bool, optional, default=False
        If True, show a tqdm progress bar over samples
    should_stop : callable, optional
        Checked before each sample (e.g. `threading.Event().is_set`). If it returns True,
        stop early and return the result for the samples absorbed so far.

    Returns
    -------
    result : CrooksBayesResult
        (final_mean, final_stddev, grid, posterior, mean_trace, stddev_trace), where
        mean_trace[i], stddev_trace[i] summarize the posterior after absorbing sample i
    """
    work_forwards, work_backwards = check_work_samples(work_forwards, work_backwards)
    delta_g = build_hypothesis_grid(delta_g_min, delta_g_max, step)

    updater = SequentialUpdater(delta_g, beta)
    with tqdm(total=len(work_forwards), disable=not progress) as progress_bar:
        for i in range(len(work_forwards)):
            if should_stop is not None and should_stop():
                break
            updater.absorb(work_forwards[i], work_backwards[i])
            progress_bar.update(1)

    return updater.result()
