import numpy as np

from crooksbayes import estimation_parameters
from crooksbayes.exceptions import InvalidRangeError


def get_n_grid_points(delta_g_min, delta_g_max, step):
    """Number of hypotheses: floor((delta_g_max - delta_g_min) / step).

    Ratios within floating-point noise of an integer are snapped to it first,
    so that e.g. (10 - (-10)) / 0.1 gives 200 points rather than 199.
    """
    ratio = (delta_g_max - delta_g_min) / step
    nearest = np.round(ratio)
    if np.isclose(ratio, nearest, rtol=1e-9, atol=0):
        ratio = nearest
    return int(np.floor(ratio))


def build_hypothesis_grid(delta_g_min, delta_g_max, step=None):
    """Discretize the hypothesis range [delta_g_min, delta_g_max] for the free energy difference.

    Parameters
    ----------
    delta_g_min, delta_g_max : float
        Endpoints of the hypothesis range (both included in the grid)
    step : float, optional, default=estimation_parameters["step"]
        Requested spacing. Smaller is more precise and proportionally slower.

    Returns
    -------
    delta_g : numpy.ndarray
        Read-only, strictly increasing, uniformly spaced array of
        floor((delta_g_max - delta_g_min) / step) hypotheses

    Raises
    ------
    InvalidRangeError
        If the bounds are not finite and increasing, the step is not finite and positive,
        or the grid would have fewer than 2 points
    """
    if step is None:
        step = estimation_parameters["step"]

    if not (np.isfinite(delta_g_min) and np.isfinite(delta_g_max)):
        raise InvalidRangeError("Hypothesis range must be finite, got [{}, {}]".format(delta_g_min, delta_g_max))
    if delta_g_max <= delta_g_min:
        raise InvalidRangeError("delta_g_max must exceed delta_g_min, got [{}, {}]".format(delta_g_min, delta_g_max))
    if not (np.isfinite(step) and step > 0):
        raise InvalidRangeError("Step size must be finite and positive, got {}".format(step))

    n_points = get_n_grid_points(delta_g_min, delta_g_max, step)
    if n_points < 2:
        raise InvalidRangeError(
            "Step size {} yields {} point(s) on [{}, {}]; at least 2 are needed for integration".format(
                step, n_points, delta_g_min, delta_g_max))

    delta_g = np.linspace(delta_g_min, delta_g_max, n_points)
    delta_g.flags.writeable = False
    return delta_g
