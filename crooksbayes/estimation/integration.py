import numpy as np
from scipy.integrate import trapezoid


def integrate(delta_g, values):
    """Composite trapezoidal-rule integral of `values` sampled at the points of `delta_g`.

    Works for non-uniform grids too.
    """
    delta_g = np.asarray(delta_g, dtype=float)
    values = np.asarray(values, dtype=float)
    if values.shape != delta_g.shape:
        raise ValueError("Expected {} function values to match the grid, got {}".format(
            delta_g.shape, values.shape))
    return float(trapezoid(values, delta_g))
