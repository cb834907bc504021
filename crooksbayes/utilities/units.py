import numpy as np
from openmm import unit

from crooksbayes import estimation_parameters
from crooksbayes.estimation import estimate

kB = unit.BOLTZMANN_CONSTANT_kB * unit.AVOGADRO_CONSTANT_NA
W_unit = unit.kilojoule_per_mole


def strip_unit(quantity, target_unit=W_unit):
    """Take a unit'd quantity and return just its value in `target_unit`.
    Plain numbers / arrays are assumed to already be in `target_unit`."""
    if unit.is_quantity(quantity):
        return np.asarray(quantity.value_in_unit(target_unit), dtype=float)
    return np.asarray(quantity, dtype=float)


def compute_beta(temperature=None):
    """Inverse temperature 1 / (kB T), in units of 1 / W_unit."""
    if temperature is None:
        temperature = estimation_parameters["temperature"]
    kT = kB * temperature
    return 1.0 / kT.value_in_unit(W_unit)


def estimate_with_units(work_forwards, work_backwards, temperature, delta_g_min, delta_g_max, step=None,
                        **kwargs):
    """Like `estimate`, but accepts unit'd work values, bounds and step, and a unit'd temperature.

    Everything is converted to kJ/mol; the returned estimates are in kJ/mol.
    A unitless step is taken to already be in kJ/mol.
    """
    if step is not None:
        step = float(strip_unit(step))
    return estimate(strip_unit(work_forwards), strip_unit(work_backwards),
                    beta=compute_beta(temperature),
                    delta_g_min=float(strip_unit(delta_g_min)), delta_g_max=float(strip_unit(delta_g_max)),
                    step=step, **kwargs)
