from .utils import stderr, summarize, print_array, get_summary_string
from .units import kB, W_unit, strip_unit, compute_beta, estimate_with_units

__all__ = ["stderr", "summarize", "print_array", "get_summary_string",
           "kB", "W_unit", "strip_unit", "compute_beta", "estimate_with_units"]
