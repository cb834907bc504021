import numpy as np


def stderr(array):
    """Compute the standard error of an array."""
    return np.std(array) / np.sqrt(len(array))


def summarize(array):
    """Given an array, return a string with mean +/- 1.96 * standard error"""
    return "{:.3f} +/- {:.3f}".format(np.mean(array), 1.96 * stderr(array))


def get_summary_string(result, linebreaks=True):
    """Unpack a CrooksBayesResult and return a summary string."""
    final_mean, final_stddev, delta_g, posterior, mean_trace, stddev_trace = result
    if linebreaks: separator = "\n\t"
    else: separator = ", "

    summary_string = separator.join(
        ["DeltaG = {:.3f} +/- {:.3f}".format(final_mean, final_stddev),
         "n_samples = {}".format(len(mean_trace)),
         "MAP DeltaG = {:.3f}".format(delta_g[np.argmax(posterior)]),
         "hypothesis range = [{:.3f}, {:.3f}] ({} points)".format(delta_g[0], delta_g[-1], len(delta_g))])
    return summary_string


def print_array(array, decimal_places=3):
    format_string = "{:." + str(decimal_places) + "f}"
    return "[" + ", ".join([format_string.format(i) for i in array]) + "]"
