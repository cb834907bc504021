from collections import namedtuple

import numpy as np

from crooksbayes.estimation import estimate
from crooksbayes.utilities import get_summary_string, summarize

ExperimentDescriptor = namedtuple("ExperimentDescriptor", ["experiment_name",
                                                           "system_name", "work_model",
                                                           "n_protocol_samples",
                                                           "delta_g_min", "delta_g_max", "step",
                                                           "random_seed"])


class Experiment():
    def __init__(self, experiment_descriptor, progress=True):
        self.experiment_descriptor = experiment_descriptor
        self.progress = progress
        self.result = None

    def run(self):
        exp = self.experiment_descriptor
        W_F, W_R = exp.work_model.collect_protocol_samples(exp.n_protocol_samples, random_state=exp.random_seed)

        self.result = estimate(W_F, W_R, beta=exp.work_model.beta,
                               delta_g_min=exp.delta_g_min, delta_g_max=exp.delta_g_max, step=exp.step,
                               progress=self.progress)
        print(self)
        print("\t" + get_summary_string(self.result, linebreaks=True))
        return self.result

    def error(self):
        """Signed error of the final estimate relative to the work model's true DeltaG."""
        if self.result is None:
            raise RuntimeError("Experiment hasn't been run yet")
        return self.result.final_mean - self.experiment_descriptor.work_model.delta_g

    def z_score(self):
        """Error in units of the reported posterior standard deviation."""
        error = self.error()
        if self.result.final_stddev == 0:
            return np.inf if error != 0 else 0.0
        return error / self.result.final_stddev

    def __str__(self):
        exp = self.experiment_descriptor

        properties = [exp.experiment_name,
                      exp.system_name,
                      "true DeltaG: {}, dissipation: {}, beta: {}".format(
                          exp.work_model.delta_g, exp.work_model.dissipation, exp.work_model.beta),
                      "n_protocol_samples: {}".format(exp.n_protocol_samples),
                      "hypothesis range: [{}, {}]".format(exp.delta_g_min, exp.delta_g_max),
                      "step: {}".format(exp.step)
                      ]

        return "\n\t".join(["{}"] * len(properties)).format(*properties)


def run_replicates(experiment_descriptor, random_seeds, progress=False):
    """Repeat an experiment once per random seed, and print the error and z-score of the
    final estimate across replicates as mean +/- 1.96 * standard error.

    Returns arrays of final errors and z-scores, one entry per seed.
    """
    errors, z_scores = [], []
    for random_seed in random_seeds:
        experiment = Experiment(experiment_descriptor._replace(random_seed=random_seed), progress=progress)
        experiment.run()
        errors.append(experiment.error())
        z_scores.append(experiment.z_score())

    print("{} over {} replicates:".format(experiment_descriptor.experiment_name, len(errors)))
    print("\terror = {}".format(summarize(errors)))
    print("\tz-score = {}".format(summarize(z_scores)))
    return np.array(errors), np.array(z_scores)
