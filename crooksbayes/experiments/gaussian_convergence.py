# Check that the Crooks-Bayes estimate converges to the known DeltaG of
# Crooks-consistent Gaussian work, for increasingly dissipative protocols.
import numpy as np

from crooksbayes.experiments.driver import Experiment, ExperimentDescriptor, run_replicates
from crooksbayes.testsystems import GaussianWorkModel
from crooksbayes.utilities import print_array

dissipations = [0.1, 0.5, 2.0, 5.0]
n_protocol_samples = 1000
checkpoints = [1, 10, 100, 1000]
replicate_seeds = range(1, 21)

if __name__ == "__main__":
    for dissipation in dissipations:
        work_model = GaussianWorkModel(delta_g=1.5, dissipation=dissipation)
        descriptor = ExperimentDescriptor(experiment_name="gaussian_convergence",
                                          system_name=work_model.name, work_model=work_model,
                                          n_protocol_samples=n_protocol_samples,
                                          delta_g_min=-10.0, delta_g_max=10.0, step=0.01,
                                          random_seed=0)
        experiment = Experiment(descriptor)
        result = experiment.run()

        indices = np.array(checkpoints) - 1
        print("\tmean trace at n={}: {}".format(checkpoints, print_array(result.mean_trace[indices])))
        print("\tstddev trace at n={}: {}".format(checkpoints, print_array(result.stddev_trace[indices])))
        print("\tz-score of final estimate: {:.3f}\n".format(experiment.z_score()))

        # a calibrated posterior gives z-scores with mean ~0 and spread ~1
        run_replicates(descriptor, replicate_seeds)
        print("")
