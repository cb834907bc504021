import numpy as np
import pytest
from scipy.special import logsumexp

from crooksbayes import estimate
from crooksbayes.experiments.driver import Experiment, ExperimentDescriptor, run_replicates
from crooksbayes.testsystems import GaussianWorkModel, weakly_dissipative
from crooksbayes.utilities import get_summary_string, print_array, summarize


def check_jarzynski_equality(work_model, n_samples=20000, tolerance=0.05):
    """Check that -log <exp(-beta W_F)> / beta recovers DeltaG for the work model"""
    W_F, _ = work_model.collect_protocol_samples(n_samples, random_state=0)
    DeltaG_jarzynski = - (logsumexp(- work_model.beta * W_F) - np.log(n_samples)) / work_model.beta
    if abs(DeltaG_jarzynski - work_model.delta_g) > tolerance:
        raise Exception("Work model violates Jarzynski equality: {:.3f} != {:.3f}".format(
            DeltaG_jarzynski, work_model.delta_g))


@pytest.mark.parametrize("delta_g, dissipation, beta", [
    (0.0, 0.5, 1.0),
    (1.5, 0.5, 1.0),
    (-3.0, 0.5, 2.0),
])
def test_gaussian_work_is_crooks_consistent(delta_g, dissipation, beta):
    check_jarzynski_equality(GaussianWorkModel(delta_g, dissipation, beta))


def test_gaussian_work_moments():
    work_model = GaussianWorkModel(delta_g=2.0, dissipation=1.0, beta=0.5)
    W_F, W_R = work_model.collect_protocol_samples(20000, random_state=1)
    assert np.isclose(work_model.sigma, 2.0)
    assert abs(np.mean(W_F) - 3.0) < 0.1
    assert abs(np.mean(W_R) - (-1.0)) < 0.1
    assert abs(np.std(W_F) - 2.0) < 0.1


def test_gaussian_work_seed_is_reproducible():
    first = weakly_dissipative.collect_protocol_samples(10, random_state=42)
    second = weakly_dissipative.collect_protocol_samples(10, random_state=np.random.RandomState(42))
    np.testing.assert_array_equal(first[0], second[0])
    np.testing.assert_array_equal(first[1], second[1])


@pytest.mark.parametrize("dissipation, beta", [(-1.0, 1.0), (1.0, 0.0)])
def test_gaussian_work_rejects_bad_parameters(dissipation, beta):
    with pytest.raises(ValueError):
        GaussianWorkModel(delta_g=0.0, dissipation=dissipation, beta=beta)


def make_experiment(n_protocol_samples=400):
    descriptor = ExperimentDescriptor(experiment_name="test_experiment",
                                      system_name=weakly_dissipative.name, work_model=weakly_dissipative,
                                      n_protocol_samples=n_protocol_samples,
                                      delta_g_min=-10.0, delta_g_max=10.0, step=0.05,
                                      random_seed=1)
    return Experiment(descriptor, progress=False)


def test_experiment_run(capsys):
    experiment = make_experiment()
    result = experiment.run()

    assert len(result.mean_trace) == 400
    assert abs(experiment.error()) < 0.3
    assert np.isfinite(experiment.z_score())

    output = capsys.readouterr().out
    assert "test_experiment" in output
    assert "DeltaG = " in output


def test_run_replicates_reports_spread(capsys):
    errors, z_scores = run_replicates(make_experiment(n_protocol_samples=200).experiment_descriptor,
                                      random_seeds=[1, 2, 3])

    assert errors.shape == z_scores.shape == (3,)
    assert np.all(np.abs(errors) < 0.4)
    assert np.all(np.isfinite(z_scores))

    output = capsys.readouterr().out
    assert "test_experiment over 3 replicates:" in output
    assert "error = {}".format(summarize(errors)) in output
    assert "z-score = {}".format(summarize(z_scores)) in output


def test_experiment_error_before_run():
    with pytest.raises(RuntimeError):
        make_experiment().error()


def test_summary_string():
    result = estimate([5.0, 5.0], [-5.0, -5.0], beta=1.0, delta_g_min=-10.0, delta_g_max=10.0, step=0.1)
    summary = get_summary_string(result, linebreaks=False)
    assert summary.startswith("DeltaG = {:.3f} +/- {:.3f}".format(result.final_mean, result.final_stddev))
    assert "n_samples = 2" in summary
    assert "\n" not in summary
    assert "\n\t" in get_summary_string(result)


def test_formatting_helpers():
    assert print_array([1.0, 2.5], decimal_places=1) == "[1.0, 2.5]"
    assert summarize([1.0, 1.0, 1.0]) == "1.000 +/- 0.000"


def test_tests_ship_as_a_package():
    import crooksbayes.tests
    assert crooksbayes.tests.__name__ == "crooksbayes.tests"
