import numpy as np
import pytest
import scipy.io

from vmclassify.probabilistic_svm import (
    ProbabilisticSvmClassifier,
    load_sigmoid_params_from_matlab,
)
from vmclassify.svm import SvmClassifier


class DotKernel:
    def compute(self, first, second):
        return float(np.dot(np.ravel(first), np.ravel(second)))


def _svm():
    svm = SvmClassifier(DotKernel())
    svm.set_svm_parameters([np.array([1.0, 0.0])], [1.0], 0.0)
    return svm


def test_default_logistic_parameters():
    classifier = ProbabilisticSvmClassifier(_svm())
    assert classifier.logistic_a == 0.00556
    assert classifier.logistic_b == -2.95


def test_from_kernel_builds_svm():
    kernel = DotKernel()
    classifier = ProbabilisticSvmClassifier.from_kernel(kernel, 1.0, 2.0)
    assert classifier.svm.kernel is kernel
    assert (classifier.logistic_a, classifier.logistic_b) == (1.0, 2.0)


def test_classify_and_confidence_follow_svm():
    svm = _svm()
    classifier = ProbabilisticSvmClassifier(svm)
    positive = np.array([2.0, 5.0])
    negative = np.array([-3.0, 1.0])
    assert classifier.classify(positive) is True
    assert classifier.classify(negative) is False
    assert classifier.get_confidence(positive) == svm.get_confidence(positive)
    assert classifier.get_confidence(negative) == svm.get_confidence(negative)


def test_zero_parameters_give_one_half():
    classifier = ProbabilisticSvmClassifier(_svm(), 0.0, 0.0)
    assert classifier.probability_for_distance(3.0)[1] == pytest.approx(0.5)


def test_probability_is_symmetric_without_offset():
    classifier = ProbabilisticSvmClassifier(_svm(), 0.0, -1.5)
    for distance in (0.3, 1.0, 4.0):
        high = classifier.probability_for_distance(distance)[1]
        low = classifier.probability_for_distance(-distance)[1]
        assert high + low == pytest.approx(1.0)
        assert high > 0.5 > low


def test_probability_grows_with_distance_for_negative_b():
    classifier = ProbabilisticSvmClassifier(_svm())
    probabilities = [classifier.probability_for_distance(d)[1] for d in (-2.0, 0.0, 1.0, 3.0)]
    assert probabilities == sorted(probabilities)
    assert all(0.0 < p < 1.0 for p in probabilities)


def test_extreme_distances_do_not_overflow():
    classifier = ProbabilisticSvmClassifier(_svm(), 0.0, -1.0)
    assert classifier.probability_for_distance(1000.0)[1] == pytest.approx(1.0)
    assert classifier.probability_for_distance(-1000.0)[1] == pytest.approx(0.0)


def test_probability_label_uses_svm_threshold():
    svm = _svm()
    svm.set_svm_threshold(1.0)
    classifier = ProbabilisticSvmClassifier(svm)
    assert classifier.probability_for_distance(0.5)[0] is False
    assert classifier.probability_for_distance(1.0)[0] is True


def test_get_probability_matches_distance_probability():
    svm = _svm()
    classifier = ProbabilisticSvmClassifier(svm)
    vector = np.array([0.75, 2.0])
    distance = svm.compute_hyperplane_distance(vector)
    assert classifier.get_probability(vector) == classifier.probability_for_distance(distance)


def test_set_logistic_parameters_changes_output():
    classifier = ProbabilisticSvmClassifier(_svm())
    before = classifier.get_probability(np.array([2.0, 0.0]))[1]
    classifier.set_logistic_parameters(0.0, 0.0)
    after = classifier.get_probability(np.array([2.0, 0.0]))[1]
    assert after == pytest.approx(0.5)
    assert before > after


def test_load_sigmoid_params_reads_b_then_a(tmp_path):
    path = tmp_path / "logistic.mat"
    scipy.io.savemat(path, {"posterior_svm": np.array([[-2.5, 0.75]])})
    assert load_sigmoid_params_from_matlab(path) == pytest.approx((0.75, -2.5))


def test_load_sigmoid_params_without_vector(tmp_path):
    path = tmp_path / "logistic.mat"
    scipy.io.savemat(path, {"other": np.array([[1.0, 2.0]])})
    assert load_sigmoid_params_from_matlab(path) == (0.0, 0.0)


def test_load_sigmoid_params_with_wrong_size(tmp_path):
    path = tmp_path / "logistic.mat"
    scipy.io.savemat(path, {"posterior_svm": np.array([[1.0, 2.0, 3.0]])})
    assert load_sigmoid_params_from_matlab(path) == (0.0, 0.0)


def test_load_sigmoid_params_missing_file(tmp_path):
    with pytest.raises(RuntimeError, match="logistic file"):
        load_sigmoid_params_from_matlab(tmp_path / "absent.mat")


def test_load_sigmoid_params_garbage_file(tmp_path):
    path = tmp_path / "garbage.mat"
    path.write_bytes(b"not a matlab file at all")
    with pytest.raises(RuntimeError):
        load_sigmoid_params_from_matlab(path)