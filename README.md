# vmclassify

Kernel-based binary classifiers for feature vectors such as image patches,
with pseudo-probabilistic output and stores for training examples.

## What is in the package

- `vmclassify.vector_machine.VectorMachineClassifier` – the shared state of
  the vector machines: a `kernel`, a `bias` and a decision `threshold`.
- `vmclassify.svm.SvmClassifier` – a support vector machine. The hyperplane
  distance is the sum of the kernel values between the feature vector and each
  support vector, scaled by the coefficients, minus the bias. Parameters are
  set with `set_svm_parameters(support_vectors, coefficients, bias)` and the
  threshold with `set_svm_threshold`.
- `vmclassify.rvm.RvmClassifier` – a reduced vector machine run as a cascade.
  Each filter level has its own coefficients (`coefficients[n]` weighs vectors
  `0..n`) and its own entry in `hierarchical_thresholds`; a feature vector that
  falls below a level's threshold is rejected early.
  `compute_hyperplane_distance` returns a `(last level, distance)` pair, and
  `set_num_filters_to_use` limits the cascade (zero or too many means all).
- `vmclassify.probabilistic_svm.ProbabilisticSvmClassifier` and
  `vmclassify.probabilistic_rvm.ProbabilisticRvmClassifier` – map the
  hyperplane distance through the logistic function
  `p(x) = 1 / (1 + exp(a + b * x))`. Each module also has
  `load_sigmoid_params_from_matlab(filename)`, which reads `(a, b)` from a
  MATLAB file (`posterior_svm` or `posterior_wrvm` respectively; the vector
  holds `b` first, then `a`).
- `vmclassify.two_stage.ProbabilisticTwoStageClassifier` – asks the second
  classifier only when the first one accepts.
- `vmclassify.trainable_svm.TrainableSvmClassifier` – wraps an SVM and tracks
  whether it is usable.
- `vmclassify.trainable_probabilistic_svm.TrainableProbabilisticSvmClassifier`
  – after each successful re-training, recomputes the logistic parameters so
  that the mean output of the stored positive test examples maps to
  `high_probability` and that of the negative ones to `low_probability`;
  optionally moves the SVM threshold to a target probability
  (`set_adjust_threshold`).
- `vmclassify.examples` – training example stores:
  `UnlimitedExampleManagement`, `AgeBasedExampleManagement` (replaces the
  oldest examples once full), `ConfidenceBasedExampleManagement` (replaces the
  examples the classifier is most confident about, keeping the first
  `keep`), and `FrameBasedExampleManagement` (keeps the examples of the last
  `frame_capacity` calls to `add`). All support `len()`, iteration, `clear()`
  and `has_required_size()`.

`classify` returns a `bool`, `get_confidence` a `(label, confidence)` pair
and `get_probability` a `(label, probability)` pair.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

A kernel is any object with a `compute(a, b)` method:

```python
import numpy as np
from vmclassify.svm import SvmClassifier
from vmclassify.probabilistic_svm import ProbabilisticSvmClassifier


class LinearKernel:
    def compute(self, a, b):
        return float(np.dot(a, b))


svm = SvmClassifier(LinearKernel())
svm.set_svm_parameters([np.array([1.0, 0.0])], [2.0], 0.5)
svm.compute_hyperplane_distance(np.array([1.0, 0.0]))  # 1.5
svm.get_confidence(np.array([1.0, 0.0]))               # (True, 1.5)

probabilistic = ProbabilisticSvmClassifier(svm, 0.0, -1.0)
probabilistic.get_probability(np.array([1.0, 0.0]))    # (True, 0.817...)
```

Storing training examples:

```python
import numpy as np
from vmclassify.examples import AgeBasedExampleManagement

store = AgeBasedExampleManagement(capacity=3, required_size=2)
store.add([np.zeros(4), np.ones(4)])
store.has_required_size()   # True
store.add([np.full(4, 2.0), np.full(4, 3.0)])
len(store)                  # 3, the oldest example has been replaced
```

## What the package does not do

- It ships no kernel functions; pass your own object with `compute(a, b)`.
- It has no training algorithm. `TrainableProbabilisticSvmClassifier` expects
  the trainable SVM it wraps to provide `retrain(positives, negatives)` and
  `reset()`; `TrainableSvmClassifier` itself provides neither.
- Of the MATLAB file formats it reads only the logistic parameters; support
  vectors, coefficients and thresholds are set in code.
- There is no command-line tool.

## Running the tests

```
pytest
```