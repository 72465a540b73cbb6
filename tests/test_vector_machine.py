from vmclassify.vector_machine import VectorMachineClassifier


class IdentityKernel:
    def compute(self, a, b):
        return a * b


def test_defaults_are_zero_and_kernel_is_kept():
    kernel = IdentityKernel()
    machine = VectorMachineClassifier(kernel)
    assert machine.kernel is kernel
    assert machine.threshold == 0.0
    assert machine.bias == 0.0


def test_attributes_can_be_changed_independently():
    machine = VectorMachineClassifier(None)
    machine.bias = 1.5
    machine.threshold = -0.25
    assert machine.bias == 1.5
    assert machine.threshold == -0.25
    assert machine.kernel is None


def test_instances_do_not_share_state():
    first = VectorMachineClassifier(IdentityKernel())
    second = VectorMachineClassifier(IdentityKernel())
    first.bias = 3.0
    assert second.bias == 0.0
    assert first.kernel is not second.kernel