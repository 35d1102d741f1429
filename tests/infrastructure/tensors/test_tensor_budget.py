import unittest
from unittest import TestCase

from keyonnx.domain._errors import ResourceExhaustedError
from keyonnx.infrastructure.budget import StepBudget, budget_scope
from keyonnx.infrastructure.tensor import Tensor


class TestTensorBudget(TestCase):
    def setUp(self) -> None:
        self.x = Tensor.from_values((4, 5), range(20), "u32")

    def test_unbounded_loops_consult_the_guard(self):
        ops = {
            "add": lambda x: x + x,
            "argmax": lambda x: x.argmax(axis=1),
            "reduce_sum": lambda x: x.reduce_sum(axis=1),
            "max": lambda x: x.max(),
            "transpose": lambda x: x.transpose(),
            "cumsum": lambda x: x.cumsum(axis=0),
        }
        for name, op in ops.items():
            with self.subTest(op=name):
                with self.assertRaises(ResourceExhaustedError):
                    with budget_scope(StepBudget(2)):
                        op(self.x)

    def test_long_dot_product_is_charged_per_element(self):
        v = Tensor.from_values((1000,), [1] * 1000, "u32")
        with self.assertRaises(ResourceExhaustedError):
            with budget_scope(StepBudget(5)):
                v @ v
        with budget_scope(StepBudget(1000)) as guard:
            self.assertEqual((v @ v).to_list(), [1000])
        self.assertEqual(guard.steps, 1000)

    def test_long_single_axis_reductions_are_charged_per_element(self):
        v = Tensor.from_values((1000,), [1] * 1000, "u32")
        ops = {
            "reduce_sum": lambda x: x.reduce_sum(0),
            "reduce_mean": lambda x: x.reduce_mean(0),
            "max": lambda x: x.max(axis=0),
            "argmin": lambda x: x.argmin(0),
            "cumsum": lambda x: x.cumsum(0),
        }
        for name, op in ops.items():
            with self.subTest(op=name):
                with self.assertRaises(ResourceExhaustedError):
                    with budget_scope(StepBudget(5)):
                        op(v)

    def test_generous_budget_succeeds(self):
        with budget_scope(StepBudget(10_000)) as guard:
            y = (self.x + 1).reduce_sum(axis=0)
        self.assertEqual(y.shape, (5,))
        self.assertGreater(guard.steps, 0)

    def test_shape_only_ops_are_free(self):
        with budget_scope(StepBudget(0)):
            self.assertEqual(self.x.reshape((2, 10)).shape, (2, 10))
            self.assertEqual(self.x.unsqueeze([0]).shape, (1, 4, 5))


if __name__ == "__main__":
    unittest.main()
