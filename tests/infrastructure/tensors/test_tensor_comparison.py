import unittest
from unittest import TestCase

import numpy as np

from keyonnx.domain._errors import DTypeMismatchError
from keyonnx.domain.dtype._dtype import DType
from keyonnx.infrastructure.tensor import Tensor


class TestTensorComparison(TestCase):
    def setUp(self) -> None:
        self.a_np = np.array([[-1.5, 0.0, 2.0], [3.0, -4.0, 0.5]])
        self.b_np = np.array([0.0, 0.0, 2.0])
        self.a = Tensor.from_numpy(self.a_np, dtype="fp16x16")
        self.b = Tensor.from_numpy(self.b_np, dtype="fp16x16")

    def test_predicates_match_numpy(self):
        cases = [
            ("equal", self.a.equal(self.b), self.a_np == self.b_np),
            ("greater", self.a > self.b, self.a_np > self.b_np),
            ("greater_equal", self.a >= self.b, self.a_np >= self.b_np),
            ("less", self.a < self.b, self.a_np < self.b_np),
            ("less_equal", self.a <= self.b, self.a_np <= self.b_np),
        ]
        for name, y, ref in cases:
            with self.subTest(op=name):
                self.assertIs(y.dtype, DType.U32)
                self.assertEqual(y.shape, ref.shape)
                np.testing.assert_array_equal(y.to_numpy(), ref.astype(np.int64))

    def test_signed_magnitude_ordering(self):
        a = Tensor.from_values((4,), [-3, -1, 0, 2], "i8")
        self.assertEqual((a < -1).to_list(), [1, 0, 0, 0])
        self.assertEqual(a.greater_equal(0).to_list(), [0, 0, 1, 1])

    def test_structural_equality_is_not_elementwise(self):
        self.assertIsInstance(self.a == self.a, bool)
        self.assertEqual(self.a.equal(self.a).to_list(), [1] * 6)

    def test_dtype_mismatch(self):
        with self.assertRaises(DTypeMismatchError):
            self.a > Tensor.zeros((3,), "fp32x32")


class TestTensorLogical(TestCase):
    def setUp(self) -> None:
        self.a = Tensor.from_values((4,), [0, 0, 3, 5], "u32")
        self.b = Tensor.from_values((4,), [0, 2, 0, 7], "u32")

    def test_truth_tables(self):
        self.assertEqual((self.a & self.b).to_list(), [0, 0, 0, 1])
        self.assertEqual((self.a | self.b).to_list(), [0, 1, 1, 1])
        self.assertEqual((self.a ^ self.b).to_list(), [0, 1, 1, 0])
        self.assertEqual(self.a.not_().to_list(), [1, 1, 0, 0])

    def test_logical_ops_accept_any_kind(self):
        a = Tensor.from_values((3,), ["-0.5", 0, 2], "fp16x16")
        y = a.and_(1)
        self.assertIs(y.dtype, DType.U32)
        self.assertEqual(y.to_list(), [1, 0, 1])
        self.assertEqual(a.not_().to_list(), [0, 1, 0])


if __name__ == "__main__":
    unittest.main()
