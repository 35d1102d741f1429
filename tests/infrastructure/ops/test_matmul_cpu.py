import unittest
from unittest import TestCase

import numpy as np

from keyonnx.domain._errors import (
    DimensionMismatchError,
    NumericOverflowError,
    UnsupportedRankError,
)
from keyonnx.domain.dtype._dtype import DType
from keyonnx.infrastructure.numeric import kind_for
from keyonnx.infrastructure.ops.matmul_cpu import matmul_cpu


def _flat(arr):
    return tuple(int(v) for v in np.asarray(arr).reshape(-1))


class TestMatmulCpu(TestCase):
    def setUp(self) -> None:
        self.kind = kind_for(DType.U32)

    def _run(self, a, b):
        return matmul_cpu(a.shape, _flat(a), b.shape, _flat(b), self.kind)

    def test_matrix_matrix(self):
        a = np.array([[1, 2], [3, 4]])
        b = np.array([[5, 6], [7, 8]])
        self.assertEqual(self._run(a, b), ((2, 2), (19, 22, 43, 50)))

    def test_rectangular_matches_numpy(self):
        a = np.arange(6).reshape(2, 3)
        b = np.arange(12).reshape(3, 4)
        shape, data = self._run(a, b)
        self.assertEqual(shape, (2, 4))
        self.assertEqual(data, _flat(a @ b))

    def test_dot_product_has_shape_one(self):
        self.assertEqual(
            self._run(np.array([1, 2, 3]), np.array([4, 5, 6])), ((1,), (32,))
        )

    def test_vector_operands_drop_the_padded_dimension(self):
        m = np.array([[5, 6], [7, 8]])
        v = np.array([1, 2])
        self.assertEqual(self._run(v, m), ((2,), _flat(v @ m)))
        self.assertEqual(self._run(m, v), ((2,), _flat(m @ v)))

    def test_signed_accumulation(self):
        kind = kind_for(DType.I32)
        a = tuple(kind.encode(v) for v in (1, -2, 3, -4))
        b = tuple(kind.encode(v) for v in (-5, 6, 7, -8))
        shape, out = matmul_cpu((2, 2), a, (2, 2), b, kind)
        ref = np.array([[1, -2], [3, -4]]) @ np.array([[-5, 6], [7, -8]])
        self.assertEqual([kind.decode(v) for v in out], ref.reshape(-1).tolist())

    def test_overflow_propagates(self):
        kind = kind_for(DType.I8)
        with self.assertRaises(NumericOverflowError):
            matmul_cpu((1,), (kind.encode(100),), (1,), (kind.encode(2),), kind)

    def test_unsupported_rank(self):
        with self.assertRaises(UnsupportedRankError):
            matmul_cpu((1, 1, 1), (1,), (1, 1), (1,), self.kind)
        with self.assertRaises(UnsupportedRankError):
            matmul_cpu((), (1,), (1,), (1,), self.kind)

    def test_inner_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatchError):
            matmul_cpu((2, 3), (0,) * 6, (2, 3), (0,) * 6, self.kind)
        with self.assertRaises(DimensionMismatchError):
            matmul_cpu((2,), (0, 0), (3,), (0, 0, 0), self.kind)


if __name__ == "__main__":
    unittest.main()
