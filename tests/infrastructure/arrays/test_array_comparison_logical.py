import unittest

import numpy as np

import keynd as nd
from keynd import ElementKind, ShapeMismatchError, TypeMismatchError


class TestArrayComparisons(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.a_np = rng.standard_normal((3, 4))
        self.b_np = rng.standard_normal((3, 4))
        self.a = nd.from_numpy(self.a_np)
        self.b = nd.from_numpy(self.b_np)

    def _assert_mask(self, y, ref) -> None:
        self.assertIs(y.kind, ElementKind.BOOLEAN)
        self.assertEqual(y.shape, ref.shape)
        np.testing.assert_array_equal(y.to_numpy(), ref)

    def test_ordering_matches_numpy(self) -> None:
        self._assert_mask(self.a < self.b, self.a_np < self.b_np)
        self._assert_mask(self.a <= self.b, self.a_np <= self.b_np)
        self._assert_mask(self.a > self.b, self.a_np > self.b_np)
        self._assert_mask(self.a >= self.b, self.a_np >= self.b_np)

    def test_named_methods(self) -> None:
        self._assert_mask(self.a.lt(0.0), self.a_np < 0.0)
        self._assert_mask(self.a.ge(self.b), self.a_np >= self.b_np)

    def test_equality_is_elementwise(self) -> None:
        a = nd.create(1, 2, 3)
        self._assert_mask(a == 2, np.array([False, True, False]))
        self._assert_mask(a != 2, np.array([True, False, True]))
        self._assert_mask(a.eq(nd.create(1.0, 0.0, 3.0)), np.array([True, False, True]))
        self._assert_mask(a.neq(a), np.array([False, False, False]))

    def test_comparison_broadcasts(self) -> None:
        col = nd.create(0.0, 1.0, 2.0).reshape(3, 1)
        y = self.a > col
        self._assert_mask(y, self.a_np > np.array([[0.0], [1.0], [2.0]]))

    def test_incompatible_shapes_raise(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.a < nd.zeros(5)

    def test_complex_ordering_is_rejected(self) -> None:
        c = nd.create(1j, 2j)
        with self.assertRaises(TypeMismatchError):
            c < c
        with self.assertRaises(TypeMismatchError):
            nd.create(1.0, 2.0) < c

    def test_complex_equality_is_supported(self) -> None:
        c = nd.create(1j, 2j)
        self._assert_mask(c == 1j, np.array([True, False]))

    def test_equality_with_foreign_object_falls_back(self) -> None:
        a = nd.create(1, 2)
        self.assertFalse(a == "text")
        self.assertTrue(a != None)  # noqa: E711

    def test_arrays_are_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(nd.create(1, 2))

    def test_equals_is_a_whole_array_predicate(self) -> None:
        a = nd.create(1, 2)
        self.assertTrue(a.equals(nd.create(1.0, 2.0)))
        self.assertFalse(a.equals(nd.create(1, 2, 3)))
        self.assertFalse(a.equals([1, 2]))
    def test_numpy_scalar_on_the_left_is_reflected(self) -> None:
        a = nd.create(0.5, 1.0, 2.0)
        y = np.float64(1.0) < a
        self.assertIsInstance(y, nd.Array)
        self._assert_mask(y, np.array([False, False, True]))
        self._assert_mask(np.int64(1) == nd.create(1, 2), np.array([True, False]))


class TestArrayLogical(unittest.TestCase):
    def setUp(self) -> None:
        self.p = nd.create(True, True, False, False)
        self.q = nd.create(True, False, True, False)

    def test_truth_tables(self) -> None:
        self.assertEqual((self.p & self.q).tolist(), [True, False, False, False])
        self.assertEqual((self.p | self.q).tolist(), [True, True, True, False])
        self.assertEqual((self.p ^ self.q).tolist(), [False, True, True, False])
        self.assertEqual((~self.p).tolist(), [False, False, True, True])

    def test_named_methods_and_scalars(self) -> None:
        self.assertEqual(self.p.and_(True).tolist(), [True, True, False, False])
        self.assertEqual(self.p.or_(self.q).tolist(), (self.p | self.q).tolist())
        self.assertEqual(self.p.xor(False).tolist(), self.p.tolist())
        self.assertEqual(self.p.not_().tolist(), (~self.p).tolist())
        self.assertEqual((True & self.q).tolist(), self.q.tolist())

    def test_combines_comparison_results(self) -> None:
        x = nd.range(0, 6)
        y = (x > 1) & (x < 4)
        self.assertEqual(y.tolist(), [False, False, True, True, False, False])

    def test_non_boolean_operands_are_rejected(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.create(1, 2) & nd.create(1, 0)
        with self.assertRaises(TypeMismatchError):
            self.p & nd.create(1, 0, 1, 0)
        with self.assertRaises(TypeMismatchError):
            ~nd.create(1.0)

    def test_shape_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            self.p & nd.create(True, False)

class TestArrayWhere(unittest.TestCase):
    def test_selects_between_arrays(self) -> None:
        cond = nd.create(True, False, True)
        y = cond.where(nd.create(1, 2, 3), nd.create(10, 20, 30))
        self.assertIs(y.kind, ElementKind.INT)
        self.assertEqual(y.tolist(), [1, 20, 3])

    def test_broadcasts_scalars_and_promotes(self) -> None:
        a = nd.from_nested([[1.5, -2.0], [-0.5, 4.0]])
        y = nd.where(a > 0, a, 0)
        self.assertIs(y.kind, ElementKind.DOUBLE)
        self.assertEqual(y.tolist(), [[1.5, 0.0], [0.0, 4.0]])

    def test_free_function_accepts_plain_masks(self) -> None:
        y = nd.where([False, True], 1, 2)
        self.assertEqual(y.tolist(), [2, 1])

    def test_condition_must_be_boolean(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.create(1, 0).where(1, 2)

    def test_branches_cannot_mix_boolean_and_numbers(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.create(True).where(True, 1)

    def test_shape_mismatch(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            nd.create(True, False).where(nd.create(1, 2, 3), 0)



if __name__ == "__main__":
    unittest.main()
