import unittest

import numpy as np

import keynd as nd
from keynd import Array, ElementKind, InvalidArgumentError, TypeMismatchError


class TestArrayLiterals(unittest.TestCase):
    def test_create_infers_int(self) -> None:
        a = nd.create(1, 2, 3)
        self.assertIs(a.kind, ElementKind.INT)
        self.assertEqual(a.shape, (3,))
        self.assertEqual(a.dtype, np.int32)
        self.assertEqual(a.tolist(), [1, 2, 3])

    def test_create_promotes_to_double_and_complex(self) -> None:
        self.assertIs(nd.create(1, 2.5).kind, ElementKind.DOUBLE)
        self.assertIs(nd.create(1, 2j).kind, ElementKind.COMPLEX)
        self.assertIs(nd.create(1, 2**40).kind, ElementKind.LONG)
        self.assertIs(nd.create(True, False).kind, ElementKind.BOOLEAN)

    def test_create_rejects_mixed_bool_and_numbers(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.create(True, 1)

    def test_create_rejects_non_numeric(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.create(1, "two")

    def test_create_with_explicit_kind_casts(self) -> None:
        a = nd.create(1, 2, kind=ElementKind.DOUBLE)
        self.assertIs(a.kind, ElementKind.DOUBLE)
        self.assertEqual(a.tolist(), [1.0, 2.0])

        b = nd.create(1.9, -1.9, kind=ElementKind.INT)
        self.assertEqual(b.tolist(), [1, -1])

    def test_create_rejects_complex_into_real_kind(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.create(1j, kind=ElementKind.DOUBLE)

    def test_create_unwraps_single_sequence_and_numpy_scalars(self) -> None:
        self.assertEqual(nd.create([4, 5]).tolist(), [4, 5])
        a = nd.create(np.int64(3), np.float64(0.5))
        self.assertIs(a.kind, ElementKind.DOUBLE)

    def test_create_empty_defaults_to_double(self) -> None:
        a = nd.create()
        self.assertEqual(a.shape, (0,))
        self.assertIs(a.kind, ElementKind.DOUBLE)

    def test_from_nested_builds_nd_arrays(self) -> None:
        a = nd.from_nested([[1, 2], [3, 4]])
        self.assertEqual(a.shape, (2, 2))
        self.assertIs(a.kind, ElementKind.INT)
        np.testing.assert_array_equal(a.to_numpy(), [[1, 2], [3, 4]])

    def test_from_nested_rejects_ragged(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.from_nested([[1, 2], [3]])

    def test_from_nested_scalar_is_zero_dimensional(self) -> None:
        a = nd.from_nested(2.5)
        self.assertEqual(a.shape, ())
        self.assertEqual(a.item(), 2.5)

    def test_from_numpy_copies_by_default(self) -> None:
        src = np.array([1.0, 2.0])
        a = nd.from_numpy(src)
        src[0] = 99.0
        self.assertEqual(a.tolist(), [1.0, 2.0])
        self.assertIs(a.kind, ElementKind.DOUBLE)

    def test_from_numpy_without_copy_shares_memory(self) -> None:
        src = np.array([1.0, 2.0])
        a = nd.from_numpy(src, copy=False)
        src[0] = 99.0
        self.assertEqual(a[0], 99.0)

    def test_from_numpy_maps_dtypes(self) -> None:
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.int8)).kind, ElementKind.INT)
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.float32)).kind, ElementKind.DOUBLE)
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.uint32)).kind, ElementKind.LONG)
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.int32)).kind, ElementKind.INT)
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.uint64)).kind, ElementKind.LONG)
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.complex64)).kind, ElementKind.COMPLEX)
        self.assertIs(nd.from_numpy(np.zeros(2, dtype=np.bool_)).kind, ElementKind.BOOLEAN)

    def test_from_numpy_rejects_non_numeric_dtype(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.from_numpy(np.array(["a", "b"]))
        with self.assertRaises(TypeMismatchError):
            nd.from_numpy(np.array([object(), None]))


class TestConstantFactories(unittest.TestCase):
    def test_zeros_ones_full(self) -> None:
        z = nd.zeros((2, 3))
        self.assertEqual(z.shape, (2, 3))
        self.assertIs(z.kind, ElementKind.DOUBLE)
        self.assertFalse(z.any())

        o = nd.ones(3, ElementKind.INT)
        self.assertEqual(o.tolist(), [1, 1, 1])

        f = nd.full((2,), 7)
        self.assertIs(f.kind, ElementKind.INT)
        self.assertEqual(f.tolist(), [7, 7])

    def test_full_rejects_complex_into_real(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.full(2, 1j, ElementKind.DOUBLE)

    def test_eye(self) -> None:
        np.testing.assert_array_equal(nd.eye(3).to_numpy(), np.eye(3))
        with self.assertRaises(InvalidArgumentError):
            nd.eye(-1)

    def test_constructor_allocates_zeros(self) -> None:
        a = Array((2, 2), ElementKind.LONG)
        self.assertEqual(a.tolist(), [[0, 0], [0, 0]])
        self.assertFalse(a.is_view)

    def test_negative_extent_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.zeros((2, -1))


class TestProgressions(unittest.TestCase):
    def test_range_scenario(self) -> None:
        r = nd.range(0, 5, 1)
        self.assertIs(r.kind, ElementKind.INT)
        self.assertEqual(r.tolist(), [0, 1, 2, 3, 4])

    def test_range_single_argument_and_negative_step(self) -> None:
        self.assertEqual(nd.range(3).tolist(), [0, 1, 2])
        self.assertEqual(nd.range(5, 0, -2).tolist(), [5, 3, 1])

    def test_range_widens_to_long(self) -> None:
        r = nd.range(2**31 - 1, 2**31 + 1)
        self.assertIs(r.kind, ElementKind.LONG)
        self.assertEqual(r.tolist(), [2**31 - 1, 2**31])

    def test_range_empty(self) -> None:
        self.assertEqual(nd.range(3, 3).size, 0)

    def test_range_rejects_zero_step(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.range(0, 5, 0)

    def test_range_rejects_non_int(self) -> None:
        with self.assertRaises(TypeMismatchError):
            nd.range(0, 2.5)

    def test_linspace_scenario(self) -> None:
        l = nd.linspace(0.0, 1.0, 5)
        self.assertIs(l.kind, ElementKind.DOUBLE)
        np.testing.assert_allclose(l.to_numpy(), [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_linspace_single_sample_is_start(self) -> None:
        self.assertEqual(nd.linspace(2.0, 3.0, 1).tolist(), [2.0])

    def test_linspace_rejects_non_positive_count(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.linspace(0.0, 1.0, 0)

class TestBufferOwnership(unittest.TestCase):
    def test_factories_own_their_buffers(self) -> None:
        made = {
            "create": nd.create(1, 2, 3),
            "from_nested": nd.from_nested([[1, 2], [3, 4]]),
            "linspace": nd.linspace(0.0, 1.0, 5),
            "range": nd.range(0, 4),
            "zeros": nd.zeros((2, 2)),
            "eye": nd.eye(3),
            "from_numpy": nd.from_numpy(np.arange(4)),
        }
        for name, a in made.items():
            with self.subTest(factory=name):
                self.assertFalse(a.is_view)

    def test_from_numpy_without_copy_is_a_view(self) -> None:
        self.assertTrue(nd.from_numpy(np.arange(4), copy=False).is_view)
        converted = nd.from_numpy(np.arange(4), kind=ElementKind.DOUBLE, copy=False)
        self.assertFalse(converted.is_view)

    def test_computed_results_own_their_buffers(self) -> None:
        a = nd.from_nested([[1, 2], [3, 4]])
        self.assertFalse((a + 1).is_view)
        self.assertFalse(a.sort(axis=1).is_view)
        self.assertFalse(a.sum(axis=0).is_view)



if __name__ == "__main__":
    unittest.main()
