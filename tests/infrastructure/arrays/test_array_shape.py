import unittest

import numpy as np

import keynd as nd
from keynd import (
    Array,
    ElementKind,
    IndexOutOfRangeError,
    InvalidArgumentError,
    ShapeMismatchError,
    TypeMismatchError,
)


class TestArrayReshape(unittest.TestCase):
    def test_reshape_round_trip(self) -> None:
        a = nd.range(0, 12)
        b = a.reshape(3, 4)
        self.assertEqual(b.shape, (3, 4))
        self.assertTrue(b.reshape(12).equals(a))
        self.assertTrue(b.reshape((2, 6)).reshape(a.shape).equals(a))

    def test_reshape_of_contiguous_array_is_a_view(self) -> None:
        a = nd.range(0, 6)
        b = a.reshape(2, 3)
        self.assertTrue(b.is_view)
        b[0, 0] = 42
        self.assertEqual(a[0], 42)

    def test_reshape_of_non_contiguous_view_copies(self) -> None:
        t = nd.range(0, 6).reshape(2, 3).T
        flat = t.reshape(6)
        self.assertEqual(flat.tolist(), [0, 3, 1, 4, 2, 5])
        self.assertFalse(flat.is_view)
        self.assertFalse(np.shares_memory(flat.data, t.data))

    def test_reshape_infers_one_extent(self) -> None:
        self.assertEqual(nd.range(0, 12).reshape(-1, 3).shape, (4, 3))
        self.assertEqual(nd.range(0, 12).reshape(2, -1, 2).shape, (2, 3, 2))

    def test_reshape_errors(self) -> None:
        a = nd.range(0, 6)
        with self.assertRaises(ShapeMismatchError):
            a.reshape(4, 2)
        with self.assertRaises(ShapeMismatchError):
            a.reshape(-1, 4)
        with self.assertRaises(InvalidArgumentError):
            a.reshape(-1, -1)
        with self.assertRaises(InvalidArgumentError):
            a.reshape(-2, -3)

    def test_reshape_of_copy_is_not_a_view(self) -> None:
        a = nd.from_nested([[1, 2], [3, 4]])
        flat = a.T.reshape(4)
        self.assertFalse(flat.is_view)
        flat[0] = 99
        self.assertEqual(a[0, 0], 1)

    def test_ravel(self) -> None:
        a = nd.from_nested([[1, 2], [3, 4]])
        self.assertEqual(a.ravel().tolist(), [1, 2, 3, 4])
        self.assertEqual(a.T.ravel().tolist(), [1, 3, 2, 4])


class TestArrayTranspose(unittest.TestCase):
    def test_transpose_round_trip(self) -> None:
        a = nd.from_numpy(np.arange(6.0).reshape(2, 3))
        t = a.transpose()
        self.assertEqual(t.shape, (3, 2))
        self.assertTrue(t.is_view)
        self.assertTrue(t.transpose().equals(a))
        self.assertEqual(t.transpose().shape, a.shape)

    def test_transpose_shares_buffer(self) -> None:
        a = nd.zeros((2, 3))
        a.T[2, 1] = 5.0
        self.assertEqual(a[1, 2], 5.0)

    def test_permuted_axes(self) -> None:
        ref = np.arange(24).reshape(2, 3, 4)
        a = nd.from_numpy(ref)
        np.testing.assert_array_equal(a.transpose(1, 2, 0).to_numpy(), ref.transpose(1, 2, 0))
        np.testing.assert_array_equal(a.transpose((2, 0, 1)).to_numpy(), ref.transpose(2, 0, 1))
        np.testing.assert_array_equal(a.transpose(-1, 0, 1).to_numpy(), ref.transpose(2, 0, 1))

    def test_invalid_permutation(self) -> None:
        a = nd.zeros((2, 3, 4))
        with self.assertRaises(InvalidArgumentError):
            a.transpose(0, 0, 1)
        with self.assertRaises(InvalidArgumentError):
            a.transpose(0, 1)


class TestArrayStacking(unittest.TestCase):
    def test_hstack_then_slice_recovers_left_operand(self) -> None:
        a = nd.from_nested([[1, 2], [3, 4]])
        b = nd.from_nested([[5], [6]])
        h = nd.hstack(a, b)
        self.assertEqual(h.tolist(), [[1, 2, 5], [3, 4, 6]])
        self.assertTrue(h[:, : a.shape[1]].equals(a))

    def test_hstack_one_dimensional_joins_end_to_end(self) -> None:
        self.assertEqual(nd.hstack(nd.create(1, 2), nd.create(3)).tolist(), [1, 2, 3])

    def test_vstack(self) -> None:
        v = nd.vstack(nd.create(1, 2), nd.create(3, 4))
        self.assertEqual(v.tolist(), [[1, 2], [3, 4]])
        w = nd.vstack([v, nd.create(5, 6)])
        self.assertEqual(w.shape, (3, 2))

    def test_stacking_promotes_kinds(self) -> None:
        h = Array.hstack(nd.create(1, 2), nd.create(0.5))
        self.assertIs(h.kind, ElementKind.DOUBLE)
        self.assertEqual(h.tolist(), [1.0, 2.0, 0.5])

    def test_stacking_mismatched_extents(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            nd.hstack(nd.zeros((2, 2)), nd.zeros((3, 1)))
        with self.assertRaises(ShapeMismatchError):
            nd.vstack(nd.zeros((2, 2)), nd.zeros((1, 3)))

    def test_stacking_requires_inputs(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.hstack()
        with self.assertRaises(InvalidArgumentError):
            nd.concatenate([])

    def test_concatenate_along_axis(self) -> None:
        ref = [np.arange(6).reshape(2, 3), np.arange(3).reshape(1, 3)]
        c = nd.concatenate([nd.from_numpy(x) for x in ref], axis=0)
        np.testing.assert_array_equal(c.to_numpy(), np.concatenate(ref, axis=0))
        with self.assertRaises(InvalidArgumentError):
            nd.concatenate([nd.zeros(2)], axis=1)

    def test_concatenate_mismatched_ndim(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            nd.concatenate([nd.zeros(2), nd.zeros((1, 2))])


class TestArraySplit(unittest.TestCase):
    def test_split_returns_views(self) -> None:
        a = nd.range(0, 6).reshape(2, 3)
        parts = a.split(3, axis=1)
        self.assertEqual(len(parts), 3)
        self.assertEqual(parts[1].tolist(), [[1], [4]])
        parts[0][0, 0] = 100
        self.assertEqual(a[0, 0], 100)

    def test_split_round_trips_with_concatenate(self) -> None:
        a = nd.range(0, 8)
        self.assertTrue(nd.concatenate(nd.split(a, 4)).equals(a))

    def test_split_must_divide_extent(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.range(0, 5).split(2)
        with self.assertRaises(InvalidArgumentError):
            nd.range(0, 4).split(0)
    def test_hsplit_and_vsplit(self) -> None:
        m = nd.range(0, 8).reshape(2, 4)
        left, right = m.hsplit(2)
        self.assertEqual(left.tolist(), [[0, 1], [4, 5]])
        self.assertEqual(right.tolist(), [[2, 3], [6, 7]])
        top, bottom = nd.vsplit(m, 2)
        self.assertEqual(top.tolist(), [[0, 1, 2, 3]])
        self.assertTrue(bottom.is_view)
        self.assertEqual([p.tolist() for p in nd.hsplit(nd.range(0, 4), 2)], [[0, 1], [2, 3]])
        with self.assertRaises(InvalidArgumentError):
            nd.range(0, 4).vsplit(2)


class TestArrayTakeAndRepeat(unittest.TestCase):
    def test_take_flat_positions(self) -> None:
        a = nd.from_nested([[10, 20], [30, 40]])
        y = a.take([3, 0, -1])
        self.assertIs(y.kind, ElementKind.INT)
        self.assertEqual(y.tolist(), [40, 10, 40])
        self.assertEqual(a.take([[0, 1], [2, 3]]).tolist(), [[10, 20], [30, 40]])

    def test_take_along_axis_is_a_copy(self) -> None:
        a = nd.from_nested([[1, 2, 3], [4, 5, 6]])
        cols = a.take([2, 0], axis=1)
        self.assertEqual(cols.tolist(), [[3, 1], [6, 4]])
        self.assertFalse(cols.is_view)
        cols[0, 0] = 99
        self.assertEqual(a[0, 2], 3)

    def test_take_errors(self) -> None:
        a = nd.create(1, 2, 3)
        with self.assertRaises(IndexOutOfRangeError):
            a.take([3])
        with self.assertRaises(TypeMismatchError):
            a.take([0.5])
        with self.assertRaises(InvalidArgumentError):
            a.take([0], axis=1)

    def test_repeat(self) -> None:
        self.assertEqual(nd.create(1, 2).repeat(2).tolist(), [1, 1, 2, 2])
        m = nd.from_nested([[1, 2], [3, 4]])
        self.assertEqual(m.repeat(2, axis=0).tolist(), [[1, 2], [1, 2], [3, 4], [3, 4]])
        self.assertEqual(m.repeat(1).tolist(), [1, 2, 3, 4])
        self.assertEqual(m.repeat(0).shape, (0,))
        with self.assertRaises(InvalidArgumentError):
            m.repeat(-1)


class TestArrayDiag(unittest.TestCase):
    def test_vector_builds_diagonal_matrix(self) -> None:
        d = nd.create(1, 2, 3).diag()
        self.assertIs(d.kind, ElementKind.INT)
        self.assertEqual(d.tolist(), [[1, 0, 0], [0, 2, 0], [0, 0, 3]])
        self.assertFalse(d.is_view)

    def test_matrix_diagonal_is_a_writable_view(self) -> None:
        m = nd.range(0, 6).reshape(2, 3)
        d = m.diag()
        self.assertEqual(d.tolist(), [0, 4])
        self.assertTrue(d.is_view)
        d.assign(-1)
        self.assertEqual(m.tolist(), [[-1, 1, 2], [3, -1, 5]])

    def test_diagonal_of_transposed_view(self) -> None:
        m = nd.from_nested([[1, 2], [3, 4], [5, 6]]).T
        self.assertEqual(m.diag().tolist(), [1, 4])

    def test_other_ranks_are_rejected(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.zeros((2, 2, 2)).diag()



if __name__ == "__main__":
    unittest.main()
