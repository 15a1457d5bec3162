import unittest

import numpy as np

import keynd as nd
from keynd import ElementKind, InvalidArgumentError


class TestArraySort(unittest.TestCase):
    def test_default_sort_along_axis0(self) -> None:
        a = nd.from_nested([[3, 1], [1, 2], [2, 0]])
        y = a.sort()
        self.assertEqual(y.tolist(), [[1, 0], [2, 1], [3, 2]])
        self.assertIs(y.kind, ElementKind.INT)

    def test_sort_does_not_mutate_source(self) -> None:
        a = nd.create(3.0, 1.0, 2.0)
        y = a.sort()
        self.assertEqual(y.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(a.tolist(), [3.0, 1.0, 2.0])
        self.assertFalse(np.shares_memory(a.data, y.data))

    def test_sort_along_last_axis(self) -> None:
        a = nd.from_nested([[3, 1, 2], [9, 7, 8]])
        self.assertEqual(a.sort(axis=-1).tolist(), [[1, 2, 3], [7, 8, 9]])

    def test_custom_comparator_descending(self) -> None:
        a = nd.create(3, 1, 2)

        def descending(lane, i, j):
            return lane[j] - lane[i]

        self.assertEqual(a.sort(comparator=descending).tolist(), [3, 2, 1])

    def test_custom_comparator_is_stable(self) -> None:
        # Compare only by magnitude so -1 and 1 tie and keep their order.
        a = nd.create(1, -2, -1, 2, 0)

        def by_magnitude(lane, i, j):
            x, y = abs(lane[i]), abs(lane[j])
            return (x > y) - (x < y)

        self.assertEqual(a.sort(comparator=by_magnitude).tolist(), [0, 1, -1, -2, 2])

    def test_custom_comparator_sorts_every_lane(self) -> None:
        a = nd.from_nested([[1, 4], [3, 2]])

        def descending(lane, i, j):
            return lane[j] - lane[i]

        self.assertEqual(a.sort(axis=1, comparator=descending).tolist(), [[4, 1], [3, 2]])
        self.assertEqual(a.sort(axis=0, comparator=descending).tolist(), [[3, 4], [1, 2]])

    def test_sort_complex_and_boolean(self) -> None:
        c = nd.create(2 + 0j, 1 + 5j, 1 + 1j)
        self.assertEqual(c.sort().tolist(), [1 + 1j, 1 + 5j, 2 + 0j])
        b = nd.create(True, False, True)
        self.assertEqual(b.sort().tolist(), [False, True, True])

    def test_sort_empty_and_scalar(self) -> None:
        self.assertEqual(nd.create().sort().size, 0)
        s = nd.from_nested(3)
        self.assertEqual(s.sort().item(), 3)

    def test_sort_bad_axis(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            nd.create(1, 2).sort(axis=1)

class TestArrayArgsort(unittest.TestCase):
    def test_positions_of_sorted_order(self) -> None:
        a = nd.create(3.0, 1.0, 2.0)
        order = a.argsort()
        self.assertIs(order.kind, ElementKind.INT)
        self.assertEqual(order.tolist(), [1, 2, 0])
        self.assertEqual(a.take(order).tolist(), a.sort().tolist())

    def test_ties_keep_original_order(self) -> None:
        self.assertEqual(nd.create(2, 1, 2, 1).argsort().tolist(), [1, 3, 0, 2])

    def test_along_each_axis(self) -> None:
        a = nd.from_nested([[3, 1, 2], [0, 9, 5]])
        self.assertEqual(a.argsort(axis=1).tolist(), [[1, 2, 0], [0, 2, 1]])
        self.assertEqual(a.argsort(axis=0).tolist(), [[1, 0, 0], [0, 1, 1]])

    def test_with_comparator(self) -> None:
        def descending(lane, i, j):
            return lane[j] - lane[i]

        order = nd.create(3, 1, 2).argsort(comparator=descending)
        self.assertEqual(order.tolist(), [0, 2, 1])

    def test_empty_and_scalar(self) -> None:
        self.assertEqual(nd.zeros(0).argsort().shape, (0,))
        with self.assertRaises(InvalidArgumentError):
            nd.from_nested(1.0).argsort()



if __name__ == "__main__":
    unittest.main()
