import unittest

import numpy as np

from array_ import Array, InvalidCapacityError


class TestArray(unittest.TestCase):
    def test_insert(self):
        array = Array(3)
        array.insert(7)
        array.insert(-2)
        self.assertEqual(array.length(), 2)
        self.assertEqual(array.copy(active_only=True).tolist(), [7, -2])

    def test_resize_doubles_and_copies(self):
        array = Array(2)
        for value in [1, 2, 3]:
            array.insert(value)
        self.assertEqual(array.size, 4)
        self.assertEqual(len(array.elements), 4)
        self.assertEqual(array.copy(active_only=True).tolist(), [1, 2, 3])

    def test_swap(self):
        array = Array(4)
        for value in [1, 2, 3]:
            array.insert(value)
        array.swap(0, 2)
        self.assertEqual(array.copy(active_only=True).tolist(), [3, 2, 1])

    def test_remove_last_keeps_stale_value(self):
        array = Array(2)
        array.insert(5)
        array.insert(6)
        array.remove_last()
        self.assertEqual(array.length(), 1)
        self.assertEqual(array.copy(active_only=True).tolist(), [5])
        self.assertEqual(array.copy().tolist(), [5, 6])

    def test_remove_last_on_empty(self):
        array = Array(2)
        array.remove_last()
        self.assertEqual(array.length(), 0)

    def test_delete_all(self):
        array = Array(2)
        array.insert(1)
        array.delete_all()
        self.assertEqual(array.length(), 0)
        self.assertEqual(array.size, 2)

    def test_copy_is_independent(self):
        array = Array(2)
        array.insert(1)
        copy = array.copy()
        copy[0] = 100
        self.assertEqual(array.copy().tolist(), [1, 0])

    def test_dtype(self):
        array = Array(2, np.int8)
        self.assertEqual(array.elements.dtype, np.int8)
        with self.assertRaises(OverflowError):
            array.insert(128)
        with self.assertRaises(TypeError):
            Array(2, np.float64)

    def test_invalid_capacity(self):
        for size in [0, -1, 1.0, "2"]:
            with self.assertRaises(InvalidCapacityError):
                Array(size)

    def test_accepts_numpy_integer_capacity(self):
        self.assertEqual(Array(np.int32(3)).size, 3)


if __name__ == "__main__":
    unittest.main()
