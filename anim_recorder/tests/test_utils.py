import unittest

from mathutils import Quaternion, Vector

from ..core.utils import (
    is_child_of,
    iter_hierarchy,
    lerp_unclamped,
    next_larger,
    next_larger_f32,
    next_smaller,
    next_smaller_f32,
    time_between,
    values_equal,
)
from .fakes import FakeObject


class TestFloatNeighbours(unittest.TestCase):
    def test_next_smaller_is_adjacent(self):
        below = next_smaller(1.0)
        self.assertLess(below, 1.0)
        self.assertEqual(next_larger(below), 1.0)

    def test_next_smaller_of_zero_is_negative(self):
        self.assertLess(next_smaller(0.0), 0.0)

    def test_next_smaller_f32(self):
        self.assertEqual(next_smaller_f32(1.0), 1.0 - 2.0 ** -24)
        self.assertEqual(next_smaller_f32(-1.0), -(1.0 + 2.0 ** -23))
        self.assertEqual(next_smaller_f32(0.0), -(2.0 ** -149))

    def test_next_larger_f32(self):
        self.assertEqual(next_larger_f32(1.0), 1.0 + 2.0 ** -23)
        self.assertEqual(next_larger_f32(0.0), 2.0 ** -149)


class TestTimeBetween(unittest.TestCase):
    def test_without_previous_time(self):
        self.assertEqual(time_between(None, 2.0), next_smaller(2.0))

    def test_right_before_current(self):
        self.assertEqual(time_between(1.0, 2.0), next_smaller(2.0))

    def test_no_room_in_between(self):
        self.assertIsNone(time_between(next_smaller(2.0), 2.0))


class TestValueHelpers(unittest.TestCase):
    def test_vectors_compare_exactly(self):
        self.assertTrue(values_equal(Vector((1.0, 2.0, 3.0)), Vector((1.0, 2.0, 3.0))))
        self.assertFalse(values_equal(Vector((1.0, 2.0, 3.0)), Vector((1.0, 2.0, 3.5))))

    def test_quaternions_compare_exactly(self):
        self.assertTrue(values_equal(Quaternion((1.0, 0.0, 0.0, 0.0)), Quaternion((1.0, 0.0, 0.0, 0.0))))

    def test_tuples_and_scalars(self):
        self.assertTrue(values_equal((0.5, 0.25), (0.5, 0.25)))
        self.assertFalse(values_equal((0.5, 0.25), (0.5,)))
        self.assertTrue(values_equal(True, True))
        self.assertFalse(values_equal(1.0, 2.0))

    def test_none(self):
        self.assertTrue(values_equal(None, None))
        self.assertFalse(values_equal(None, 0.0))

    def test_lerp_is_not_clamped(self):
        result = lerp_unclamped((0.0, 0.0, 0.0), (2.0, 2.0, 2.0), 1.5)
        self.assertEqual(tuple(result), (3.0, 3.0, 3.0))


class TestHierarchy(unittest.TestCase):
    def setUp(self):
        self.root = FakeObject("root")
        self.arm = FakeObject("arm", parent=self.root)
        self.hand = FakeObject("hand", parent=self.arm)
        self.leg = FakeObject("leg", parent=self.root)

    def test_iter_hierarchy_depth_first(self):
        names = [node.name for node in iter_hierarchy(self.root)]
        self.assertEqual(names, ["root", "arm", "hand", "leg"])

    def test_is_child_of(self):
        self.assertTrue(is_child_of(self.hand, self.root))
        self.assertTrue(is_child_of(self.root, self.root))
        self.assertFalse(is_child_of(self.root, self.arm))
        self.assertFalse(is_child_of(FakeObject("other"), self.root))


if __name__ == "__main__":
    unittest.main()
