import unittest

from mathutils import Vector

from ..animation.filtering import remove_unneeded_keyframes
from ..core.utils import values_equal


class TestRemoveUnneededKeyframes(unittest.TestCase):
    def test_keeps_first_and_last_of_each_run(self):
        times = [0, 1, 2, 3, 4, 5, 6]
        values = [0, 1, 1, 1, 5, 5, 5]
        new_times, new_values = remove_unneeded_keyframes(times, values)
        self.assertEqual(list(new_times), [0, 1, 3, 4, 6])
        self.assertEqual(list(new_values), [0, 1, 1, 5, 5])

    def test_returns_inputs_when_nothing_is_redundant(self):
        times = [0.0, 1.0, 2.0]
        values = [1.0, 2.0, 1.0]
        new_times, new_values = remove_unneeded_keyframes(times, values)
        self.assertIs(new_times, times)
        self.assertIs(new_values, values)

    def test_single_keyframe(self):
        times = [0.0]
        values = [3.0]
        new_times, new_values = remove_unneeded_keyframes(times, values)
        self.assertIs(new_times, times)
        self.assertIs(new_values, values)

    def test_custom_equality_for_vectors(self):
        times = [0.0, 0.5, 1.0, 1.5]
        values = [Vector((1.0, 1.0, 1.0))] * 3 + [Vector((0.0, 0.0, 0.0))]
        new_times, new_values = remove_unneeded_keyframes(times, values, values_equal)
        self.assertEqual(new_times, [0.0, 1.0, 1.5])
        self.assertEqual(len(new_values), 3)

    def test_flattened_frames(self):
        times = [0.0, 1.0, 2.0, 3.0]
        values = [0.5, 0.25, 0.5, 0.25, 0.5, 0.25, 1.0, 0.0]
        new_times, new_values = remove_unneeded_keyframes(times, values)
        self.assertEqual(new_times, [0.0, 2.0, 3.0])
        self.assertEqual(new_values, [0.5, 0.25, 0.5, 0.25, 1.0, 0.0])

    def test_mismatched_lengths_are_left_alone(self):
        times = [0.0, 1.0, 2.0]
        values = [1.0, 1.0, 1.0, 1.0]
        with self.assertLogs("anim_recorder", level="WARNING"):
            new_times, new_values = remove_unneeded_keyframes(times, values)
        self.assertIs(new_times, times)
        self.assertIs(new_values, values)


if __name__ == "__main__":
    unittest.main()
