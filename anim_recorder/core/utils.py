"""
Utility functions for the Animation Recorder addon.

Float neighbour arithmetic, value helpers shared by the samplers, tracks and
the visibility merge, and hierarchy helpers for the recorded objects.
"""

import math
import struct
from mathutils import Vector
from .constants import SCALE_ONE, SCALE_ZERO


# Smallest positive double; two times closer than this are the same time
TIME_EPSILON = math.ulp(0.0)


# Float neighbour utilities
def next_smaller(value):
    """Return the largest double strictly less than value."""
    return math.nextafter(value, -math.inf)


def next_larger(value):
    """Return the smallest double strictly greater than value."""
    return math.nextafter(value, math.inf)


def _f32_bits(value):
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _f32_from_bits(bits):
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def next_smaller_f32(value):
    """Return the largest single precision float below value, after rounding value to single precision."""
    value = _f32_from_bits(_f32_bits(value))
    if math.isnan(value) or value == -math.inf:
        return value
    if value == 0.0:
        # smallest negative denormal
        return _f32_from_bits(0x80000001)
    bits = _f32_bits(value)
    if value > 0:
        return _f32_from_bits(bits - 1)
    return _f32_from_bits(bits + 1)


def next_larger_f32(value):
    """Return the smallest single precision float strictly greater than value."""
    return -next_smaller_f32(-value)


def nearly_equal(a, b, epsilon=TIME_EPSILON):
    return abs(a - b) < epsilon


def time_between(previous, current):
    """Largest usable time strictly before current and strictly after previous.

    Returns None when no representable value lies in between.
    """
    candidate = next_smaller(current)
    if previous is None or candidate > previous:
        return candidate
    halfway = previous + (current - previous) / 2.0
    if previous < halfway < current:
        return halfway
    return None


# Value utilities
def copy_value(value):
    """Detach a value read from Blender data from its owner."""
    if hasattr(value, "copy"):
        return value.copy()
    return value


def values_equal(a, b):
    """Exact equality; vectors, quaternions and colors compare component-wise."""
    if a is None or b is None:
        return a is b
    if isinstance(a, (bool, int, float, str)) or isinstance(b, (bool, int, float, str)):
        return a == b
    try:
        return tuple(a) == tuple(b)
    except TypeError:
        return a == b


def lerp_unclamped(a, b, factor):
    """Linear interpolation between two vectors without clamping factor."""
    return Vector(tuple(x + (y - x) * factor for x, y in zip(a, b)))


def zero_scale():
    return Vector(SCALE_ZERO)


def one_scale():
    return Vector(SCALE_ONE)


# Hierarchy utilities
def iter_hierarchy(root):
    """Yield root and all of its descendants, depth first."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        children = list(getattr(node, "children", ()) or ())
        stack.extend(reversed(children))


def is_child_of(node, root):
    """True if node is root or is parented to it, directly or indirectly."""
    current = node
    while current is not None:
        if current == root:
            return True
        current = getattr(current, "parent", None)
    return False


def get_scene_fps(scene):
    """Get the frames per second of a scene"""
    return scene.render.fps / scene.render.fps_base


def get_scene_time(scene):
    """Current frame of a scene in seconds, including subframes"""
    frame = scene.frame_current + getattr(scene, "frame_subframe", 0.0)
    return frame / get_scene_fps(scene)
