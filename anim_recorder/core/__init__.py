"""
Core module for the Animation Recorder addon.

This module contains shared utilities, constants, and data structures
used throughout the addon.
"""

from .constants import (
    TRANSLATION, ROTATION, SCALE, WEIGHTS, VISIBILITY, BASE_COLOR_FACTOR,
    DEFAULT_ANIMATION_NAME, SCALE_ONE, SCALE_ZERO,
)
from .utils import *
from .types import *

__all__ = [
    # Constants
    'TRANSLATION', 'ROTATION', 'SCALE', 'WEIGHTS', 'VISIBILITY',
    'BASE_COLOR_FACTOR', 'DEFAULT_ANIMATION_NAME', 'SCALE_ONE', 'SCALE_ZERO',

    # Utilities
    'TIME_EPSILON', 'next_smaller', 'next_larger', 'next_smaller_f32', 'next_larger_f32',
    'nearly_equal', 'time_between', 'copy_value', 'values_equal', 'lerp_unclamped',
    'zero_scale', 'one_scale', 'iter_hierarchy', 'is_child_of', 'get_scene_fps',
    'get_scene_time',

    # Types
    'InterpolationType', 'RecorderSettings', 'MergedScaleCurve', 'AnimationCurve',
    'PostAnimationData', 'Bounds', 'PostExportArgs',
]
