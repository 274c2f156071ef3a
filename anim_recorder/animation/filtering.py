"""
Removal of redundant keyframes from finished curves.
"""

import logging
import operator
from typing import Any, Callable, List, Sequence, Tuple

logger = logging.getLogger(__name__)


def _find_redundant_indices(values: Sequence[Any], equals: Callable[[Any, Any], bool]) -> List[int]:
    """Indices of values identical to both of their neighbours."""
    redundant = []
    last_equals = False
    # one comparison per step, re-using the previous result
    for i in range(len(values) - 1):
        next_equals = equals(values[i], values[i + 1])
        if last_equals and next_equals:
            redundant.append(i)
        last_equals = next_equals
    return redundant


def _without_indices(items: Sequence[Any], indices: List[int]) -> List[Any]:
    skip = set(indices)
    return [item for i, item in enumerate(items) if i not in skip]


def remove_unneeded_keyframes(
    times: Sequence[float],
    values: Sequence[Any],
    equals: Callable[[Any, Any], bool] = operator.eq,
) -> Tuple[Sequence[float], Sequence[Any]]:
    """
    Remove keyframes whose value is identical to the keyframes before and after them.

    The first and last keyframe of every run of identical values are kept, so
    instantaneous changes survive. The inputs are returned as they are when
    nothing can be removed.

    values normally has one entry per time. If it has a whole multiple of that,
    it is read as flattened per-frame arrays (e.g. blend shape weights) and
    whole frames are removed. Any other length is returned unchanged.
    """
    if len(times) <= 1:
        return times, values

    if len(values) == len(times):
        redundant = _find_redundant_indices(values, equals)
        if not redundant:
            return times, values
        return _without_indices(times, redundant), _without_indices(values, redundant)

    if len(values) % len(times) != 0:
        logger.warning(
            "Cannot simplify keyframes: %d values do not match %d times",
            len(values), len(times),
        )
        return times, values

    width = len(values) // len(times)
    frames = [tuple(values[i * width:(i + 1) * width]) for i in range(len(times))]
    redundant = _find_redundant_indices(frames, equals)
    if not redundant:
        return times, values

    reduced_frames = _without_indices(frames, redundant)
    flattened = [value for frame in reduced_frames for value in frame]
    return _without_indices(times, redundant), flattened
