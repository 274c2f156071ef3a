"""
Type definitions and data structures for the Animation Recorder addon.
"""

import enum
import logging
from typing import Any, Callable, List, Optional, Tuple
from dataclasses import dataclass, field

from .constants import DEFAULT_ANIMATION_NAME


class InterpolationType(enum.Enum):
    """Interpolation modes of a finished animation curve."""
    LINEAR = "LINEAR"
    STEP = "STEP"
    CUBICSPLINE = "CUBICSPLINE"


def _local_space(node) -> bool:
    return False


@dataclass
class RecorderSettings:
    """Configuration handed to a Recorder when it is constructed."""
    record_visibility: bool = False
    record_blend_shapes: bool = True
    record_base_color: bool = False
    # decides per node whether transforms are sampled in world space
    use_world_space: Callable[[Any], bool] = _local_space
    remove_redundant_keyframes: bool = True
    animation_name: str = DEFAULT_ANIMATION_NAME
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("anim_recorder")
    )


@dataclass
class MergedScaleCurve:
    """Scale curve with the visibility track folded in."""
    times: List[float]
    scales: List[Any]
    interpolation: InterpolationType


@dataclass
class AnimationCurve:
    """A finished curve for one (object, property) pair."""
    animated_object: Any
    property_name: str
    interpolation: InterpolationType
    times: List[float]
    values: List[Any]


@dataclass
class PostAnimationData:
    """Copy of a track's data handed to observers before it is added to the clip.

    Observers may replace ``times`` and ``values``; the recorded samples are
    never touched.
    """
    animated_object: Any
    property_name: str
    times: List[float]
    values: List[Any]


@dataclass
class Bounds:
    """Axis aligned bounds of the recorded translations."""
    minimum: Tuple[float, float, float]
    maximum: Tuple[float, float, float]

    @classmethod
    def from_point(cls, point) -> "Bounds":
        p = (float(point[0]), float(point[1]), float(point[2]))
        return cls(p, p)

    def encapsulate(self, point):
        self.minimum = tuple(min(a, float(b)) for a, b in zip(self.minimum, point))
        self.maximum = tuple(max(a, float(b)) for a, b in zip(self.maximum, point))

    @property
    def center(self) -> Tuple[float, float, float]:
        return tuple((a + b) / 2.0 for a, b in zip(self.minimum, self.maximum))

    @property
    def size(self) -> Tuple[float, float, float]:
        return tuple(b - a for a, b in zip(self.minimum, self.maximum))


@dataclass
class PostExportArgs:
    """Handed to post export observers once every curve was added."""
    translation_bounds: Optional[Bounds]
    clip: Any
