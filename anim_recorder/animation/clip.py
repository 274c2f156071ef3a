"""
In-memory animation clip receiving the finished curves of a recording.
"""

from typing import Any, Callable, Dict, List, Optional

from mathutils import Quaternion

from ..core.constants import DEFAULT_ANIMATION_NAME
from ..core.types import AnimationCurve, InterpolationType


def _object_name(obj) -> str:
    return getattr(obj, "name", None) or str(obj)


def _to_json_value(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, Quaternion):
        # glTF stores rotations as (x, y, z, w)
        return [float(value.x), float(value.y), float(value.z), float(value.w)]
    try:
        return [float(component) for component in value]
    except TypeError:
        return value


class AnimationClip:
    """Collects curves handed over by a Recorder.

    Implements the sink interface of Recorder.export, add_animation_data.
    A clip holds one curve per object and property, so exporting the same
    recording into it again leaves it unchanged.
    """

    def __init__(self, name: str = DEFAULT_ANIMATION_NAME, node_name: Optional[Callable[[Any], str]] = None):
        self.name = name
        self.curves: List[AnimationCurve] = []
        self._node_name = node_name or _object_name

    def add_animation_data(
        self,
        animated_object,
        property_name: str,
        curve_container,
        interpolation: InterpolationType,
        times,
        values,
    ):
        """Store a curve, replacing any curve of the same object and property."""
        curve = AnimationCurve(animated_object, property_name, interpolation, list(times), list(values))
        for index, existing in enumerate(self.curves):
            if existing.animated_object == animated_object and existing.property_name == property_name:
                self.curves[index] = curve
                return
        self.curves.append(curve)

    def __len__(self):
        return len(self.curves)

    def __iter__(self):
        return iter(self.curves)

    @property
    def duration(self) -> float:
        return max((curve.times[-1] for curve in self.curves if curve.times), default=0.0)

    @property
    def keyframe_count(self) -> int:
        return sum(len(curve.times) for curve in self.curves)

    def curves_for(self, animated_object) -> List[AnimationCurve]:
        return [curve for curve in self.curves if curve.animated_object == animated_object]

    def curve(self, animated_object, property_name: str) -> Optional[AnimationCurve]:
        for curve in self.curves_for(animated_object):
            if curve.property_name == property_name:
                return curve
        return None

    def to_dict(self) -> Dict[str, Any]:
        """glTF-like animation structure, ready for json.dumps."""
        channels = []
        samplers = []
        for index, curve in enumerate(self.curves):
            samplers.append({
                "input": [float(t) for t in curve.times],
                "output": [_to_json_value(v) for v in curve.values],
                "interpolation": curve.interpolation.value,
            })
            channels.append({
                "sampler": index,
                "target": {
                    "node": self._node_name(curve.animated_object),
                    "path": curve.property_name,
                },
            })
        return {
            "name": self.name,
            "duration": self.duration,
            "channels": channels,
            "samplers": samplers,
        }
