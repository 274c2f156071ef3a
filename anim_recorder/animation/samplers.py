"""
Animation samplers: read one animatable property of a scene object.

A sampler is a stateless strategy. It finds the sub-target that owns the
property (the object itself, its shape keys, its material), reads the current
value and knows the curve name, interpolation and value equality of the
property. Samplers never modify the scene and can be called any number of
times per frame.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from mathutils import Quaternion, Vector

from ..core.constants import (
    BASE_COLOR_FACTOR,
    BASE_COLOR_INPUT,
    PRINCIPLED_BSDF_TYPE,
    REFERENCE_SHAPE_KEY,
    ROTATION,
    SCALE,
    TRANSLATION,
    VISIBILITY,
    WEIGHTS,
)
from ..core.types import InterpolationType, RecorderSettings
from ..core.utils import copy_value, values_equal
from .track import AnimationTrack, VisibilityTrack


class AnimationSampler:
    """Base class of all samplers.

    Subclasses set the class attributes and implement get_value. get_target
    returns None when the object has nothing to sample, get_value returns None
    when there is no value at this instant; either way nothing is recorded.
    """

    target_type: str = "OBJECT"
    value_type: type = object
    property_name: str = ""
    interpolation: InterpolationType = InterpolationType.LINEAR

    def get_target(self, node):
        return node

    def get_value(self, node, target):
        raise NotImplementedError

    def sample(self, node):
        target = self.get_target(node)
        if target is None:
            return None
        return self.get_value(node, target)

    def equals(self, a, b) -> bool:
        return values_equal(a, b)

    def start_track(self, node, time: float, log=None) -> AnimationTrack:
        return AnimationTrack(node, self, time, log=log)

    def __repr__(self):
        return f"{type(self).__name__}({self.property_name!r})"


class _TransformSampler(AnimationSampler):
    def __init__(self, use_world_space: Optional[Callable[[Any], bool]] = None):
        self.use_world_space = use_world_space or (lambda node: False)

    def _decompose(self, node) -> Tuple[Vector, Quaternion, Vector]:
        if self.use_world_space(node):
            return node.matrix_world.decompose()
        return node.matrix_local.decompose()


class TranslationSampler(_TransformSampler):
    value_type = Vector
    property_name = TRANSLATION

    def get_value(self, node, target):
        return self._decompose(target)[0]


class RotationSampler(_TransformSampler):
    value_type = Quaternion
    property_name = ROTATION

    def get_value(self, node, target):
        return self._decompose(target)[1]


class ScaleSampler(_TransformSampler):
    value_type = Vector
    property_name = SCALE

    def get_value(self, node, target):
        return self._decompose(target)[2]


class VisibilitySampler(AnimationSampler):
    """Whether the object is enabled in viewports."""

    value_type = bool
    property_name = VISIBILITY
    interpolation = InterpolationType.STEP

    def get_value(self, node, target):
        return not bool(getattr(target, "hide_viewport", False))

    def start_track(self, node, time: float, log=None) -> VisibilityTrack:
        return VisibilityTrack(node, self, time, log=log)


class BlendWeightSampler(AnimationSampler):
    """Shape key values of a mesh object, without the reference key."""

    target_type = "SHAPE_KEY"
    value_type = tuple
    property_name = WEIGHTS

    def get_target(self, node):
        data = getattr(node, "data", None)
        if data is None:
            return None
        return getattr(data, "shape_keys", None)

    @staticmethod
    def _is_reference(block, reference) -> bool:
        if reference is not None:
            return block == reference
        return block.name == REFERENCE_SHAPE_KEY

    def get_value(self, node, target):
        reference = getattr(target, "reference_key", None)
        weights = tuple(
            float(block.value)
            for block in target.key_blocks
            if not self._is_reference(block, reference)
        )
        if not weights:
            return None
        return weights


class BaseColorSampler(AnimationSampler):
    """Base color of the active material, as RGBA."""

    target_type = "MATERIAL"
    value_type = Vector
    property_name = BASE_COLOR_FACTOR

    def get_target(self, node):
        return getattr(node, "active_material", None)

    def get_value(self, node, target):
        node_tree = getattr(target, "node_tree", None)
        if getattr(target, "use_nodes", False) and node_tree is not None:
            for shader in node_tree.nodes:
                if shader.type != PRINCIPLED_BSDF_TYPE:
                    continue
                socket = shader.inputs.get(BASE_COLOR_INPUT)
                if socket is not None:
                    return Vector(tuple(socket.default_value))
        color = getattr(target, "diffuse_color", None)
        if color is None:
            return None
        return Vector(tuple(color))


class CustomPropertySampler(AnimationSampler):
    """Samples an ID custom property, e.g. ``obj["power"]``.

    Array properties are recorded as tuples, everything else is converted with
    value_type.

    A SamplerRegistry holds one sampler per (target_type, value_type), so two
    float properties registered with the default target_type replace each
    other. Give every additional property its own target_type::

        registry = SamplerRegistry([
            CustomPropertySampler("power"),
            CustomPropertySampler("speed", target_type="OBJECT_SPEED"),
        ])
    """

    def __init__(
        self,
        name: str,
        value_type: type = float,
        interpolation: InterpolationType = InterpolationType.LINEAR,
        target_type: str = "OBJECT",
    ):
        self.name = name
        self.value_type = value_type
        self.property_name = name
        self.interpolation = interpolation
        self.target_type = target_type

    def get_target(self, node):
        getter = getattr(node, "get", None)
        if getter is None or getter(self.name) is None:
            return None
        return node

    def get_value(self, node, target):
        raw = target.get(self.name)
        if raw is None:
            return None
        if hasattr(raw, "to_list"):
            raw = raw.to_list()
        if isinstance(raw, (list, tuple)):
            return tuple(raw)
        return self.value_type(copy_value(raw))


class SamplerRegistry:
    """Caller supplied samplers, at most one per (target type, value type) pair.

    Registering a second sampler for the same pair replaces the first.
    """

    def __init__(self, samplers=()):
        self._samplers: Dict[Tuple[str, type], AnimationSampler] = {}
        for sampler in samplers:
            self.register(sampler)

    def register(self, sampler: AnimationSampler) -> "SamplerRegistry":
        self._samplers[(sampler.target_type, sampler.value_type)] = sampler
        return self

    def get(self, target_type: str, value_type: type) -> Optional[AnimationSampler]:
        return self._samplers.get((target_type, value_type))

    def __iter__(self) -> Iterator[AnimationSampler]:
        return iter(self._samplers.values())

    def __len__(self):
        return len(self._samplers)


class AnimationSamplers:
    """Samplers resolved once for a recording session.

    Visibility is kept apart from the other samplers. It is sampled first and
    merged into the scale curve on export.
    """

    def __init__(self, visibility_sampler: Optional[VisibilitySampler], samplers: List[AnimationSampler]):
        self.visibility_sampler = visibility_sampler
        self.samplers = list(samplers)

    @classmethod
    def from_settings(cls, settings: RecorderSettings, registry: Optional[SamplerRegistry] = None):
        samplers: List[AnimationSampler] = [
            TranslationSampler(settings.use_world_space),
            RotationSampler(settings.use_world_space),
            ScaleSampler(settings.use_world_space),
        ]
        if settings.record_blend_shapes:
            samplers.append(BlendWeightSampler())
        if settings.record_base_color:
            samplers.append(BaseColorSampler())
        if registry is not None:
            samplers.extend(registry)
        visibility = VisibilitySampler() if settings.record_visibility else None
        return cls(visibility, samplers)

    def __iter__(self) -> Iterator[AnimationSampler]:
        return iter(self.samplers)
