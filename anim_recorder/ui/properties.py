"""
Scene properties and property registration for the addon.
"""

import bpy
from bpy.props import (
    BoolProperty,
    PointerProperty,
    StringProperty,
)
from bpy.types import PropertyGroup

from ..core.constants import DEFAULT_ANIMATION_NAME
from ..core.types import RecorderSettings


class AnimationRecorderSettings(PropertyGroup):
    root_object: PointerProperty(
        type=bpy.types.Object,
        name="Root",
        description="Object recorded together with all of its children. Uses the active object when empty",
    )

    animation_name: StringProperty(
        name="Animation Name",
        description="Name of the recorded animation",
        default=DEFAULT_ANIMATION_NAME,
    )

    record_visibility: BoolProperty(
        name="Record Visibility",
        description=(
            "Record viewport visibility. Hidden objects are exported with a scale of zero, "
            "since the exported format has no visibility channel"
        ),
        default=False,
    )

    record_blend_shapes: BoolProperty(
        name="Record Shape Keys",
        description="Record shape key values of meshes as blend shape weights",
        default=True,
    )

    record_base_color: BoolProperty(
        name="Record Base Color",
        description="Record the base color of the active material",
        default=False,
    )

    world_space: BoolProperty(
        name="World Space",
        description="Record world space transforms instead of transforms relative to the parent",
        default=False,
    )

    remove_redundant_keyframes: BoolProperty(
        name="Remove Redundant Keyframes",
        description="Drop keyframes that are identical to the keyframes before and after them",
        default=True,
    )

    play_on_start: BoolProperty(
        name="Play on Start",
        description="Start animation playback when the recording starts",
        default=True,
    )


def get_recorder_settings(scene):
    """Build the recorder configuration from the scene settings"""
    settings = scene.anim_recorder_settings
    world_space = settings.world_space
    return RecorderSettings(
        record_visibility=settings.record_visibility,
        record_blend_shapes=settings.record_blend_shapes,
        record_base_color=settings.record_base_color,
        use_world_space=lambda node: world_space,
        remove_redundant_keyframes=settings.remove_redundant_keyframes,
        animation_name=settings.animation_name or DEFAULT_ANIMATION_NAME,
    )


def register_properties():
    bpy.utils.register_class(AnimationRecorderSettings)
    bpy.types.Scene.anim_recorder_settings = bpy.props.PointerProperty(
        type=AnimationRecorderSettings,
        name="Animation Recorder Settings",
    )


def unregister_properties():
    if hasattr(bpy.types.Scene, "anim_recorder_settings"):
        del bpy.types.Scene.anim_recorder_settings
    bpy.utils.unregister_class(AnimationRecorderSettings)
