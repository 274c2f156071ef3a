"""
UI module for the Animation Recorder addon.

This module contains the UI panels and the scene properties.
"""

from .panels import (
    OBJECT_PT_AnimRecorder,
    OBJECT_PT_AnimRecorder_Tool,
)
from .properties import (
    AnimationRecorderSettings,
    get_recorder_settings,
    register_properties,
    unregister_properties,
)

__all__ = [
    # Panels
    "OBJECT_PT_AnimRecorder",
    "OBJECT_PT_AnimRecorder_Tool",
    # Properties
    "AnimationRecorderSettings",
    "get_recorder_settings",
    "register_properties",
    "unregister_properties",
]
