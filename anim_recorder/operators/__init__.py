"""
Operators module for the Animation Recorder addon.

This module contains all Blender operators (actions) for the addon.
"""

from .recording_ops import (
    OBJECT_OT_StartRecording,
    OBJECT_OT_StopRecording,
    OBJECT_OT_ExportRecording,
    on_frame_change,
    stop_recording,
)
from .test_ops import (
    OBJECT_OT_RunTests,
)

__all__ = [
    # Recording operators
    "OBJECT_OT_StartRecording",
    "OBJECT_OT_StopRecording",
    "OBJECT_OT_ExportRecording",
    "on_frame_change",
    "stop_recording",
    # Test operators
    "OBJECT_OT_RunTests",
]
