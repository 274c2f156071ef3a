"""
Recording operators: start and stop a recording of the animation playback and
write the last recorded clip to a JSON file.
"""

import json

import bpy
from bpy.types import Operator
from bpy.props import StringProperty
from bpy_extras.io_utils import ExportHelper

from ..animation.clip import AnimationClip
from ..animation.recording import Recorder
from ..core.utils import get_scene_fps, get_scene_time
from ..ui.properties import get_recorder_settings


# state shared by the operators and the frame change handler
_recorder = None
_last_clip = None


def get_recorder():
    return _recorder


def get_last_clip():
    return _last_clip


def is_recording():
    return _recorder is not None and _recorder.is_recording


def _recording_root(context):
    settings = context.scene.anim_recorder_settings
    if settings.root_object is not None:
        return settings.root_object
    return context.view_layer.objects.active


def on_frame_change(scene, depsgraph=None):
    """Sample the recorded hierarchy after every frame change during playback."""
    if not is_recording():
        return
    _recorder.update(get_scene_time(scene))


def stop_recording():
    """Stop the current recording, if any, and keep its clip for export."""
    global _recorder, _last_clip

    if _recorder is None:
        return None
    recorder = _recorder
    _recorder = None

    clip = recorder.collect_animation()
    _last_clip = clip
    return clip


class OBJECT_OT_StartRecording(Operator):
    bl_label = "Start Recording"
    bl_idname = "object.animrec_start"
    bl_description = "Record the active object and its children while the animation plays"

    @classmethod
    def poll(cls, context):
        if is_recording():
            return False
        settings = context.scene.anim_recorder_settings
        return settings.root_object is not None or context.view_layer.objects.active is not None

    def execute(self, context):
        global _recorder

        root = _recording_root(context)
        if root is None:
            self.report({"ERROR"}, "No object to record")
            return {"CANCELLED"}

        try:
            recorder = Recorder(root, get_recorder_settings(context.scene))
            recorder.start(get_scene_time(context.scene))
        except Exception as e:
            self.report({"ERROR"}, f"Error starting the recording: {str(e)}")
            return {"CANCELLED"}

        _recorder = recorder
        print(f"Animation Recorder: recording '{root.name}' ({len(recorder.animation_data)} objects)")

        if context.scene.anim_recorder_settings.play_on_start and not context.screen.is_animation_playing:
            bpy.ops.screen.animation_play()

        self.report({"INFO"}, f"Recording {root.name}")
        return {"FINISHED"}


class OBJECT_OT_StopRecording(Operator):
    bl_label = "Stop Recording"
    bl_idname = "object.animrec_stop"
    bl_description = "Stop the current recording"

    @classmethod
    def poll(cls, context):
        return is_recording()

    def execute(self, context):
        try:
            if context.screen.is_animation_playing:
                bpy.ops.screen.animation_cancel(restore_frame=False)
            clip = stop_recording()
        except Exception as e:
            self.report({"ERROR"}, f"Error stopping the recording: {str(e)}")
            return {"CANCELLED"}

        if clip is None:
            self.report({"WARNING"}, "Nothing was recorded")
            return {"CANCELLED"}

        print(f"Animation Recorder: {len(clip)} curves, {clip.keyframe_count} keyframes, {clip.duration:.2f} seconds")
        self.report(
            {"INFO"},
            f"Recorded {len(clip)} curves ({clip.keyframe_count} keyframes, {clip.duration:.2f} seconds)",
        )
        return {"FINISHED"}


class OBJECT_OT_ExportRecording(Operator, ExportHelper):
    bl_label = "Export Recording"
    bl_idname = "object.animrec_export"
    bl_description = "Write the last recording to a JSON file"

    # ExportHelper mixin class uses this
    filename_ext = ".json"

    filter_glob: StringProperty(
        default="*.json",
        options={'HIDDEN'},
        maxlen=255,  # Max internal buffer length, longer would be clamped.
    )

    @classmethod
    def poll(cls, context):
        return _last_clip is not None and len(_last_clip) > 0

    def execute(self, context):
        clip: AnimationClip = _last_clip
        try:
            data = clip.to_dict()
            data["fps"] = get_scene_fps(context.scene)

            filepath = self.filepath
            with open(filepath, 'w', encoding='utf-8') as file:
                json.dump(data, file, indent=2)
        except Exception as e:
            self.report({"ERROR"}, f"Error during export: {str(e)}")
            return {"CANCELLED"}

        self.report(
            {"INFO"},
            f"Recording exported to {filepath} ({clip.keyframe_count} keyframes, {clip.duration:.2f} seconds)."
        )
        return {"FINISHED"}
