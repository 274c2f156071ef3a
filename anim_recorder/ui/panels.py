"""
UI panels for the Animation Recorder addon.
"""

import bpy


class OBJECT_PT_AnimRecorder(bpy.types.Panel):
    bl_label = "Animation Recorder"
    bl_idname = "OBJECT_PT_AnimRecorder"
    bl_category = "Recorder"  # Create a dedicated tab
    bl_space_type = "VIEW_3D"
    bl_region_type = "UI"

    def draw(self, context):
        from ..operators.recording_ops import get_last_clip, get_recorder, is_recording

        layout = self.layout
        settings = context.scene.anim_recorder_settings

        # --- 1. TARGET ---
        target_box = layout.box()
        target_box.label(text="Target", icon='OBJECT_DATA')
        target_box.prop(settings, "root_object", text="Root")
        if settings.root_object is None:
            active = context.view_layer.objects.active
            if active is not None:
                target_box.label(text=f"Using active object: {active.name}", icon='INFO')
            else:
                target_box.label(text="Select an object to record.", icon='INFO')
        target_box.prop(settings, "animation_name", text="Name")

        # --- 2. OPTIONS ---
        options_box = layout.box()
        options_box.enabled = not is_recording()
        col = options_box.column()
        col.label(text="Options", icon='PREFERENCES')
        col.prop(settings, "record_visibility")
        col.prop(settings, "record_blend_shapes")
        col.prop(settings, "record_base_color")
        col.prop(settings, "world_space")
        col.prop(settings, "remove_redundant_keyframes")
        col.prop(settings, "play_on_start")

        # --- 3. RECORDING ---
        record_box = layout.box()
        record_box.label(text="Recording", icon='REC')
        row = record_box.row(align=True)
        row.scale_y = 1.5
        if not is_recording():
            row.operator("object.animrec_start", text="Start Recording", icon='REC')
        else:
            row.operator("object.animrec_stop", text="Stop Recording", icon='PAUSE')
            recorder = get_recorder()
            elapsed = recorder.last_recorded_time - recorder.recording_start_time
            record_box.label(text=f"{len(recorder.animation_data)} objects, {elapsed:.2f} seconds")

        clip = get_last_clip()
        if clip is not None:
            record_box.label(
                text=f"Last: {len(clip)} curves, {clip.keyframe_count} keyframes, {clip.duration:.2f} s",
                icon='ACTION',
            )
        record_box.operator("object.animrec_export", text="Export to File", icon='FILE')

        dev_box = layout.box()
        dev_box.operator_menu_enum("object.animrec_run_tests", "area", text="Run Tests", icon='SCRIPT')


class OBJECT_PT_AnimRecorder_Tool(bpy.types.Panel):
    bl_label = "Animation Recorder"
    bl_idname = "OBJECT_PT_AnimRecorder_Tool"
    bl_category = "Tool"  # Add to the Tool tab
    bl_space_type = "VIEW_3D"
    bl_region_type = "UI"

    def draw(self, context):
        from ..operators.recording_ops import is_recording

        layout = self.layout

        row = layout.row(align=True)
        if not is_recording():
            row.operator("object.animrec_start", text="Record", icon='REC')
        else:
            row.operator("object.animrec_stop", text="Stop", icon='PAUSE')
        row.operator("object.animrec_export", text="Export", icon='FILE_TICK')

        layout.separator()
        layout.label(text="See 'Recorder' panel for more options")
