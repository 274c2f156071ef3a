"""
Animation Recorder Blender Addon

Records the animation of an object hierarchy during playback (transforms,
visibility, shape keys, material color) and turns it into keyframe curves
that can be exported.
"""

# Define bl_info directly to avoid import issues
bl_info = {
    "name": "Animation Recorder",
    "description": "Record the animation of an object and its children while it plays.",
    "author": "Animation Recorder contributors",
    "version": (1, 0, 0),
    "blender": (2, 80, 0),
    "location": "View3D > Sidebar > Recorder",
    "category": "Animation",
}

# Classes will be defined in register() function after imports


def _classes():
    from . import operators, ui
    return (
        # Recording operators
        operators.OBJECT_OT_StartRecording,
        operators.OBJECT_OT_StopRecording,
        operators.OBJECT_OT_ExportRecording,
        operators.OBJECT_OT_RunTests,

        # UI panels
        ui.OBJECT_PT_AnimRecorder,
        ui.OBJECT_PT_AnimRecorder_Tool,
    )


def register():
    """Register the addon"""
    import bpy

    try:
        from . import operators, ui

        # Robust register: if already registered, unregister then re-register
        for cls in _classes():
            try:
                bpy.utils.register_class(cls)
            except ValueError:
                bpy.utils.unregister_class(cls)
                bpy.utils.register_class(cls)

        try:
            ui.unregister_properties()
        except RuntimeError:
            pass
        ui.register_properties()

        # Sample the recorded objects after every frame change
        if operators.on_frame_change not in bpy.app.handlers.frame_change_post:
            bpy.app.handlers.frame_change_post.append(operators.on_frame_change)

        print("Animation Recorder: registered")
    except Exception as e:
        print(f"Animation Recorder: error during registration: {e}")
        import traceback
        traceback.print_exc()


def unregister():
    """Unregister the addon"""
    import bpy

    try:
        from . import operators, ui

        # a running recording would keep sampling objects that may be gone
        operators.stop_recording()

        if operators.on_frame_change in bpy.app.handlers.frame_change_post:
            bpy.app.handlers.frame_change_post.remove(operators.on_frame_change)

        for cls in reversed(_classes()):
            try:
                bpy.utils.unregister_class(cls)
            except RuntimeError:
                pass

        try:
            ui.unregister_properties()
        except RuntimeError:
            pass

        print("Animation Recorder: unregistered")
    except Exception as e:
        print(f"Animation Recorder: error during unregistration: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    register()
