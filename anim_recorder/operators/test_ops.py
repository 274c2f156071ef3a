import traceback

import bpy
from bpy.props import EnumProperty
from bpy.types import Operator

from ..tests import runner
from .recording_ops import is_recording

LOG_TEXT_NAME = "anim_recorder_tests.log"


def _write_log(text: str):
    """Replace the contents of the test log text block, creating it if needed."""
    block = bpy.data.texts.get(LOG_TEXT_NAME) or bpy.data.texts.new(LOG_TEXT_NAME)
    block.clear()
    block.write(text)


class OBJECT_OT_RunTests(Operator):
    bl_idname = "object.animrec_run_tests"
    bl_label = "Run Recorder Tests"
    bl_description = "Run the recorder's unit tests inside Blender. The log goes to a text block"
    bl_options = {"REGISTER"}

    area: EnumProperty(
        name="Area",
        description="Part of the recorder to test",
        items=[(identifier, label, f"Run the {label.lower()} tests") for identifier, label, _ in runner.TEST_AREAS],
        default="ALL",
    )

    @classmethod
    def poll(cls, context):
        # the tests use their own recorders, keep them apart from a live one
        return not is_recording()

    def execute(self, context):
        try:
            suite = runner.discover(self.area)
        except Exception:  # pragma: no cover
            _write_log(traceback.format_exc())
            self.report({"ERROR"}, f"Could not load the recorder tests, see {LOG_TEXT_NAME}")
            return {"CANCELLED"}

        if suite.countTestCases() == 0:
            self.report({"WARNING"}, f"No recorder tests found for {self.area}")
            return {"CANCELLED"}

        try:
            result, output = runner.run(suite)
        except Exception:  # pragma: no cover
            _write_log(traceback.format_exc())
            self.report({"ERROR"}, f"Recorder tests crashed, see {LOG_TEXT_NAME}")
            return {"CANCELLED"}

        _write_log(output)
        summary = runner.summarize(result)
        print(f"Animation Recorder: {self.area} tests: {summary}")

        if result.wasSuccessful():
            self.report({"INFO"}, f"Recorder tests passed ({summary})")
            return {"FINISHED"}

        self.report({"ERROR"}, f"Recorder tests failed ({summary}). Log in {LOG_TEXT_NAME}")
        return {"CANCELLED"}
