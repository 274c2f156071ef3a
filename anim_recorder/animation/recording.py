"""
Recording sessions: sample every object under a root once per update and turn
the recorded tracks into animation curves when the recording ends.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from ..core.constants import SCALE, TRANSLATION
from ..core.types import Bounds, PostAnimationData, PostExportArgs, RecorderSettings
from ..core.utils import copy_value, is_child_of, iter_hierarchy, values_equal
from .clip import AnimationClip
from .filtering import remove_unneeded_keyframes
from .merge import merge_visibility_and_scale_tracks
from .samplers import AnimationSamplers, SamplerRegistry
from .track import AnimationTrack, VisibilityTrack


class AnimationData:
    """Tracks of one recorded object."""

    def __init__(self, samplers: AnimationSamplers, node, time: float, settings: RecorderSettings):
        self.node = node
        log = settings.logger

        self.visibility_track: Optional[VisibilityTrack] = None
        if samplers.visibility_sampler is not None:
            self.visibility_track = samplers.visibility_sampler.start_track(node, time, log=log)

        self.tracks: List[AnimationTrack] = [
            sampler.start_track(node, time, log=log)
            for sampler in samplers
            if sampler.get_target(node) is not None
        ]

    @property
    def is_visible(self) -> bool:
        return self.visibility_track is None or bool(self.visibility_track.last_value)

    def track(self, property_name: str) -> Optional[AnimationTrack]:
        for track in self.tracks:
            if track.property_name == property_name:
                return track
        return None

    def update(self, time: float):
        if self.visibility_track is not None:
            self.visibility_track.sample_if_changed(time)
        # hidden objects included
        for track in self.tracks:
            track.sample_if_changed(time)

    @property
    def keyframe_count(self) -> int:
        count = sum(len(track) for track in self.tracks)
        if self.visibility_track is not None:
            count += len(self.visibility_track)
        return count


class Recorder:
    """Records the animation of a root object and all of its descendants.

    The host drives it: start(time), then update(time) once per frame with
    strictly increasing times, then end(). Times passed in are host times;
    recorded samples are relative to the start of the recording.
    """

    def __init__(
        self,
        root,
        settings: Optional[RecorderSettings] = None,
        registry: Optional[SamplerRegistry] = None,
        sink=None,
        hierarchy: Optional[Callable[[Any], Iterable[Any]]] = None,
    ):
        if root is None:
            raise ValueError("Please provide a root object to record.")

        self.root = root
        self.settings = settings or RecorderSettings()
        self.log = self.settings.logger
        self.sink = sink
        self.hierarchy = hierarchy or iter_hierarchy
        self.samplers = AnimationSamplers.from_settings(self.settings, registry)

        # optional allow-list, other objects are ignored
        self.recording_filter: Optional[Iterable[Any]] = None

        # observers, called in order
        self.before_add_animation_data: List[Callable[[PostAnimationData], None]] = []
        self.post_export: List[Callable[[PostExportArgs], None]] = []

        self._entries: Dict[Any, AnimationData] = {}
        self._start_time = 0.0
        self._last_recorded_time = 0.0
        self._is_recording = False
        self._has_recording = False

    @property
    def is_recording(self) -> bool:
        return self._is_recording

    @property
    def has_recording(self) -> bool:
        return self._has_recording

    @property
    def recording_start_time(self) -> float:
        return self._start_time

    @property
    def last_recorded_time(self) -> float:
        """Host time of the most recent sample"""
        return self._last_recorded_time

    @property
    def animation_name(self) -> str:
        return self.settings.animation_name

    @property
    def animation_data(self) -> Dict[Any, AnimationData]:
        return self._entries

    def _allow(self, node) -> bool:
        return self.recording_filter is None or node in self.recording_filter

    def start(self, time: float):
        if self._is_recording:
            self.log.warning("Recorder is already recording, ignoring start at %r", time)
            return

        self._start_time = time
        self._last_recorded_time = time
        self._entries = {}
        for node in self.hierarchy(self.root):
            if not self._allow(node):
                continue
            self._entries[node] = AnimationData(self.samplers, node, 0.0, self.settings)

        self._is_recording = True
        self._has_recording = True
        self.log.info("Recording started with %d objects", len(self._entries))

    def update(self, time: float):
        """Sample every object under the root."""
        self._update(time, list(self.hierarchy(self.root)))

    def update_for(self, time: float, nodes: Iterable[Any]):
        """Sample only the given objects, all of which must be under the root."""
        nodes = list(nodes)
        for node in nodes:
            if not is_child_of(node, self.root):
                raise ValueError(
                    f"{getattr(node, 'name', node)!r} is not parented to the recording root, it cannot be recorded"
                )
        self._update(time, nodes)

    def _update(self, time: float, nodes: List[Any]):
        if not self._is_recording:
            self.log.warning("Recorder isn't recording, but update was called at %r", time)
            return
        if not time > self._last_recorded_time:
            self.log.warning(
                "Can't record backwards in time (%r after %r), please avoid this", time, self._last_recorded_time
            )
            return

        time_since_start = time - self._start_time
        for node in nodes:
            if not self._allow(node):
                continue
            entry = self._entries.get(node)
            if entry is None:
                # appeared since the last update, its tracks start now
                self._entries[node] = AnimationData(self.samplers, node, time_since_start, self.settings)
            else:
                entry.update(time_since_start)
        self._last_recorded_time = time

    def end_recording(self) -> bool:
        """Stop recording. The recorded data is kept for export."""
        if not self._is_recording:
            return False
        self._is_recording = False
        self.log.info(
            "Recording finished. Tracks: %d, Total keyframes: %d",
            sum(len(entry.tracks) for entry in self._entries.values()),
            sum(entry.keyframe_count for entry in self._entries.values()),
        )
        return True

    def end(self) -> bool:
        """Stop recording and export the curves to the configured sink.

        Can be called again without recording again, every call derives the
        curves anew from the recorded samples.
        """
        self.end_recording()
        if not self._has_recording:
            return False
        if self.sink is None:
            self.log.warning("Recording ended without a sink, nothing was exported")
            return False
        self.export(self.sink)
        return True

    def collect_animation(self) -> AnimationClip:
        """Stop recording and return the curves as a new clip."""
        self.end_recording()
        clip = AnimationClip(self.settings.animation_name)
        if self._has_recording:
            self.export(clip)
        return clip

    def _curves_of(self, entry: AnimationData):
        has_scale = False
        for track in entry.tracks:
            if len(track) == 0:
                continue
            if track.property_name == SCALE:
                has_scale = True
                # visibility is folded into the scale curve
                merged = merge_visibility_and_scale_tracks(entry.visibility_track, track)
                if merged is None:
                    continue
                yield track.animated_object, track, merged.times, merged.scales, merged.interpolation
            else:
                yield track.animated_object, track, track.times, track.values, track.interpolation

        vis_track = entry.visibility_track
        if not has_scale and vis_track is not None and len(vis_track) > 0:
            merged = merge_visibility_and_scale_tracks(vis_track, None)
            yield entry.node, None, merged.times, merged.scales, merged.interpolation

    def export(self, sink, clip=None) -> int:
        """Hand every recorded curve to sink. Returns the number of curves."""
        if not self._has_recording:
            return 0
        clip = sink if clip is None else clip

        bounds: Optional[Bounds] = None
        count = 0
        for entry in self._entries.values():
            for animated_object, track, times, values, interpolation in self._curves_of(entry):
                property_name = track.property_name if track is not None else SCALE
                data = PostAnimationData(animated_object, property_name, list(times), [copy_value(v) for v in values])
                for callback in self.before_add_animation_data:
                    callback(data)

                if property_name == TRANSLATION:
                    for value in data.values:
                        if bounds is None:
                            bounds = Bounds.from_point(value)
                        else:
                            bounds.encapsulate(value)

                times, values = data.times, data.values
                if self.settings.remove_redundant_keyframes:
                    equals = track.sampler.equals if track is not None else values_equal
                    times, values = remove_unneeded_keyframes(times, values, equals)

                sink.add_animation_data(
                    data.animated_object, property_name, clip, interpolation, list(times), list(values)
                )
                count += 1

        args = PostExportArgs(bounds, clip)
        for callback in self.post_export:
            callback(args)
        return count
