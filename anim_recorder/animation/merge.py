"""
Merging of visibility and scale tracks.

glTF has no animated visibility, so a hidden object is emulated by forcing its
scale to (0,0,0). The merged curve follows the recorded scale while the object
is visible and holds zero while it is hidden, using only LINEAR segments: every
visibility flip is expressed as two samples, one right before the flip holding
the old effective scale and one at the flip holding the new one.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from ..core.types import InterpolationType, MergedScaleCurve
from ..core.utils import (
    lerp_unclamped,
    nearly_equal,
    one_scale,
    time_between,
    zero_scale,
)

logger = logging.getLogger(__name__)


class VisibilityScaleMerger:
    """Two pointer merge of a visibility and a scale time series.

    Both inputs must be strictly increasing in time. Where the visibility state
    is unknown the object is treated as visible, so objects without visibility
    data are never hidden by accident.
    """

    def __init__(
        self,
        visibility_times: Sequence[float],
        visibilities: Sequence[bool],
        scale_times: Sequence[float],
        scales: Sequence[Any],
    ):
        self.visibility_times = visibility_times
        self.visibilities = visibilities
        self.scale_times = scale_times
        self.scales = scales

        self._vis_index = 0
        self._scale_index = 0
        self._times: List[float] = []
        self._values: List[Any] = []

    @property
    def _last_visible(self) -> Optional[bool]:
        return self.visibilities[self._vis_index - 1] if self._vis_index > 0 else None

    @property
    def _last_scale_time(self) -> Optional[float]:
        return self.scale_times[self._scale_index - 1] if self._scale_index > 0 else None

    @property
    def _last_scale(self):
        return self.scales[self._scale_index - 1] if self._scale_index > 0 else None

    def merge(self) -> List[Tuple[float, Any]]:
        self._vis_index = 0
        self._scale_index = 0
        self._times = []
        self._values = []

        vis_count = len(self.visibility_times)
        scale_count = len(self.scale_times)

        while self._vis_index < vis_count and self._scale_index < scale_count:
            vis_time = self.visibility_times[self._vis_index]
            visible = bool(self.visibilities[self._vis_index])
            scale_time = self.scale_times[self._scale_index]
            scale = self.scales[self._scale_index]
            last_visible = self._last_visible
            was_visible = True if last_visible is None else last_visible

            if nearly_equal(vis_time, scale_time):
                if vis_time <= 0:
                    held = self._last_scale if self._last_scale is not None else scale
                    self._record(vis_time, held if visible else zero_scale())
                else:
                    self._both_sampled_at_same_time(vis_time, visible, scale, was_visible)
                self._vis_index += 1
                self._scale_index += 1

            elif vis_time < scale_time:
                if vis_time <= 0:
                    held = self._last_scale if self._last_scale is not None else scale
                    self._record(vis_time, held if visible else zero_scale())
                else:
                    last_scale_time = self._last_scale_time
                    self._visibility_changes_before_scale(
                        vis_time,
                        visible,
                        scale_time,
                        scale,
                        was_visible,
                        vis_time if last_scale_time is None else last_scale_time,
                        # never happens while recording, every track is sampled
                        # when its object starts being recorded
                        scale if self._last_scale is None else self._last_scale,
                    )
                self._vis_index += 1

            else:
                # no point animating the scale of a hidden object
                if was_visible:
                    self._record(scale_time, scale)
                self._scale_index += 1

        # remaining visibility samples, only if the scale samples ran out first
        while self._vis_index < vis_count:
            vis_time = self.visibility_times[self._vis_index]
            visible = bool(self.visibilities[self._vis_index])
            last_visible = self._last_visible
            was_visible = True if last_visible is None else last_visible
            held = self._last_scale if self._last_scale is not None else one_scale()

            if was_visible != visible:
                self._record_transition(
                    vis_time,
                    held if was_visible else zero_scale(),
                    held if visible else zero_scale(),
                )
            else:
                # always record, otherwise the first or last state may be lost
                self._record(vis_time, held if visible else zero_scale())
            self._vis_index += 1

        # remaining scale samples, only if the object stayed visible
        if vis_count == 0 or self._last_visible:
            while self._scale_index < scale_count:
                self._record(self.scale_times[self._scale_index], self.scales[self._scale_index])
                self._scale_index += 1

        return list(zip(self._times, self._values))

    def _both_sampled_at_same_time(self, time, visible, scale, was_visible):
        if was_visible and not visible:
            self._record_transition(time, scale, zero_scale())
        elif not was_visible and visible:
            self._record_transition(time, zero_scale(), scale)
        elif visible:
            self._record(time, scale)
        else:
            self._record(time, zero_scale())

    def _visibility_changes_before_scale(
        self, vis_time, visible, scale_time, scale, was_visible, last_scale_time, last_scale
    ):
        if was_visible == visible:
            # the scale pointer takes care of this region
            return
        factor = (vis_time - last_scale_time) / (scale_time - last_scale_time)
        interpolated = lerp_unclamped(last_scale, scale, factor)
        if was_visible:
            self._record_transition(vis_time, interpolated, zero_scale())
        else:
            self._record_transition(vis_time, zero_scale(), interpolated)

    def _record_transition(self, time, before, after):
        """Record a flip at time, holding before until right before it."""
        if time > 0:
            previous = self._times[-1] if self._times else None
            nudge = time_between(previous, time)
            if nudge is not None:
                self._record(nudge, before)
        self._record(time, after)

    def _record(self, time, scale):
        if self._times and time <= self._times[-1]:
            logger.debug("Dropping merged scale sample at %r, already at %r", time, self._times[-1])
            return
        self._times.append(time)
        self._values.append(scale)


def merge_visibility_and_scale_tracks(visibility_track, scale_track) -> Optional[MergedScaleCurve]:
    """Fold a visibility track into a scale track.

    Either track may be None. Returns None if both are missing.
    """
    vis_times = visibility_track.times if visibility_track is not None else []
    scale_times = scale_track.times if scale_track is not None else []

    if not vis_times and not scale_times:
        return None

    if not vis_times:
        return MergedScaleCurve(scale_times, scale_track.values, scale_track.interpolation)

    visibilities = visibility_track.values
    if not scale_times:
        scales = [one_scale() if visible else zero_scale() for visible in visibilities]
        return MergedScaleCurve(vis_times, scales, InterpolationType.STEP)

    merger = VisibilityScaleMerger(vis_times, visibilities, scale_times, scale_track.values)
    merged = merger.merge()
    return MergedScaleCurve(
        [time for time, _ in merged],
        [scale for _, scale in merged],
        InterpolationType.LINEAR,
    )
