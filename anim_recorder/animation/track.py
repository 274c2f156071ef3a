"""
Animation tracks recorded while a session is running.

A track is an append-only time series for one (object, property) pair. As a
memory optimization identical samples are skipped, but never by simply
dropping a sample that equals the previous one: an object sitting at (1,2,3)
and then teleporting to (4,5,6) would turn into a linear ramp from the start
of the recording. Instead every sample is recorded, and when a new sample
equals the *last two* stored samples the middle one is dropped. That keeps the
first and last sample of every run of identical values, so interpolation only
acts in the short interval right before a change.
"""

import logging
from typing import Any, Callable, List, Optional

from ..core.types import InterpolationType
from ..core.utils import next_smaller

logger = logging.getLogger(__name__)


class AnimationTrack:
    """Samples of one property of one object."""

    def __init__(
        self,
        node: Any,
        sampler: "AnimationSampler",
        time: float,
        equals: Optional[Callable[[Any, Any], bool]] = None,
        override_initial_value: Optional[Callable[[Any], Any]] = None,
        log: Optional[logging.Logger] = None,
    ):
        self.node = node
        self.sampler = sampler
        self._equals = equals or sampler.equals
        self._log = log or logger

        self._times: List[float] = []
        self._values: List[Any] = []

        self._last_time: Optional[float] = None
        self._last_value: Any = None
        self._second_to_last_time: Optional[float] = None
        self._second_to_last_value: Any = None

        if override_initial_value is not None:
            self.record_sample_if_changed(
                time, override_initial_value(sampler.sample(node))
            )
        else:
            self.sample_if_changed(time)

    @property
    def animated_object(self):
        return self.sampler.get_target(self.node)

    @property
    def property_name(self) -> str:
        return self.sampler.property_name

    @property
    def interpolation(self) -> InterpolationType:
        return self.sampler.interpolation

    @property
    def times(self) -> List[float]:
        return list(self._times)

    @property
    def values(self) -> List[Any]:
        return list(self._values)

    @property
    def last_time(self) -> Optional[float]:
        return self._last_time

    @property
    def last_value(self):
        return self._last_value

    @property
    def initial_value(self):
        return self._values[0] if self._values else None

    def __len__(self):
        return len(self._times)

    def sample_if_changed(self, time: float):
        self.record_sample_if_changed(time, self.sampler.sample(self.node))

    def record_sample_if_changed(self, time: float, value):
        # no target (anymore) or nothing to read at this instant
        if value is None:
            return

        if self._last_time is not None:
            if time == self._last_time:
                if not self._equals(self._last_value, value):
                    self._log.warning(
                        "Ignoring second sample of '%s' at time %r: a different value was already recorded",
                        self.property_name, time,
                    )
                return
            if time < self._last_time:
                self._log.warning(
                    "Ignoring sample of '%s' at time %r: track already reached %r",
                    self.property_name, time, self._last_time,
                )
                return

        if (
            self._second_to_last_time is not None
            and self._equals(self._last_value, self._second_to_last_value)
            and self._equals(self._last_value, value)
        ):
            # the last sample sits in the middle of a run of identical values
            self._times.pop()
            self._values.pop()

        self._times.append(time)
        self._values.append(value)
        self._second_to_last_time = self._last_time
        self._second_to_last_value = self._last_value
        self._last_time = time
        self._last_value = value


class VisibilityTrack(AnimationTrack):
    """Visibility of an object, always STEP interpolated and starting at time 0.

    The target format has no visibility channel; this track is merged into the
    scale track on export.
    """

    def __init__(self, node, sampler, time: float, log: Optional[logging.Logger] = None):
        # visible at the start of time only if the object existed back then
        super().__init__(
            node,
            sampler,
            min(time, 0.0),
            override_initial_value=lambda visible: bool(visible) and time <= 0,
            log=log,
        )
        if time > 0:
            # hold the previous state until right before the object appears,
            # so the change is not interpolated from the start of time
            self.record_visibility_at(next_smaller(time), bool(self.last_value))
            self.sample_if_changed(time)

    @property
    def interpolation(self) -> InterpolationType:
        return InterpolationType.STEP

    def record_visibility_at(self, time: float, visible: bool):
        self.record_sample_if_changed(time, visible)
