"""
Animation module for the Animation Recorder addon.

This module handles sampling, track recording, the visibility/scale merge and
keyframe reduction.
"""

from .samplers import (
    AnimationSampler,
    TranslationSampler,
    RotationSampler,
    ScaleSampler,
    VisibilitySampler,
    BlendWeightSampler,
    BaseColorSampler,
    CustomPropertySampler,
    SamplerRegistry,
    AnimationSamplers,
)
from .track import (
    AnimationTrack,
    VisibilityTrack,
)
from .merge import (
    VisibilityScaleMerger,
    merge_visibility_and_scale_tracks,
)
from .filtering import remove_unneeded_keyframes
from .clip import AnimationClip
from .recording import (
    AnimationData,
    Recorder,
)

__all__ = [
    # Samplers
    "AnimationSampler",
    "TranslationSampler",
    "RotationSampler",
    "ScaleSampler",
    "VisibilitySampler",
    "BlendWeightSampler",
    "BaseColorSampler",
    "CustomPropertySampler",
    "SamplerRegistry",
    "AnimationSamplers",
    # Tracks
    "AnimationTrack",
    "VisibilityTrack",
    # Merge & filtering
    "VisibilityScaleMerger",
    "merge_visibility_and_scale_tracks",
    "remove_unneeded_keyframes",
    # Recording
    "AnimationClip",
    "AnimationData",
    "Recorder",
]
