"""
Constants and configuration defaults for the Animation Recorder addon.
"""

# Property names of the built-in samplers, as used by glTF animation channels
TRANSLATION = "translation"
ROTATION = "rotation"
SCALE = "scale"
WEIGHTS = "weights"
VISIBILITY = "visibility"
BASE_COLOR_FACTOR = "baseColorFactor"

# Default animation name for a finished recording
DEFAULT_ANIMATION_NAME = "Recording"

# Identity scale and the scale used to hide an object
SCALE_ONE = (1.0, 1.0, 1.0)
SCALE_ZERO = (0.0, 0.0, 0.0)

# Name of the reference shape key, which carries no weight of its own
REFERENCE_SHAPE_KEY = "Basis"

# Node tree input names read by the base color sampler
PRINCIPLED_BSDF_TYPE = "BSDF_PRINCIPLED"
BASE_COLOR_INPUT = "Base Color"
