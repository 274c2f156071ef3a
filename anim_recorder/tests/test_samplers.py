import unittest

from mathutils import Quaternion, Vector

from ..animation.samplers import (
    AnimationSamplers,
    BaseColorSampler,
    BlendWeightSampler,
    CustomPropertySampler,
    RotationSampler,
    SamplerRegistry,
    ScaleSampler,
    TranslationSampler,
    VisibilitySampler,
)
from ..core.types import InterpolationType, RecorderSettings
from .fakes import FakeMaterial, FakeMeshData, FakeObject, FakeShapeKeys


class TestTransformSamplers(unittest.TestCase):
    def setUp(self):
        self.node = FakeObject("node", location=(1.0, 2.0, 3.0))
        self.node.matrix_world.location = (10.0, 20.0, 30.0)

    def test_local_space_by_default(self):
        self.assertEqual(tuple(TranslationSampler().sample(self.node)), (1.0, 2.0, 3.0))
        self.assertEqual(tuple(ScaleSampler().sample(self.node)), (1.0, 1.0, 1.0))
        rotation = RotationSampler().sample(self.node)
        self.assertIsInstance(rotation, Quaternion)
        self.assertEqual(tuple(rotation), (1.0, 0.0, 0.0, 0.0))

    def test_world_space(self):
        sampler = TranslationSampler(lambda node: True)
        self.assertEqual(tuple(sampler.sample(self.node)), (10.0, 20.0, 30.0))

    def test_world_space_per_node(self):
        other = FakeObject("other", location=(4.0, 5.0, 6.0))
        sampler = TranslationSampler(lambda node: node is self.node)
        self.assertEqual(tuple(sampler.sample(self.node)), (10.0, 20.0, 30.0))
        self.assertEqual(tuple(sampler.sample(other)), (4.0, 5.0, 6.0))


class TestVisibilitySampler(unittest.TestCase):
    def test_reads_viewport_visibility(self):
        node = FakeObject("node")
        sampler = VisibilitySampler()
        self.assertIs(sampler.sample(node), True)
        node.hide_viewport = True
        self.assertIs(sampler.sample(node), False)
        self.assertEqual(sampler.interpolation, InterpolationType.STEP)


class TestBlendWeightSampler(unittest.TestCase):
    def test_reference_key_is_excluded(self):
        node = FakeObject("mesh")
        node.data = FakeMeshData(FakeShapeKeys("Basis", "Smile", "Frown"))
        node.data.shape_keys["Smile"].value = 0.5
        node.data.shape_keys["Frown"].value = 0.25
        self.assertEqual(BlendWeightSampler().sample(node), (0.5, 0.25))

    def test_no_shape_keys(self):
        node = FakeObject("empty")
        self.assertIsNone(BlendWeightSampler().get_target(node))
        node.data = FakeMeshData(None)
        self.assertIsNone(BlendWeightSampler().sample(node))

    def test_only_reference_key(self):
        node = FakeObject("mesh")
        node.data = FakeMeshData(FakeShapeKeys("Basis"))
        self.assertIsNone(BlendWeightSampler().sample(node))


class TestBaseColorSampler(unittest.TestCase):
    def test_principled_base_color(self):
        node = FakeObject("mesh")
        node.active_material = FakeMaterial(base_color=(1.0, 0.5, 0.25, 1.0))
        sampler = BaseColorSampler()
        self.assertIs(sampler.get_target(node), node.active_material)
        self.assertEqual(tuple(sampler.sample(node)), (1.0, 0.5, 0.25, 1.0))

    def test_diffuse_color_without_nodes(self):
        node = FakeObject("mesh")
        node.active_material = FakeMaterial(diffuse_color=(0.0, 0.5, 1.0, 1.0))
        self.assertEqual(tuple(BaseColorSampler().sample(node)), (0.0, 0.5, 1.0, 1.0))

    def test_no_material(self):
        self.assertIsNone(BaseColorSampler().sample(FakeObject("mesh")))


class TestCustomPropertySampler(unittest.TestCase):
    def test_scalar(self):
        node = FakeObject("node")
        node["power"] = 3
        value = CustomPropertySampler("power").sample(node)
        self.assertEqual(value, 3.0)
        self.assertIsInstance(value, float)

    def test_array(self):
        node = FakeObject("node")
        node["offset"] = [1.0, 2.0]
        self.assertEqual(CustomPropertySampler("offset", tuple).sample(node), (1.0, 2.0))

    def test_missing_property_has_no_target(self):
        self.assertIsNone(CustomPropertySampler("power").get_target(FakeObject("node")))


class TestSamplerRegistry(unittest.TestCase):
    def test_last_registration_wins(self):
        first = CustomPropertySampler("power")
        second = CustomPropertySampler("speed")
        registry = SamplerRegistry([first, second])
        self.assertEqual(len(registry), 1)
        self.assertIs(registry.get("OBJECT", float), second)

    def test_different_keys_coexist(self):
        registry = SamplerRegistry()
        registry.register(CustomPropertySampler("power")).register(CustomPropertySampler("offset", tuple))
        self.assertEqual(len(registry), 2)
        self.assertIsNone(registry.get("MATERIAL", float))

    def test_float_properties_with_own_target_types(self):
        power = CustomPropertySampler("power")
        speed = CustomPropertySampler("speed", target_type="OBJECT_SPEED")
        registry = SamplerRegistry([power, speed])
        self.assertEqual(len(registry), 2)
        self.assertIs(registry.get("OBJECT", float), power)
        self.assertIs(registry.get("OBJECT_SPEED", float), speed)

        node = FakeObject("node")
        node["power"] = 1.0
        node["speed"] = 3.0
        samplers = AnimationSamplers.from_settings(RecorderSettings(record_blend_shapes=False), registry)
        values = {sampler.property_name: sampler.sample(node) for sampler in samplers}
        self.assertEqual(values["power"], 1.0)
        self.assertEqual(values["speed"], 3.0)


class TestAnimationSamplers(unittest.TestCase):
    def test_defaults(self):
        samplers = AnimationSamplers.from_settings(RecorderSettings())
        self.assertIsNone(samplers.visibility_sampler)
        names = [sampler.property_name for sampler in samplers]
        self.assertEqual(names, ["translation", "rotation", "scale", "weights"])

    def test_optional_samplers(self):
        settings = RecorderSettings(record_visibility=True, record_blend_shapes=False, record_base_color=True)
        registry = SamplerRegistry([CustomPropertySampler("power")])
        samplers = AnimationSamplers.from_settings(settings, registry)
        self.assertIsInstance(samplers.visibility_sampler, VisibilitySampler)
        names = [sampler.property_name for sampler in samplers]
        self.assertEqual(names, ["translation", "rotation", "scale", "baseColorFactor", "power"])


if __name__ == "__main__":
    unittest.main()
