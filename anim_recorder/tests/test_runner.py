import unittest

from . import runner


def _sample_case(name):
    # defined here so that discovery does not pick it up
    class _Sample(unittest.TestCase):
        def test_passes(self):
            pass

        def test_fails(self):
            self.fail("wrong curve")

        def test_crashes(self):
            raise RuntimeError("sampler exploded")

        @unittest.skip("not today")
        def test_skipped(self):
            pass

    return _Sample(name)


def _sample_result(*names):
    result, _ = runner.run(unittest.TestSuite(_sample_case(name) for name in names))
    return result


class TestTestAreas(unittest.TestCase):
    def test_area_pattern(self):
        self.assertEqual(runner.area_pattern("ALL"), "test_*.py")
        self.assertEqual(runner.area_pattern("MERGE"), "test_merge.py")

    def test_unknown_area(self):
        with self.assertRaises(ValueError):
            runner.area_pattern("RIGGING")

    def test_every_area_has_a_module(self):
        for identifier, _label, pattern in runner.TEST_AREAS:
            if identifier != "ALL":
                self.assertTrue((runner.TESTS_DIR / pattern).exists(), pattern)


class TestRunSummary(unittest.TestCase):
    def test_all_passed(self):
        result = _sample_result("test_passes", "test_skipped")
        self.assertEqual(runner.summarize(result), "2 tests, 0 failed, 0 crashed, 1 skipped")
        self.assertEqual(runner.failed_test_ids(result), [])

    def test_failures_are_named(self):
        result = _sample_result("test_passes", "test_fails", "test_crashes")
        self.assertEqual(runner.failed_test_ids(result), ["_Sample.test_fails", "_Sample.test_crashes"])
        self.assertEqual(
            runner.summarize(result),
            "3 tests, 1 failed, 1 crashed, 0 skipped. First failures: _Sample.test_fails, _Sample.test_crashes",
        )

    def test_long_failure_lists_are_cut(self):
        result = _sample_result(*["test_fails"] * 5)
        self.assertTrue(runner.summarize(result).endswith("and 2 more"))

    def test_run_captures_output(self):
        _, output = runner.run(unittest.TestSuite([_sample_case("test_fails")]))
        self.assertIn("wrong curve", output)


if __name__ == "__main__":
    unittest.main()
