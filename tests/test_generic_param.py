"""Tests for typed parameter values."""

import unittest

from paramkit.params import (
    BoolParam,
    ChoiceParam,
    FloatParam,
    GenericParam,
    IntParam,
    SpecializedParam,
    StringParam,
)


class TestTypedParams(unittest.TestCase):
    """Parsing, bounds and canonical string forms."""

    def test_int_param_bounds_and_parsing(self):
        param = IntParam("max_iterations", 10, low=1, high=100)
        self.assertEqual(param.range_suggestion, "1:1:100")
        self.assertTrue(param.set_value("42"))
        self.assertEqual(param.value, 42)
        self.assertTrue(param.set_value(" 3.0 "))
        self.assertEqual(param.get_value(), "3")
        for rejected in ("0", "101", "3.5", "ten", "", "nan"):
            self.assertFalse(param.set_value(rejected), rejected)
        self.assertEqual(param.value, 3)

    def test_float_param_bounds_and_format(self):
        param = FloatParam("goal_bias", 0.05, low=0.0, high=1.0, step=0.05)
        self.assertEqual(param.range_suggestion, "0.0:0.05:1.0")
        self.assertEqual(param.get_value(), "0.05")
        self.assertTrue(param.set_value("1"))
        self.assertEqual(param.get_value(), "1.0")
        self.assertFalse(param.set_value("1.01"))
        self.assertFalse(param.set_value("nan"))
        self.assertFalse(param.set_value("x"))
        self.assertEqual(param.value, 1.0)

    def test_unbounded_float_has_empty_range_suggestion(self):
        param = FloatParam("range", 0.0)
        self.assertEqual(param.range_suggestion, "")
        self.assertTrue(param.set_value("-1e6"))
        self.assertEqual(param.value, -1e6)

    def test_bool_param_tokens(self):
        param = BoolParam("verbose")
        self.assertEqual(param.range_suggestion, "0,1")
        for token, expected in (("yes", True), ("OFF", False), ("1", True), ("f", False)):
            self.assertTrue(param.set_value(token))
            self.assertIs(param.value, expected)
        self.assertFalse(param.set_value("maybe"))
        self.assertEqual(param.get_value(), "0")

    def test_choice_param(self):
        param = ChoiceParam("strategy", "uniform", choices=["uniform", "gaussian"])
        self.assertEqual(param.range_suggestion, "uniform,gaussian")
        self.assertTrue(param.set_value("gaussian"))
        self.assertFalse(param.set_value("bridge"))
        self.assertEqual(param.get_value(), "gaussian")
        with self.assertRaises(ValueError):
            ChoiceParam("strategy", "bridge", choices=["uniform"])

    def test_string_param_accepts_anything(self):
        param = StringParam("label")
        self.assertEqual(param.get_value(), "")
        self.assertTrue(param.set_value("a = b"))
        self.assertEqual(str(param), "label = a = b")

    def test_step_is_only_a_range_hint(self):
        param = IntParam("batch", 10, low=0, high=100, step=5)
        self.assertEqual(param.range_suggestion, "0:5:100")
        self.assertTrue(param.set_value("3"))
        self.assertEqual(param.value, 3)

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            IntParam("", 1)
        with self.assertRaises(ValueError):
            IntParam("n", 1, low=5, high=2)
        with self.assertRaises(ValueError):
            IntParam("n", 0, low=1, high=2)
        with self.assertRaises(TypeError):
            GenericParam("abstract")


class TestSpecializedParam(unittest.TestCase):
    """Setter/getter adapters."""

    def test_setter_receives_parsed_value(self):
        received = []
        param = SpecializedParam("seed", received.append, kind="int")
        self.assertTrue(param.set_value("12"))
        self.assertEqual(received, [12])
        self.assertEqual(param.get_value(), "12")

    def test_without_getter_reports_last_accepted_value(self):
        param = SpecializedParam("flag", lambda value: None, kind="bool")
        self.assertEqual(param.get_value(), "")
        self.assertTrue(param.set_value("true"))
        self.assertFalse(param.set_value("nope"))
        self.assertEqual(param.get_value(), "1")

    def test_setter_value_error_is_a_rejection(self):
        def _setter(value):
            raise ValueError("out of range")

        param = SpecializedParam("range", _setter, lambda: 1.0, kind="float")
        self.assertFalse(param.set_value("2.0"))
        self.assertEqual(param.get_value(), "1.0")

    def test_invalid_kind_and_setter(self):
        with self.assertRaises(ValueError):
            SpecializedParam("x", lambda value: None, kind="complex")
        with self.assertRaises(TypeError):
            SpecializedParam("x", None)


if __name__ == "__main__":
    unittest.main()
