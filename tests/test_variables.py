from unittest import TestCase, main

from pendraw.errors import (DuplicateDefinition, InvalidOperand, MalformedCondition,
                            UndefinedVariable, UnknownOperator)
from pendraw.runtime.evaluator import Evaluator, split_condition
from pendraw.runtime.variables import VariableStore


class TestVariableStore(TestCase):
    def setUp(self):
        self.store = VariableStore()

    def test_define_then_get(self):
        self.store.define("x", 5)
        self.assertEqual(self.store.get("x"), 5.0)

    def test_set_after_define(self):
        self.store.define("x", 5)
        self.store.set("x", 10)
        self.assertEqual(self.store.get("x"), 10.0)

    def test_set_before_define(self):
        self.assertRaises(UndefinedVariable, self.store.set, "x", 1)

    def test_redefine(self):
        self.store.define("x", 5)
        self.assertRaises(DuplicateDefinition, self.store.define, "x", 6)
        self.assertEqual(self.store.get("x"), 5.0)

    def test_get_unknown(self):
        self.assertRaises(UndefinedVariable, self.store.get, "nope")

    def test_resolve(self):
        self.store.define("width", 40)
        self.assertEqual(self.store.resolve("width"), 40.0)
        self.assertEqual(self.store.resolve("12.5"), 12.5)
        self.assertEqual(self.store.resolve("-3"), -3.0)
        self.assertEqual(self.store.resolve("1e2"), 100.0)

    def test_resolve_invalid(self):
        for token in ("height", "nan", "inf", "1.2.3", ""):
            self.assertRaises(InvalidOperand, self.store.resolve, token)

    def test_bind_restores(self):
        self.store.define("size", 7)
        with self.store.bind({"size": 50, "extra": 1}):
            self.assertEqual(self.store.get("size"), 50.0)
            self.assertEqual(self.store.get("extra"), 1.0)
            self.store.set("size", 60)
        self.assertEqual(self.store.get("size"), 7.0)
        self.assertNotIn("extra", self.store)

    def test_bind_restores_on_error(self):
        try:
            with self.store.bind({"tmp": 1}):
                raise InvalidOperand("boom")
        except InvalidOperand:
            pass
        self.assertNotIn("tmp", self.store)


class TestEvaluator(TestCase):
    def setUp(self):
        self.store = VariableStore()
        self.evaluator = Evaluator(self.store)

    def test_comparisons(self):
        self.store.define("x", 5)
        self.store.set("x", 10)
        self.assertTrue(self.evaluator.evaluate_condition("x > 3"))
        self.assertFalse(self.evaluator.evaluate_condition("x > 30"))
        self.assertTrue(self.evaluator.evaluate_condition("x >= 10"))
        self.assertTrue(self.evaluator.evaluate_condition("x <= 10"))
        self.assertFalse(self.evaluator.evaluate_condition("x < 10"))
        self.assertTrue(self.evaluator.evaluate_condition("x == 10"))
        self.assertTrue(self.evaluator.evaluate_condition("3 != x"))

    def test_exact_float_equality(self):
        self.store.define("x", 0.1 + 0.2)
        self.assertFalse(self.evaluator.evaluate_condition("x == 0.3"))

    def test_malformed(self):
        for condition in ("x>3", "x  > 3", "", "1 > 2 > 3"):
            self.assertRaises(MalformedCondition, self.evaluator.evaluate_condition, condition)

    def test_conditions_split_on_single_spaces(self):
        self.assertRaises(MalformedCondition, self.evaluator.evaluate_condition, "1\t>\t2")
        self.assertRaises(MalformedCondition, split_condition, "1 >\t2")
        self.assertEqual(split_condition("a <= b"), ("a", "<=", "b"))

    def test_unknown_operator(self):
        self.assertRaises(UnknownOperator, self.evaluator.evaluate_condition, "1 <> 2")

    def test_unknown_operand(self):
        self.assertRaises(InvalidOperand, self.evaluator.evaluate_condition, "y > 2")


if __name__ == '__main__':
    main()
