import unittest
from arith.ast_nodes import *
from arith.evaluator import *
from arith.errors import *
from arith.limits import Limits

def num(value):
    return NumberLiteral(value)

class TestDivide(unittest.TestCase):
    def test_truncates_toward_zero(self):
        self.assertEqual(divide(7, 2), 3)
        self.assertEqual(divide(-7, 2), -3)
        self.assertEqual(divide(7, -2), -3)
        self.assertEqual(divide(-7, -2), 3)
        self.assertEqual(divide(0, 5), 0)

    def test_by_zero(self):
        with self.assertRaises(DivisionByZero):
            divide(3, 0)

class TestEvaluate(unittest.TestCase):
    def test_leaf(self):
        self.assertEqual(evaluate(num(5)), 5)

    def test_operators(self):
        self.assertEqual(evaluate(BinaryOp(Operator.ADD, num(2), num(3))), 5)
        self.assertEqual(evaluate(BinaryOp(Operator.SUB, num(2), num(3))), -1)
        self.assertEqual(evaluate(BinaryOp(Operator.MUL, num(2), num(3))), 6)
        self.assertEqual(evaluate(BinaryOp(Operator.DIV, num(7), num(3))), 2)

    def test_left_then_right(self):
        tree = BinaryOp(Operator.SUB, BinaryOp(Operator.SUB, num(10), num(2)), num(3))
        self.assertEqual(evaluate(tree), 5)
        tree = BinaryOp(Operator.SUB, num(10), BinaryOp(Operator.SUB, num(2), num(3)))
        self.assertEqual(evaluate(tree), 11)

    def test_negative_division_truncates(self):
        tree = BinaryOp(Operator.DIV, BinaryOp(Operator.SUB, num(0), num(7)), num(2))
        self.assertEqual(evaluate(tree), -3)

    def test_division_by_zero(self):
        tree = BinaryOp(Operator.DIV, num(3), BinaryOp(Operator.SUB, num(2), num(2)))
        with self.assertRaises(DivisionByZero) as ctx:
            evaluate(tree)
        self.assertEqual(ctx.exception.kind, ErrorKind.DIVISION_BY_ZERO)

    def test_result_overflow(self):
        tree = BinaryOp(Operator.MUL, num(65536), num(65536))
        with self.assertRaises(NumberOverflow):
            evaluate(tree)
        self.assertEqual(evaluate(tree, Limits(int_bits=64)), 1 << 32)

    def test_result_underflow(self):
        tree = BinaryOp(Operator.SUB, num(0), num(2147483647))
        self.assertEqual(evaluate(tree), -2147483647)
        tree = BinaryOp(Operator.SUB, tree, num(1))
        self.assertEqual(evaluate(tree), -2147483648)
        with self.assertRaises(NumberOverflow):
            evaluate(BinaryOp(Operator.SUB, tree, num(1)))

    def test_long_chain(self):
        tree = num(0)
        for _ in range(20000):
            tree = BinaryOp(Operator.ADD, tree, num(1))
        self.assertEqual(evaluate(tree), 20000)

    def test_pure(self):
        tree = BinaryOp(Operator.MUL, BinaryOp(Operator.ADD, num(2), num(3)), num(4))
        self.assertEqual(evaluate(tree), 20)
        self.assertEqual(evaluate(tree), 20)
        self.assertEqual(tree, BinaryOp(Operator.MUL, BinaryOp(Operator.ADD, num(2), num(3)), num(4)))

    def test_unknown_node(self):
        with self.assertRaises(TypeError):
            evaluate('1+2')

class TestErrorKinds(unittest.TestCase):
    def test_base_kind(self):
        self.assertIsNone(CalcError('x').kind)
        self.assertEqual(DivisionByZero('x').kind, ErrorKind.DIVISION_BY_ZERO)
