from __future__ import annotations

from arith.ast_nodes import Node, NumberLiteral, BinaryOp, Operator
from arith.errors import DivisionByZero, NumberOverflow
from arith.limits import Limits, DEFAULT_LIMITS

def divide(x: int, y: int) -> int:
    """Integer division truncating toward zero, as C does."""
    if y == 0:
        raise DivisionByZero(f'division of {x} by zero')
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient

op_map = {
    Operator.ADD: lambda x, y: x + y,
    Operator.SUB: lambda x, y: x - y,
    Operator.MUL: lambda x, y: x * y,
    Operator.DIV: divide,
}

def evaluate(tree: Node, limits: Limits = DEFAULT_LIMITS) -> int:
    """Computes the value of `tree` by a post-order walk.

    The walk keeps its own stack instead of recursing: left-leaning chains
    such as 1+1+...+1 are as deep as they are long, parentheses or not.
    Results that leave the range allowed by `limits` raise NumberOverflow.
    """
    values = []
    todo = [(tree, False)]
    while todo:
        node, children_done = todo.pop()
        if isinstance(node, NumberLiteral):
            values.append(node.value)
        elif isinstance(node, BinaryOp):
            if not children_done:
                todo.append((node, True))
                todo.append((node.right, False))
                todo.append((node.left, False))
                continue
            rhs = values.pop()
            lhs = values.pop()
            result = op_map[node.operator](lhs, rhs)
            if not limits.fits(result):
                raise NumberOverflow(f'{lhs} {node.operator.value} {rhs} does not fit in {limits.int_bits} bits')
            values.append(result)
        else:
            raise TypeError(f'cannot evaluate {node!r}')
    return values.pop()
