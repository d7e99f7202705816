from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

from arith.tokens import TokenKind

class Operator(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

# Maps operator tokens to the operation they build
op_map = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUB,
    TokenKind.STAR: Operator.MUL,
    TokenKind.SLASH: Operator.DIV,
}

@dataclass(frozen=True)
class NumberLiteral:
    value: int

    def label(self) -> str:
        return f'Number({self.value})'

    def __str__(self) -> str:
        return dump(self)

@dataclass(frozen=True)
class BinaryOp:
    operator: Operator
    left: Node
    right: Node

    def label(self) -> str:
        return f'BinaryOp({self.operator.value})'

    def __str__(self) -> str:
        return dump(self)

Node = Union[NumberLiteral, BinaryOp]

def dump(tree: Node) -> str:
    """Indented tree, one node per line, children one tab below their parent.

    Walks with its own stack like the evaluator, so long operator chains
    print without hitting the recursion limit.
    """
    lines = []
    todo = [(tree, 0)]
    while todo:
        node, level = todo.pop()
        lines.append("\t" * level + node.label() + "\n")
        if isinstance(node, BinaryOp):
            todo.append((node.right, level + 1))
            todo.append((node.left, level + 1))
    return ''.join(lines)
