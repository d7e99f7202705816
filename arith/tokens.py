from __future__ import annotations
from enum import Enum, auto
from typing import NamedTuple

class TokenKind(Enum):
    NUMBER = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    END = auto()
    INVALID = auto()

class Token(NamedTuple):
    kind: TokenKind
    text: str = ''
    pos: int = 0

    def __str__(self) -> str:
        if not self.text:
            return self.kind.name
        return f'{self.kind.name} {self.text}'

add_ops = [TokenKind.PLUS, TokenKind.MINUS]
mul_ops = [TokenKind.STAR, TokenKind.SLASH]
