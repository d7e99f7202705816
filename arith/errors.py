from __future__ import annotations
from enum import Enum, auto

class ErrorKind(Enum):
    INVALID_CHARACTER = auto()
    NUMBER_OVERFLOW = auto()
    EXPRESSION_ERROR = auto()
    UNMATCHED_PARENTHESIS = auto()
    DIVISION_BY_ZERO = auto()
    NESTING_TOO_DEEP = auto()
    TRAILING_INPUT = auto()

class CalcError(Exception):
    """Base class of every failure raised while lexing, parsing or evaluating.

    `pos` is the offset in the source text where the problem was found, or
    None when the failure has no source location (e.g. while evaluating a
    hand-built tree). `kind` is None only on CalcError itself; each subclass
    sets its own.
    """
    kind: ErrorKind|None = None

    def __init__(self, message: str, pos: int|None = None) -> None:
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self) -> str:
        if self.pos is None:
            return self.message
        return f'{self.message} (at offset {self.pos})'

class InvalidCharacter(CalcError):
    kind = ErrorKind.INVALID_CHARACTER

class NumberOverflow(CalcError):
    kind = ErrorKind.NUMBER_OVERFLOW

class ExpressionError(CalcError):
    kind = ErrorKind.EXPRESSION_ERROR

UnexpectedToken = ExpressionError

class UnmatchedParenthesis(CalcError):
    kind = ErrorKind.UNMATCHED_PARENTHESIS

class DivisionByZero(CalcError):
    kind = ErrorKind.DIVISION_BY_ZERO

class NestingTooDeep(CalcError):
    kind = ErrorKind.NESTING_TOO_DEEP

class TrailingInput(CalcError):
    kind = ErrorKind.TRAILING_INPUT
