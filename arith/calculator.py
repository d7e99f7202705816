from __future__ import annotations
from typing import NamedTuple

from arith.errors import CalcError
from arith.evaluator import evaluate
from arith.limits import Limits, DEFAULT_LIMITS
from arith.parser import parse

class Outcome(NamedTuple):
    """Result of one run of the pipeline: exactly one of value/error is set."""
    value: int|None = None
    error: CalcError|None = None

    @property
    def ok(self) -> bool:
        return self.error is None

def evaluate_source(src: str, limits: Limits|None = None) -> int:
    limits = limits or DEFAULT_LIMITS
    return evaluate(parse(src, limits), limits)

def calculate(src: str, limits: Limits|None = None) -> Outcome:
    try:
        return Outcome(value=evaluate_source(src, limits))
    except CalcError as err:
        return Outcome(error=err)
