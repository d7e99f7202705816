from typing import NamedTuple

class Limits(NamedTuple):
    max_depth: int = 256 # Parenthesis nesting allowed before NestingTooDeep
    int_bits: int = 32 # Width of the signed integers literals and results must fit
    allow_trailing: bool = False # Ignore tokens after a complete expression

    def int_min(self) -> int:
        return -(1 << (self.int_bits - 1))

    def int_max(self) -> int:
        return (1 << (self.int_bits - 1)) - 1

    def fits(self, value: int) -> bool:
        return self.int_min() <= value <= self.int_max()

    def max_digits(self) -> int:
        # Upper bound on the decimal digits of int_max()
        return self.int_bits * 30103 // 100000 + 1

DEFAULT_LIMITS = Limits()

# Deepest nesting the recursive parser handles under the default recursion limit
MAX_SAFE_DEPTH = 300
