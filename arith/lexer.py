from __future__ import annotations
from typing import Iterator, List
import re

from arith.tokens import Token, TokenKind
from arith.errors import InvalidCharacter, NumberOverflow
from arith.limits import Limits, DEFAULT_LIMITS

# Only these three count as whitespace, anything else unknown is invalid
whitespace_pattern = re.compile(r'[ \t\n]+')
number_pattern = re.compile(r'[0-9]+')

_token_map = {
    '(': TokenKind.LEFT_PAREN,
    ')': TokenKind.RIGHT_PAREN,
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.STAR,
    '/': TokenKind.SLASH,
}

def scan(src: str) -> Iterator[Token]:
    """Classifies `src` into tokens, always finishing with a single END.

    Scanning stops at the first unknown character: an INVALID token (with
    empty text) is produced for it, followed directly by END.
    """
    pos = 0
    while True:
        if (m := whitespace_pattern.match(src, pos)):
            pos = m.end()
        if pos >= len(src):
            yield Token(TokenKind.END, '', pos)
            return

        char = src[pos]
        if char in _token_map:
            yield Token(_token_map[char], char, pos)
            pos += 1
        elif (m := number_pattern.match(src, pos)):
            yield Token(TokenKind.NUMBER, m[0], pos)
            pos = m.end()
        else:
            yield Token(TokenKind.INVALID, '', pos)
            yield Token(TokenKind.END, '', pos)
            return

def number_value(tok: Token, limits: Limits = DEFAULT_LIMITS) -> int:
    """Converts a NUMBER token, raising NumberOverflow when out of range.

    The digit count is checked before calling int(), which refuses very long
    strings on its own.
    """
    digits = tok.text.lstrip('0') or '0'
    if len(digits) <= limits.max_digits():
        try:
            value = int(digits)
        except ValueError: # Beyond the interpreter's int() digit limit
            value = None
        if value is not None and limits.fits(value):
            return value
    shown = tok.text if len(tok.text) <= 20 else tok.text[:20] + '...'
    raise NumberOverflow(f'number {shown} does not fit in {limits.int_bits} bits', tok.pos)

def tokenize(src: str, limits: Limits = DEFAULT_LIMITS) -> List[Token]:
    tokens = []
    for tok in scan(src):
        if tok.kind == TokenKind.INVALID:
            raise InvalidCharacter(f'invalid character {src[tok.pos]!r}', tok.pos)
        if tok.kind == TokenKind.NUMBER:
            number_value(tok, limits)
        tokens.append(tok)
    return tokens
