from __future__ import annotations
from typing import List

from arith.tokens import Token, TokenKind, add_ops, mul_ops
from arith.ast_nodes import Node, NumberLiteral, BinaryOp, op_map
from arith.errors import ExpressionError, UnmatchedParenthesis, NestingTooDeep, TrailingInput
from arith.lexer import tokenize, number_value
from arith.limits import Limits, DEFAULT_LIMITS

# Grammar:
# expression = term, { add_op, term } ;
# term       = factor, { mul_op, factor } ;
# factor     = number | "(", expression, ")" ;
# add_op     = "+" | "-" ;
# mul_op     = "*" | "/" ;
# number     = digit, { digit } ;
# digit      = ? regex [0-9] ? ;

class TokenStream:
    """Forward-only cursor over a token list ending with END.

    The cursor never moves back, and never moves past the END token.
    """
    def __init__(self, tokens: List[Token], limits: Limits = DEFAULT_LIMITS) -> None:
        if not tokens or tokens[-1].kind != TokenKind.END:
            raise ValueError('token sequence must end with an END token')
        self.tokens = tokens
        self.limits = limits
        self.index = 0
        self.depth = 0 # Currently open parentheses

    def peek(self) -> Token:
        return self.tokens[self.index]

    def look(self) -> TokenKind:
        return self.peek().kind

    def advance(self) -> Token:
        tok = self.peek()
        if tok.kind != TokenKind.END:
            self.index += 1
        return tok

    def at_end(self) -> bool:
        return self.look() == TokenKind.END

def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.END:
        return 'end of input'
    if tok.kind == TokenKind.INVALID:
        return 'invalid character'
    return repr(tok.text)

def expression(stream: TokenStream) -> Node:
    tree = term(stream)
    while stream.look() in add_ops:
        op = stream.advance()
        rhs = term(stream)
        tree = BinaryOp(op_map[op.kind], tree, rhs)
    return tree

def term(stream: TokenStream) -> Node:
    tree = factor(stream)
    while stream.look() in mul_ops:
        op = stream.advance()
        rhs = factor(stream)
        tree = BinaryOp(op_map[op.kind], tree, rhs) # LHS of '*' in (a/b)*c is (a/b)
    return tree

def factor(stream: TokenStream) -> Node:
    tok = stream.peek()
    if tok.kind == TokenKind.NUMBER:
        stream.advance()
        return NumberLiteral(number_value(tok, stream.limits))
    if tok.kind == TokenKind.LEFT_PAREN:
        stream.advance()
        stream.depth += 1
        if stream.depth > stream.limits.max_depth:
            raise NestingTooDeep(f'more than {stream.limits.max_depth} nested parentheses', tok.pos)
        tree = expression(stream)
        if stream.look() != TokenKind.RIGHT_PAREN:
            raise UnmatchedParenthesis(f'unmatched parenthesis, expected \')\', got {_describe(stream.peek())}', tok.pos)
        stream.advance()
        stream.depth -= 1
        return tree
    raise ExpressionError(f'expected a number or \'(\', got {_describe(tok)}', tok.pos)

def parse_tokens(tokens: List[Token], limits: Limits = DEFAULT_LIMITS) -> Node:
    stream = TokenStream(tokens, limits)
    try:
        tree = expression(stream)
    except RecursionError:
        # max_depth set higher than the interpreter stack allows
        raise NestingTooDeep(f'nesting exceeds the interpreter recursion limit at depth {stream.depth}', stream.peek().pos) from None
    if not limits.allow_trailing and not stream.at_end():
        tok = stream.peek()
        raise TrailingInput(f'unexpected {_describe(tok)} after complete expression', tok.pos)
    return tree

def parse(src: str, limits: Limits = DEFAULT_LIMITS) -> Node:
    return parse_tokens(tokenize(src, limits), limits)
