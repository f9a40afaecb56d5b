"""
  Reader: source text -> expressions

- `(` and `)` are tokens on their own; any other run of non-whitespace is an atom.
- Emits plain Python values instead of Cons cells:

    - lists -> tuple
    - #t / #f -> Boolean
    - unsigned decimal integers that fit the configured width -> int
    - everything else -> Symbol
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from schemer import SExpression
from schemer.config import get_max_number
from schemer.errors import SchemerSyntaxError
from schemer.types.boolean import TRUE, FALSE
from schemer.types.symbol import Symbol

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<atom>[^\s()]+)"
    r")"
)

NUMBER_RE = re.compile(r"[0-9]+")

BOOLEANS = {"#t": TRUE, "#f": FALSE}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # only trailing whitespace is left
            break
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


def tokenize(source: str) -> list[str]:
    return [value for _, value in lex(source)]


def read_atom(token: str) -> SExpression:
    if token in BOOLEANS:
        return BOOLEANS[token]
    if NUMBER_RE.fullmatch(token):
        num = int(token)
        if num > get_max_number():
            # too wide for a Number, so it reads as a symbol
            return Symbol(token)
        return num
    return Symbol(token)


def read_from_tokens(tokens: list[str]) -> tuple[SExpression, list[str]]:
    """Read one expression from the front of `tokens`.

    Returns the expression and the tokens left after it.
    """
    if not tokens:
        raise SchemerSyntaxError("unexpected EOF")

    token, rest = tokens[0], tokens[1:]
    if token == "(":
        items = []
        while rest and rest[0] != ")":
            item, rest = read_from_tokens(rest)
            items.append(item)
        if not rest:
            raise SchemerSyntaxError("unfinished list")
        return tuple(items), rest[1:]
    if token == ")":
        raise SchemerSyntaxError("unexpected )")
    return read_atom(token), rest


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    expr, remainder = read_from_tokens(tokenize(source))
    if remainder:
        raise SchemerSyntaxError("unexpected trailing tokens")
    logger.debug("parsed %r", expr)
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level expression in `source`, in order."""
    tokens = tokenize(source)
    while tokens:
        expr, tokens = read_from_tokens(tokens)
        yield expr
