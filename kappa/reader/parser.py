"""
  Lisp Reader, Lexer and Parser

- Emits kappa values directly:

    - symbols      -> Symbol
    - #t / #f      -> True / False
    - numbers      -> int (signed 64-bit)
    - strings      -> str
    - lists        -> Python list
    - dotted lists -> DottedList(heads, tail)
    - 'x           -> [Symbol("quote"), x]

- Lists and dotted lists share the prefix ``( expr expr ...``. The grammar is
  left-factored: the parser reads head expressions until it sees ``)`` or
  ``.``, and only then commits to one of the two shapes, so no branch ever
  consumes input it has to give back.
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from kappa import SExpression
from kappa.errors import ParseError
from kappa.types.dotted_list import DottedList
from kappa.types.symbol import Symbol

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

SYMBOL_CHARS = "!#$%&|*+-/:<=>?@^_~"

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r'|(?P<string>"(?:\\.|[^\\"])*")'
    r'|(?P<word>[^\s()\'";]+)'
)
SKIP_RE = re.compile(r"(?:\s+|;[^\n]*)+")
NUMBER_RE = re.compile(r"[+-]?[0-9]+")
ATOM_RE = re.compile(
    r"[A-Za-z" + re.escape(SYMBOL_CHARS) + r"][A-Za-z0-9" + re.escape(SYMBOL_CHARS) + r"]*"
)
STRING_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def _line_col(source: str, pos: int) -> tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, pos) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        skip = SKIP_RE.match(source, pos)
        if skip:
            pos = skip.end()
            if pos >= n:
                break
        m = TOKEN_RE.match(source, pos)
        if not m:
            line, col = _line_col(source, pos)
            if source[pos] == '"':
                raise ParseError("unterminated string literal", line, col)
            raise ParseError(f"unexpected character {source[pos]!r}", line, col)
        kind = m.lastgroup
        text = m.group(kind)
        if kind == "word" and text == ".":
            kind = "dot"
        yield Token(kind, text, pos)
        pos = m.end()


class TokenStream:
    """Cursor over the token list of one source text."""

    def __init__(self, source: str):
        self.source = source
        self.tokens: list[Token] = list(lex(source))
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise self.error("unexpected end of input")
        self.index += 1
        return tok

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def error(self, message: str, tok: Optional[Token] = None) -> ParseError:
        pos = tok.pos if tok is not None else len(self.source)
        line, col = _line_col(self.source, pos)
        return ParseError(message, line, col)

    def parse_expr(self) -> SExpression:
        tok = self.advance()

        if tok.kind == "word":
            return self._parse_word(tok)

        if tok.kind == "string":
            return self._parse_string(tok)

        if tok.kind == "quote":
            return [Symbol("quote"), self.parse_expr()]

        if tok.kind == "lparen":
            return self._parse_list(tok)

        if tok.kind == "rparen":
            raise self.error("unexpected ')'", tok)

        raise self.error(f"unexpected {tok.text!r}", tok)

    def _parse_list(self, open_tok: Token) -> SExpression:
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise self.error("unmatched '('", open_tok)
            if tok.kind == "rparen":
                self.advance()
                return items
            if tok.kind == "dot":
                self.advance()
                if not items:
                    raise self.error("expected an expression before '.'", tok)
                tail = self.parse_expr()
                close = self.peek()
                if close is None or close.kind != "rparen":
                    raise self.error("expected ')' after dotted tail", close)
                self.advance()
                return _make_dotted(items, tail)
            items.append(self.parse_expr())

    def _parse_word(self, tok: Token) -> SExpression:
        text = tok.text
        if text == "#t":
            return True
        if text == "#f":
            return False
        if NUMBER_RE.fullmatch(text):
            value = int(text)
            if not INT64_MIN <= value <= INT64_MAX:
                raise self.error(f"integer literal out of range: {text}", tok)
            return value
        if ATOM_RE.fullmatch(text):
            return Symbol(text)
        raise self.error(f"invalid token {text!r}", tok)

    def _parse_string(self, tok: Token) -> str:
        body = tok.text[1:-1]
        if "\\" not in body:
            return body
        out: list[str] = []
        i = 0
        while i < len(body):
            ch = body[i]
            if ch == "\\":
                esc = body[i + 1]
                if esc not in STRING_ESCAPES:
                    raise self.error(f"unknown string escape '\\{esc}'", tok)
                out.append(STRING_ESCAPES[esc])
                i += 2
            else:
                out.append(ch)
                i += 1
        return "".join(out)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def _make_dotted(heads: list[SExpression], tail: SExpression) -> SExpression:
    # (a . (b c)) is the proper list (a b c); (a . (b . c)) is (a b . c)
    if isinstance(tail, list):
        return heads + tail
    if isinstance(tail, DottedList):
        return DottedList(heads + tail.heads, tail.tail)
    return DottedList(heads, tail)


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`.

    Raises ParseError for empty input, malformed input or trailing text.
    """
    stream = TokenStream(source)
    expr = stream.parse_expr()
    if not stream.at_end():
        raise stream.error("expected end of input", stream.peek())
    return expr


def read_all(source: str) -> list[SExpression]:
    """Read every expression in `source`; an empty program yields []."""
    return list(TokenStream(source).parse_all())
