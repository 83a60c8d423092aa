"""A small parser for Rust type expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union


class RustSyntaxError(ValueError):
    """Raised when a type expression cannot be parsed."""


@dataclass(frozen=True)
class PathSegment:
    ident: str
    args: tuple = ()
    output: Optional["RustType"] = None
    parenthesized: bool = False


@dataclass(frozen=True)
class PathType:
    segments: tuple


@dataclass(frozen=True)
class ArrayType:
    elem: "RustType"
    length: Optional[int]


@dataclass(frozen=True)
class SliceType:
    elem: "RustType"


@dataclass(frozen=True)
class ReferenceType:
    elem: "RustType"


@dataclass(frozen=True)
class ParenType:
    elem: "RustType"


@dataclass(frozen=True)
class BareFnType:
    inputs: tuple
    output: Optional["RustType"] = None


@dataclass(frozen=True)
class TupleType:
    elems: tuple


@dataclass(frozen=True)
class TraitObjectType:
    bounds: tuple


@dataclass(frozen=True)
class ImplTraitType:
    bounds: tuple


@dataclass(frozen=True)
class NeverType:
    pass


@dataclass(frozen=True)
class InferType:
    pass


@dataclass(frozen=True)
class PointerType:
    elem: "RustType"


RustType = Union[
    PathType,
    ArrayType,
    SliceType,
    ReferenceType,
    ParenType,
    BareFnType,
    TupleType,
    TraitObjectType,
    ImplTraitType,
    NeverType,
    InferType,
    PointerType,
]

_LEXEME_PATTERN = re.compile(
    r"""\s*(?:
        (?P<lifetime>'[A-Za-z_][A-Za-z0-9_]*)
      | (?P<str>"(?:[^"\\]|\\.)*")
      | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
      | (?P<int>[0-9][0-9A-Za-z_]*)
      | (?P<punct>::|->|[<>()\[\];,&*!+=:?{}-])
    )""",
    re.VERBOSE,
)

_INT_SUFFIXES = frozenset(
    {
        "u8", "u16", "u32", "u64", "u128", "usize",
        "i8", "i16", "i32", "i64", "i128", "isize",
    }
)


def _lex(text: str) -> list[tuple[str, str]]:
    lexemes = []
    pos = 0
    while pos < len(text):
        if text[pos:].strip() == "":
            break
        match = _LEXEME_PATTERN.match(text, pos)
        if not match or match.end() == pos:
            raise RustSyntaxError(f"unexpected character at {pos}: {text[pos:]!r}")
        kind = match.lastgroup
        lexemes.append((kind, match.group(kind)))
        pos = match.end()
    return lexemes


class _Parser:
    def __init__(self, text: str) -> None:
        self.lexemes = _lex(text)
        self.pos = 0

    def peek(self, offset: int = 0) -> tuple[str, str]:
        index = self.pos + offset
        return self.lexemes[index] if index < len(self.lexemes) else ("eof", "")

    def is_(self, text: str, offset: int = 0) -> bool:
        kind, value = self.peek(offset)
        return kind in ("punct", "ident") and value == text

    def advance(self) -> tuple[str, str]:
        current = self.peek()
        if current[0] == "eof":
            raise RustSyntaxError("unexpected end of input")
        self.pos += 1
        return current

    def expect(self, text: str) -> None:
        kind, value = self.advance()
        if value != text or kind not in ("punct", "ident"):
            raise RustSyntaxError(f"expected {text!r}, found {value!r}")

    def accept(self, text: str) -> bool:
        if self.is_(text):
            self.pos += 1
            return True
        return False

    def parse_type(self, allow_plus: bool = True) -> RustType:
        kind, value = self.peek()
        if kind == "punct":
            if value == "(":
                return self._paren_or_tuple()
            if value == "[":
                return self._array_or_slice()
            if value == "&":
                self.advance()
                if self.peek()[0] == "lifetime":
                    self.advance()
                self.accept("mut")
                return ReferenceType(self.parse_type(allow_plus=False))
            if value == "*":
                self.advance()
                if not (self.accept("const") or self.accept("mut")):
                    raise RustSyntaxError("expected 'const' or 'mut' after '*'")
                return PointerType(self.parse_type(allow_plus=False))
            if value == "!":
                self.advance()
                return NeverType()
            if value == "::":
                return self._path_or_bounds(allow_plus)
        elif kind == "ident":
            if value == "_":
                self.advance()
                return InferType()
            if value == "dyn":
                self.advance()
                return TraitObjectType(self._bounds())
            if value == "impl":
                self.advance()
                return ImplTraitType(self._bounds())
            if value in ("fn", "unsafe", "extern", "for"):
                return self._bare_fn()
            return self._path_or_bounds(allow_plus)
        raise RustSyntaxError(f"unexpected token {value!r}" if value else "empty type")

    def _paren_or_tuple(self) -> RustType:
        self.expect("(")
        if self.accept(")"):
            return TupleType(())
        first = self.parse_type()
        if self.accept(")"):
            return ParenType(first)
        elems = [first]
        while self.accept(","):
            if self.is_(")"):
                break
            elems.append(self.parse_type())
        self.expect(")")
        return TupleType(tuple(elems))

    def _array_or_slice(self) -> RustType:
        self.expect("[")
        elem = self.parse_type()
        if self.accept("]"):
            return SliceType(elem)
        self.expect(";")
        expr = []
        depth = 0
        while True:
            kind, value = self.advance()
            if kind == "punct" and value in "([{":
                depth += 1
            elif kind == "punct" and value in ")}":
                depth -= 1
            elif kind == "punct" and value == "]":
                if depth == 0:
                    break
                depth -= 1
            expr.append((kind, value))
        if not expr:
            raise RustSyntaxError("missing array length")
        return ArrayType(elem, _literal_length(expr))

    def _bare_fn(self) -> BareFnType:
        if self.accept("for"):
            self._skip_generic_params()
        self.accept("unsafe")
        if self.accept("extern"):
            if self.peek()[0] == "str":
                self.advance()
        self.expect("fn")
        self.expect("(")
        inputs = []
        while not self.is_(")"):
            if self.peek()[0] == "ident" and self.is_(":", 1):
                self.advance()
                self.advance()
            inputs.append(self.parse_type())
            if not self.accept(","):
                break
        self.expect(")")
        output = self.parse_type(allow_plus=False) if self.accept("->") else None
        return BareFnType(tuple(inputs), output)

    def _skip_generic_params(self) -> None:
        self.expect("<")
        depth = 1
        while depth:
            _, value = self.advance()
            if value == "<":
                depth += 1
            elif value == ">":
                depth -= 1

    def _bounds(self) -> tuple:
        bounds = []
        while True:
            if self.peek()[0] == "lifetime":
                self.advance()
            elif self.accept("?"):
                self._path()
            else:
                if self.accept("for"):
                    self._skip_generic_params()
                bounds.append(self._path())
            if not self.accept("+"):
                return tuple(bounds)

    def _path_or_bounds(self, allow_plus: bool) -> RustType:
        path = self._path()
        if allow_plus and self.is_("+"):
            self.advance()
            return TraitObjectType((path,) + self._bounds())
        return path

    def _path(self) -> PathType:
        self.accept("::")
        segments = [self._segment()]
        while self.is_("::"):
            self.advance()
            if self.is_("<"):
                last = segments[-1]
                segments[-1] = PathSegment(last.ident, self._angle_args())
            else:
                segments.append(self._segment())
        return PathType(tuple(segments))

    def _segment(self) -> PathSegment:
        kind, ident = self.advance()
        if kind != "ident":
            raise RustSyntaxError(f"expected identifier, found {ident!r}")
        if self.is_("<"):
            return PathSegment(ident, self._angle_args())
        if self.is_("("):
            self.advance()
            args = []
            while not self.is_(")"):
                args.append(self.parse_type())
                if not self.accept(","):
                    break
            self.expect(")")
            output = self.parse_type(allow_plus=False) if self.accept("->") else None
            return PathSegment(ident, tuple(args), output, parenthesized=True)
        return PathSegment(ident)

    def _angle_args(self) -> tuple:
        self.expect("<")
        args = []
        while not self.is_(">"):
            kind, _ = self.peek()
            if kind == "lifetime":
                self.advance()
            elif kind == "int":
                self.advance()
            elif kind == "ident" and self.is_("=", 1):
                self.advance()
                self.advance()
                args.append(self.parse_type())
            else:
                args.append(self.parse_type())
            if not self.accept(","):
                break
        self.expect(">")
        return tuple(args)


def _literal_length(expr: list[tuple[str, str]]) -> Optional[int]:
    if len(expr) != 1 or expr[0][0] != "int":
        return None
    literal = expr[0][1]
    number_part = re.match(r"[0-9_]+", literal).group()
    digits = number_part.replace("_", "")
    suffix = literal[len(number_part):]
    if suffix and suffix not in _INT_SUFFIXES:
        return None
    return int(digits) if digits else None


def parse_type(text: str) -> RustType:
    """Parse a Rust type expression into a syntax tree."""
    parser = _Parser(text)
    result = parser.parse_type()
    if parser.peek()[0] != "eof":
        raise RustSyntaxError(f"trailing input: {parser.peek()[1]!r}")
    return result