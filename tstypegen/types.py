"""TypeScript type model and its rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Iterator, Optional

from tstypegen.config import TypeGenerationConfig


class KeywordKind(enum.Enum):
    """Built-in TypeScript types."""

    NUMBER = "number"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    STRING = "string"
    VOID = "void"
    UNDEFINED = "undefined"
    NULL = "null"
    NEVER = "never"


class NullType(enum.Enum):
    """How a missing value is represented."""

    NULL = "null"
    UNDEFINED = "undefined"

    def to_type(self) -> "TsType":
        return TsType.NULL if self is NullType.NULL else TsType.UNDEFINED


def null_type_for(config: TypeGenerationConfig) -> NullType:
    if config.js and not config.missing_as_null:
        return NullType.UNDEFINED
    return NullType.NULL


def nullish(config: TypeGenerationConfig) -> "TsType":
    return null_type_for(config).to_type()


def is_js_ident(name: str) -> bool:
    """Whether ``name`` can be used as an unquoted property key."""
    return (
        bool(name)
        and not ("0" <= name[0] <= "9")
        and all(c.isascii() and (c.isalnum() or c in "_$") for c in name)
    )


def _doc_comment(comments) -> str:
    if not comments:
        return ""
    body = "".join(f" * {line}".rstrip() + "\n" for line in comments)
    return f"/**\n{body} */\n"


class TsType:
    """Base of all TypeScript types."""

    NUMBER: "TsType"
    BIGINT: "TsType"
    BOOLEAN: "TsType"
    STRING: "TsType"
    VOID: "TsType"
    UNDEFINED: "TsType"
    NULL: "TsType"
    NEVER: "TsType"

    def is_ref(self) -> bool:
        return isinstance(self, Ref)

    def intersect(self, other: "TsType") -> "TsType":
        """Combine two types into an intersection, merging type literals."""
        if isinstance(self, TypeLit) and isinstance(other, TypeLit):
            return self.merge(other)
        left = self.types if isinstance(self, Intersection) else (self,)
        right = other.types if isinstance(other, Intersection) else (other,)
        return Intersection(left + right)

    def _children(self) -> tuple:
        return ()

    def walk(self) -> Iterator["TsType"]:
        """Yield this type and every nested type, depth first."""
        yield self
        for child in self._children():
            yield from child.walk()

    def type_ref_names(self) -> set[str]:
        names: set[str] = set()
        for ty in self.walk():
            if isinstance(ty, Ref):
                names.add(ty.name)
            elif isinstance(ty, Override):
                names.update(ty.type_params)
        return names

    def prefix_type_refs(self, prefix: str, exceptions) -> "TsType":
        """Return a copy with referenced type names prefixed, except ``exceptions``."""
        return self

    def type_refs(self) -> list[tuple[str, tuple]]:
        """List every referenced type with its parameters, in order."""
        refs: list[tuple[str, tuple]] = []
        for ty in self.walk():
            if isinstance(ty, Ref):
                refs.append((ty.name, ty.type_params))
        return refs


@dataclass(frozen=True)
class Keyword(TsType):
    kind: KeywordKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Lit(TsType):
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Array(TsType):
    elem: TsType

    def _children(self):
        return (self.elem,)

    def prefix_type_refs(self, prefix, exceptions):
        return Array(self.elem.prefix_type_refs(prefix, exceptions))

    def __str__(self) -> str:
        if isinstance(self.elem, (Union, Intersection, OptionType)):
            return f"({self.elem})[]"
        return f"{self.elem}[]"


@dataclass(frozen=True)
class Tuple(TsType):
    elems: tuple = ()

    def _children(self):
        return self.elems

    def prefix_type_refs(self, prefix, exceptions):
        return Tuple(tuple(t.prefix_type_refs(prefix, exceptions) for t in self.elems))

    def __str__(self) -> str:
        return "[" + ", ".join(map(str, self.elems)) + "]"


@dataclass(frozen=True)
class OptionType(TsType):
    elem: TsType
    null: NullType = NullType.NULL

    def _children(self):
        return (self.elem,)

    def prefix_type_refs(self, prefix, exceptions):
        return OptionType(self.elem.prefix_type_refs(prefix, exceptions), self.null)

    def __str__(self) -> str:
        return f"{self.elem} | {self.null.to_type()}"


@dataclass(frozen=True)
class Ref(TsType):
    name: str
    type_params: tuple = ()

    def _children(self):
        return self.type_params

    def prefix_type_refs(self, prefix, exceptions):
        name = self.name if self.name in exceptions else f"{prefix}{self.name}"
        params = tuple(t.prefix_type_refs(prefix, exceptions) for t in self.type_params)
        return Ref(name, params)

    def __str__(self) -> str:
        if not self.type_params:
            return self.name
        return f"{self.name}<" + ", ".join(map(str, self.type_params)) + ">"


@dataclass(frozen=True)
class Fn(TsType):
    params: tuple
    type_ann: TsType

    def _children(self):
        return self.params + (self.type_ann,)

    def prefix_type_refs(self, prefix, exceptions):
        return Fn(
            tuple(t.prefix_type_refs(prefix, exceptions) for t in self.params),
            self.type_ann.prefix_type_refs(prefix, exceptions),
        )

    def __str__(self) -> str:
        params = ", ".join(f"arg{i}: {p}" for i, p in enumerate(self.params))
        return f"({params}) => {self.type_ann}"


@dataclass(frozen=True)
class TypeElement:
    """A member of a type literal."""

    key: str
    type_ann: TsType
    optional: bool = False
    comments: tuple = field(default=())

    def __str__(self) -> str:
        optional = "?" if self.optional else ""
        key = self.key if is_js_ident(self.key) else f'"{self.key}"'
        return f"{_doc_comment(self.comments)}{key}{optional}: {self.type_ann}"

    def indented(self, indent: int) -> str:
        pad = " " * indent
        return "\n".join(pad + line for line in str(self).split("\n"))

    def as_type(self) -> "TypeLit":
        return TypeLit((self,))


@dataclass(frozen=True)
class TypeLit(TsType):
    members: tuple = ()

    def _children(self):
        return tuple(m.type_ann for m in self.members)

    def get(self, key: str) -> Optional[TypeElement]:
        return next((m for m in self.members if m.key == key), None)

    def merge(self, other: "TypeLit") -> "TypeLit":
        """Join members; a repeated key gets the intersection of both types."""
        merged: list[TypeElement] = []
        for member in self.members + other.members:
            for position, existing in enumerate(merged):
                if existing.key == member.key:
                    merged[position] = replace(
                        existing, type_ann=existing.type_ann.intersect(member.type_ann)
                    )
                    break
            else:
                merged.append(member)
        return TypeLit(tuple(merged))

    def prefix_type_refs(self, prefix, exceptions):
        return TypeLit(
            tuple(
                replace(m, type_ann=m.type_ann.prefix_type_refs(prefix, exceptions))
                for m in self.members
            )
        )

    def __str__(self) -> str:
        if not self.members:
            return "{}"
        return "{ " + "; ".join(map(str, self.members)) + " }"


@dataclass(frozen=True)
class Intersection(TsType):
    types: tuple = ()

    def _children(self):
        return self.types

    def prefix_type_refs(self, prefix, exceptions):
        return Intersection(tuple(t.prefix_type_refs(prefix, exceptions) for t in self.types))

    def __str__(self) -> str:
        if len(self.types) == 1:
            return str(self.types[0])
        parts = []
        for ty in self.types:
            if isinstance(ty, Union):
                parts.append(f"({ty})")
            elif isinstance(ty, TypeLit):
                # Intersections render on one line, so comments are dropped.
                parts.append(
                    str(TypeLit(tuple(replace(m, comments=()) for m in ty.members)))
                )
            else:
                parts.append(str(ty))
        return " & ".join(parts)


@dataclass(frozen=True)
class Union(TsType):
    types: tuple = ()

    def _children(self):
        return self.types

    def prefix_type_refs(self, prefix, exceptions):
        return Union(tuple(t.prefix_type_refs(prefix, exceptions) for t in self.types))

    def __str__(self) -> str:
        if not self.types:
            return "void"
        if len(self.types) == 1:
            return str(self.types[0])
        return " | ".join(
            f"({ty})" if isinstance(ty, Intersection) else str(ty) for ty in self.types
        )


@dataclass(frozen=True)
class Override(TsType):
    type_override: str
    type_params: tuple = ()

    def __str__(self) -> str:
        return self.type_override


TsType.NUMBER = Keyword(KeywordKind.NUMBER)
TsType.BIGINT = Keyword(KeywordKind.BIGINT)
TsType.BOOLEAN = Keyword(KeywordKind.BOOLEAN)
TsType.STRING = Keyword(KeywordKind.STRING)
TsType.VOID = Keyword(KeywordKind.VOID)
TsType.UNDEFINED = Keyword(KeywordKind.UNDEFINED)
TsType.NULL = Keyword(KeywordKind.NULL)
TsType.NEVER = Keyword(KeywordKind.NEVER)


def empty_type_lit() -> TypeLit:
    return TypeLit(())