"""Conversion of Rust type syntax into TypeScript types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence

from tstypegen.config import TypeGenerationConfig
from tstypegen.syntax import (
    ArrayType,
    BareFnType,
    ImplTraitType,
    InferType,
    NeverType,
    ParenType,
    PathSegment,
    PathType,
    PointerType,
    ReferenceType,
    SliceType,
    TraitObjectType,
    TupleType,
)
from tstypegen.types import (
    Array,
    Fn,
    Intersection,
    Lit,
    OptionType,
    Ref,
    Tuple,
    TsType,
    TypeElement,
    TypeLit,
    Union,
    null_type_for,
    nullish,
)

_MAX_TUPLE_LEN = 16

_SMALL_NUMBERS = frozenset({"u8", "u16", "u32", "i8", "i16", "i32", "f64", "f32"})
_LARGE_NUMBERS = frozenset({"usize", "isize", "u64", "i64"})
_HUGE_NUMBERS = frozenset({"u128", "i128"})
_STRINGS = frozenset({"String", "str", "char", "Path", "PathBuf"})
_WRAPPERS = frozenset({"Box", "Cow", "Rc", "Arc", "Cell", "RefCell"})
_SEQUENCES = frozenset({"Vec", "VecDeque", "LinkedList"})
_MAPS = frozenset({"HashMap", "BTreeMap"})
_SETS = frozenset({"HashSet", "BTreeSet"})
_RANGES = frozenset({"Range", "RangeInclusive"})
_FNS = frozenset({"Fn", "FnOnce", "FnMut"})


class Style(enum.Enum):
    """Shape of a struct or enum variant."""

    STRUCT = "struct"
    TUPLE = "tuple"
    NEWTYPE = "newtype"
    UNIT = "unit"


class TagType:
    """How an enum variant is tagged when serialized."""


@dataclass(frozen=True)
class ExternalTag(TagType):
    """The variant name wraps the content: ``{ Name: content }``."""


@dataclass(frozen=True)
class InternalTag(TagType):
    """The tag is a field inside the content."""

    tag: str


@dataclass(frozen=True)
class AdjacentTag(TagType):
    """Tag and content are sibling fields."""

    tag: str
    content: str


@dataclass(frozen=True)
class NoTag(TagType):
    """Untagged: the content stands alone."""


def _type_lit(*pairs: tuple[str, TsType]) -> TypeLit:
    return TypeLit(tuple(TypeElement(key, ty) for key, ty in pairs))


def from_rust_type(config: TypeGenerationConfig, ty) -> TsType:
    """Convert a parsed Rust type into a TypeScript type."""
    match ty:
        case ArrayType(elem, length):
            converted = from_rust_type(config, elem)
            if length is not None and length <= _MAX_TUPLE_LEN:
                return Tuple((converted,) * length)
            return Array(converted)
        case SliceType(elem):
            return Array(from_rust_type(config, elem))
        case ReferenceType(elem) | ParenType(elem):
            return from_rust_type(config, elem)
        case BareFnType(inputs, output):
            params = tuple(from_rust_type(config, arg) for arg in inputs)
            type_ann = TsType.VOID if output is None else from_rust_type(config, output)
            return Fn(params, type_ann)
        case TupleType(elems):
            if not elems:
                return nullish(config)
            return Tuple(tuple(from_rust_type(config, elem) for elem in elems))
        case PathType():
            converted = _from_path(config, ty)
            return TsType.NEVER if converted is None else converted
        case TraitObjectType(bounds) | ImplTraitType(bounds):
            elems = (_from_path(config, bound) for bound in bounds)
            return Intersection(tuple(e for e in elems if e is not None))
        case NeverType() | InferType() | PointerType():
            return TsType.NEVER
    return TsType.NEVER


def _from_path(config: TypeGenerationConfig, path: PathType) -> Optional[TsType]:
    if not path.segments:
        return None
    return _from_segment(config, path.segments[-1])


def _from_segment(config: TypeGenerationConfig, segment: PathSegment) -> TsType:
    output = segment.output if segment.parenthesized else None
    return from_name(config, segment.ident, segment.args, output)


def from_name(
    config: TypeGenerationConfig,
    ident: str,
    args: Sequence,
    fn_output=None,
) -> TsType:
    """Convert a named Rust type with its generic arguments."""
    args = tuple(args)
    count = len(args)

    def convert(arg) -> TsType:
        return from_rust_type(config, arg)

    if ident in _SMALL_NUMBERS:
        return TsType.NUMBER
    if ident in _LARGE_NUMBERS:
        if config.js and config.large_number_types_as_bigints:
            return TsType.BIGINT
        return TsType.NUMBER
    if ident in _HUGE_NUMBERS:
        return TsType.BIGINT if config.js else TsType.NUMBER
    if ident in _STRINGS:
        return TsType.STRING
    if ident == "bool":
        return TsType.BOOLEAN
    if ident in _WRAPPERS and count == 1:
        return convert(args[0])
    if ident in _SEQUENCES and count == 1:
        return Array(convert(args[0]))
    if ident in _MAPS and count == 2:
        name = "Map" if config.js and not config.hashmap_as_object else "Record"
        return Ref(name, tuple(convert(arg) for arg in args))
    if ident in _SETS and count == 1:
        return Array(convert(args[0]))
    if ident == "Option" and count == 1:
        return OptionType(convert(args[0]), null_type_for(config))
    if ident == "ByteBuf":
        if config.js:
            return Ref("Uint8Array")
        return Array(TsType.NUMBER)
    if ident == "Result" and count == 2:
        ok = _type_lit(("Ok", convert(args[0])))
        err = _type_lit(("Err", convert(args[1])))
        return Union((ok, err))
    if ident == "Duration":
        return _type_lit(("secs", TsType.NUMBER), ("nanos", TsType.NUMBER))
    if ident == "SystemTime":
        return _type_lit(
            ("secs_since_epoch", TsType.NUMBER),
            ("nanos_since_epoch", TsType.NUMBER),
        )
    # Only a single type parameter marks the standard range types; anything
    # else is taken to be a user-defined type.
    if ident in _RANGES and count == 1:
        bound = convert(args[0])
        return _type_lit(("start", bound), ("end", bound))
    if ident in _FNS:
        params = tuple(convert(arg) for arg in args)
        type_ann = TsType.VOID if fn_output is None else convert(fn_output)
        return Fn(params, type_ann)
    return Ref(config.format_name(ident), tuple(convert(arg) for arg in args))


def with_tag_type(
    ts_type: TsType,
    config: TypeGenerationConfig,
    name: str,
    style: Style,
    tag_type: TagType,
) -> TsType:
    """Wrap a variant's type according to the enum's tagging scheme."""
    if isinstance(tag_type, ExternalTag):
        if style is Style.UNIT:
            return Lit(name)
        return TypeElement(name, ts_type).as_type()
    if isinstance(tag_type, InternalTag):
        tag_field = TypeElement(tag_type.tag, Lit(name)).as_type()
        if ts_type == nullish(config):
            return tag_field
        return tag_field.intersect(ts_type)
    if isinstance(tag_type, AdjacentTag):
        tag_field = TypeElement(tag_type.tag, Lit(name))
        if style is Style.UNIT:
            return tag_field.as_type()
        return TypeLit((tag_field, TypeElement(tag_type.content, ts_type)))
    return ts_type