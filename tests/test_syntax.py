import pytest

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
    RustSyntaxError,
    SliceType,
    TraitObjectType,
    TupleType,
    parse_type,
)


def simple(name):
    return PathType((PathSegment(name),))


def test_simple_path():
    assert parse_type("i32") == simple("i32")


def test_generic_path():
    assert parse_type("Vec<i32>") == PathType((PathSegment("Vec", (simple("i32"),)),))


def test_qualified_path_keeps_segments():
    ty = parse_type("std::collections::HashMap<String, i32>")
    assert [s.ident for s in ty.segments] == ["std", "collections", "HashMap"]
    assert ty.segments[-1].args == (simple("String"), simple("i32"))


def test_lifetimes_skipped_in_args():
    ty = parse_type("Cow<'a, str>")
    assert ty.segments[0].args == (simple("str"),)


def test_unit_and_paren_and_tuple():
    assert parse_type("()") == TupleType(())
    assert parse_type("(i32)") == ParenType(simple("i32"))
    assert parse_type("(i32,)") == TupleType((simple("i32"),))
    assert parse_type("(i32, bool)") == TupleType((simple("i32"), simple("bool")))


def test_array_lengths():
    assert parse_type("[i32; 4]") == ArrayType(simple("i32"), 4)
    assert parse_type("[i32; 1 + 1]") == ArrayType(simple("i32"), None)
    assert parse_type("[i32]") == SliceType(simple("i32"))


def test_reference_and_pointer():
    assert parse_type("&'a mut [u8]") == ReferenceType(SliceType(simple("u8")))
    assert parse_type("*const u8") == PointerType(simple("u8"))


def test_never_and_infer():
    assert parse_type("!") == NeverType()
    assert parse_type("_") == InferType()


def test_dyn_fn_with_output():
    ty = parse_type("dyn Fn(String) -> i32 + Send + 'static")
    fn_segment = ty.bounds[0].segments[0]
    assert isinstance(ty, TraitObjectType)
    assert fn_segment.parenthesized
    assert fn_segment.args == (simple("String"),)
    assert fn_segment.output == simple("i32")
    assert ty.bounds[1] == simple("Send")


def test_impl_trait():
    assert parse_type("impl Clone") == ImplTraitType((simple("Clone"),))


def test_bare_fn():
    ty = parse_type("fn(x: u8, bool) -> String")
    assert ty == BareFnType((simple("u8"), simple("bool")), simple("String"))


def test_assoc_type_argument():
    ty = parse_type("Iterator<Item = u8>")
    assert ty.segments[0].args == (simple("u8"),)


@pytest.mark.parametrize("text", ["", "Vec<", "(i32", "[i32; ]", "i32 i32", "#"])
def test_errors(text):
    with pytest.raises(RustSyntaxError):
        parse_type(text)