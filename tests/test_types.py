from tstypegen.config import TypeGenerationConfig
from tstypegen.types import (
    Array,
    Fn,
    Intersection,
    Lit,
    NullType,
    OptionType,
    Override,
    Ref,
    Tuple,
    TsType,
    TypeElement,
    TypeLit,
    Union,
    empty_type_lit,
    is_js_ident,
    null_type_for,
    nullish,
)


def test_keywords_render():
    assert str(Union((TsType.NUMBER,))) == "number"
    assert str(Array(TsType.BIGINT)) == "bigint[]"
    assert str(Fn((), TsType.VOID)) == "() => void"


def test_nullish_depends_on_config():
    assert nullish(TypeGenerationConfig()) == TsType.NULL
    assert nullish(TypeGenerationConfig(js=True)) == TsType.UNDEFINED
    assert null_type_for(TypeGenerationConfig(js=True, missing_as_null=True)) is NullType.NULL


def test_option_and_array_render():
    opt = OptionType(Ref("T"), NullType.NULL)
    assert str(opt) == "T | null"
    assert str(Array(opt)) == "(T | null)[]"
    assert str(Array(TsType.NUMBER)) == "number[]"


def test_result_union_render():
    ok = TypeElement("Ok", TsType.NUMBER).as_type()
    err = TypeElement("Err", TsType.STRING).as_type()
    assert str(Union((ok, err))) == "{ Ok: number } | { Err: string }"


def test_fn_render():
    fn = Fn((TsType.STRING, TsType.NUMBER), TsType.VOID)
    assert str(fn) == "(arg0: string, arg1: number) => void"


def test_tuple_and_empty():
    assert str(Tuple((TsType.NUMBER, TsType.STRING))) == "[number, string]"
    assert str(Tuple(())) == "[]"
    assert str(empty_type_lit()) == "{}"
    assert str(Union(())) == "void"


def test_ref_with_params():
    assert str(Ref("Record", (TsType.STRING, TsType.NUMBER))) == "Record<string, number>"


def test_intersect_type_lits_merges():
    tag = TypeElement("t", Lit("Struct")).as_type()
    body = TypeLit((TypeElement("x", TsType.STRING), TypeElement("y", TsType.NUMBER)))
    assert str(tag.intersect(body)) == '{ t: "Struct"; x: string; y: number }'


def test_intersect_with_ref_parenthesized_in_union():
    tag = TypeElement("t", Lit("Newtype")).as_type()
    combined = tag.intersect(Ref("Foo"))
    assert str(Union((combined, TsType.NULL))) == '({ t: "Newtype" } & Foo) | null'


def test_intersection_flattens():
    a, b, c = Ref("A"), Ref("B"), Ref("C")
    assert a.intersect(b).intersect(c) == Intersection((a, b, c))
    assert a.intersect(b.intersect(c)) == Intersection((a, b, c))


def test_merge_duplicate_key_intersects():
    left = TypeLit((TypeElement("k", Ref("A")),))
    right = TypeLit((TypeElement("k", Ref("B")),))
    merged = left.merge(right)
    assert merged.get("k").type_ann == Intersection((Ref("A"), Ref("B")))
    assert merged.get("missing") is None


def test_element_quoting_and_optional():
    assert str(TypeElement("foo-bar", TsType.BOOLEAN)) == '"foo-bar": boolean'
    assert str(TypeElement("a", TsType.NUMBER, optional=True)) == "a?: number"


def test_element_comments_and_indent():
    elem = TypeElement("x", TsType.NUMBER, comments=("The x coordinate.",))
    expected = "    /**\n     * The x coordinate.\n     */\n    x: number"
    assert elem.indented(4) == expected


def test_intersection_drops_comments():
    lit = TypeElement("c", TsType.NUMBER, comments=("Comment for c",)).as_type()
    assert str(Intersection((lit, Union((Ref("A"), empty_type_lit()))))) == "{ c: number } & (A | {})"


def test_is_js_ident():
    assert is_js_ident("should$not$quote")
    assert is_js_ident("should_not_quote")
    for name in ["1", "1x", "-", " ", "#", ""]:
        assert not is_js_ident(name)


def test_type_ref_names_and_refs():
    ty = Union((Ref("Test", (Ref("Foo"),)), Override("X", ("Bar",)), TsType.NUMBER))
    assert ty.type_ref_names() == {"Test", "Foo", "Bar"}
    assert ty.type_refs() == [("Test", (Ref("Foo"),)), ("Foo", ())]
    assert ty.is_ref() is False and Ref("A").is_ref() is True


def test_prefix_type_refs():
    ty = Array(Ref("Test", (Ref("Foo"), Ref("T"))))
    prefixed = ty.prefix_type_refs("__Internal", ["T"])
    assert str(prefixed) == "__InternalTest<__InternalFoo, T>[]"
    assert TsType.NUMBER.prefix_type_refs("P", []) == TsType.NUMBER


def test_walk_visits_all():
    ty = Fn((Ref("A"),), OptionType(Ref("B")))
    names = [t.name for t in ty.walk() if isinstance(t, Ref)]
    assert names == ["A", "B"]