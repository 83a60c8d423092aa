# tstypegen

`tstypegen` turns Rust type expressions into TypeScript type annotations.
It follows the conventions serde uses to encode values: `Option<T>` becomes
`T | null`, `Vec<T>` becomes `T[]`, `HashMap<K, V>` becomes `Record<K, V>`,
`Result<T, E>` becomes `{ Ok: T } | { Err: E }`, and so on.

## Installation

```
pip install .
```

Install the test extra with `pip install .[test]` and run the suite with `pytest`.

## Usage

Parse a Rust type with `tstypegen.syntax.parse_type`, then convert it with
`tstypegen.conversion.from_rust_type`. Call `str()` on the result to get
the TypeScript text.

```python
from tstypegen.config import TypeGenerationConfig
from tstypegen.conversion import from_rust_type
from tstypegen.syntax import parse_type

config = TypeGenerationConfig()

str(from_rust_type(config, parse_type("Option<i32>")))
# 'number | null'
str(from_rust_type(config, parse_type("Vec<Option<T>>")))
# '(T | null)[]'
str(from_rust_type(config, parse_type("[i32; 4]")))
# '[number, number, number, number]'
str(from_rust_type(config, parse_type("dyn Fn(String) -> i32")))
# '(arg0: string) => number'
```

Fixed-size arrays of up to 16 elements become tuples; longer ones, or ones
whose length is not a plain integer literal, become arrays. The unit type
`()` becomes the missing-value type. Names the converter does not know
become references to user-defined types. A type that `parse_type` cannot
read raises `RustSyntaxError`.

### Configuration

`TypeGenerationConfig` is a frozen dataclass with these fields:

- `js` (default `False`): use the JavaScript-value model instead of the JSON
  model. With it, missing values are `undefined`, maps are `Map<K, V>`,
  128-bit integers are `bigint` and `ByteBuf` is `Uint8Array`.
- `missing_as_null`: with `js`, show missing values as `null` anyway.
- `hashmap_as_object`: with `js`, show maps as `Record<K, V>` anyway.
- `large_number_types_as_bigints`: with `js`, show `u64`, `i64`, `usize`
  and `isize` as `bigint`.
- `type_prefix` / `type_suffix`: added to the names of user-defined types.
  `TypeGenerationConfig.format_name` applies them.

```python
js = TypeGenerationConfig(js=True)
str(from_rust_type(js, parse_type("Option<i32>")))
# 'number | undefined'
str(from_rust_type(js, parse_type("HashMap<String, i32>")))
# 'Map<string, number>'

prefixed = TypeGenerationConfig(type_prefix="Pre")
str(from_rust_type(prefixed, parse_type("Vec<MyType>")))
# 'PreMyType[]'
```

### Building types directly

The module `tstypegen.types` has the TypeScript type model: `Keyword`, `Lit`,
`Array`, `Tuple`, `OptionType`, `Ref`, `Fn`, `TypeLit`, `TypeElement`,
`Intersection`, `Union` and `Override`, all subclasses of `TsType` except
`TypeElement`, which is a member of a `TypeLit`. Keyword types are available
as `TsType.NUMBER`, `TsType.STRING` and so on.

- `TsType.intersect` combines two types; two type literals are merged
  member by member (see `TypeLit.merge`).
- `TsType.walk` yields a type and every nested type, depth first.
- `TsType.type_ref_names` and `TsType.type_refs` collect referenced type names.
- `TsType.prefix_type_refs` returns a copy with referenced names prefixed,
  except the given exceptions.
- `is_js_ident` tells whether a property key can be written unquoted.

### Enum tagging

`tstypegen.conversion.with_tag_type` wraps a variant's type the way serde
tags enums. The tag representations are `ExternalTag`, `InternalTag`,
`AdjacentTag` and `NoTag`; the variant shape is described by `Style`.

```python
from tstypegen.conversion import InternalTag, Style, with_tag_type
from tstypegen.types import Ref

str(with_tag_type(Ref("Foo"), config, "Newtype", Style.NEWTYPE, InternalTag("t")))
# '{ t: "Newtype" } & Foo'
```

## What it does not do

`tstypegen` works on single type expressions only. It does not read Rust
source files, struct or enum definitions, doc comments or serde attributes,
and it does not write complete declarations such as `export interface` or
`export type` statements. It has no command-line tool.