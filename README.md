# protocodegen

Helpers for turning Protocol Buffers descriptors into generated source code.

The package collects the pieces a code generator needs around `protoc`. It has
no third-party dependencies.

## Modules

- `protocodegen.ident`: identifier handling.
  - `to_snake(s)` converts camelCase or SCREAMING_SNAKE_CASE to lower_snake.
  - `to_upper_camel(s)` converts to UpperCamel.
  - `sanitize_identifier(s)` escapes reserved keywords (`r#type`, `self_`) and
    prefixes names that start with a digit with `_`.
  - `strip_enum_prefix(prefix, name)` removes an enum's name from the front
    of a value name. It only does so when what is left starts with an
    uppercase letter.
- `protocodegen.c_escaping`: `unescape_c_escape_string(s)` decodes the
  C-escaped default values that `protoc` emits for `bytes` fields and returns
  `bytes`. Malformed input raises `InvalidEscapeError`, a `ValueError`.
- `protocodegen.output_types`: the `MapType` enum (`HASH_MAP`, `BTREE_MAP`)
  and the `BytesType` enum (`VEC`, `BYTES`). Each has `annotation()` and
  `rust_type()`.
- `protocodegen.syntax`: the `Syntax` enum (`PROTO2`, `PROTO3`).
  `parse_syntax(value)` treats `None` as proto2 and raises `ValueError` for
  an unknown value.
- `protocodegen.protoc`: locates the compiler.
  - `protoc_from_env()` returns the `PROTOC` path, or `protoc` if it is unset.
  - `protoc_include_from_env()` returns the `PROTOC_INCLUDE` directory, or
    `None` if it is unset. It raises `FileNotFoundError` or
    `NotADirectoryError` when the path is unusable.
  - `error_message_protoc_not_found()` gives the message reported when
    `protoc` is missing.
- `protocodegen.loader`: `load_descriptor_set(protos, includes, ...)` runs
  `protoc --include_imports` to produce a `FileDescriptorSet`. With
  `skip_protoc_run=True` it reads an existing set from
  `file_descriptor_set_path` instead. Either way it checks that the data is
  well-formed protobuf and returns the raw bytes. Any failure raises
  `ProtocError`: `protoc` missing or failing, a file that cannot be read, or
  malformed data.
- `protocodegen.includes`:
  - `write_includes(modules, file_names, basepath=None)` returns the text of a
    file of nested `pub mod` blocks, each including one module's generated
    file.
  - `write_file_if_changed(path, content)` writes only when the content
    differs. It returns `True` if it wrote.
- `protocodegen.extern_paths`: `ExternPaths(paths, prost_types)` maps fully
  qualified Protobuf paths to externally provided types. `resolve_ident`
  returns the substituted path, or `None` if there is none. With
  `prost_types=True` the Protobuf well-known types are mapped too. Invalid or
  duplicate paths raise `ExternPathError`. `validate_proto_path` checks a
  single path.
- `protocodegen.ast`: the dataclasses `Location`, `Comments`, `Method` and
  `Service`, and the function `get_lines`.
  - `Comments.from_location` collects the comments at a location.
  - `Comments.append_with_indent(level)` returns them rendered as `//` and
    `///` doc comments. URLs are wrapped in `<...>`, bare `[...]` are escaped,
    and each indent level is four spaces.

## Example

```python
from protocodegen.ident import to_snake, to_upper_camel
from protocodegen.extern_paths import ExternPaths
from protocodegen.ast import Comments

to_snake("XMLHttpRequest")      # "xml_http_request"
to_upper_camel("FOO_BAR")       # "FooBar"

paths = ExternPaths([(".foo", "::foo1")], prost_types=True)
paths.resolve_ident(".foo.Foo")                   # "::foo1::Foo"
paths.resolve_ident(".google.protobuf.Duration")  # "::prost_types::Duration"

comments = Comments(leading_detached=[], leading=[], trailing=["foo [bar] baz"])
comments.append_with_indent(0)  # "/// foo \\[bar\\] baz\n"
```

## Environment

- `PROTOC` names the `protoc` executable. If it is unset, `protoc` is looked
  up on `PATH`.
- `PROTOC_INCLUDE` names an extra include directory. It is passed after your
  own include directories.

## What this package does not do

- It does not turn a descriptor set into message structs, enums or services.
  It provides the helpers such a generator uses, not the generator itself.
- `load_descriptor_set` checks that the descriptor set is well-formed but
  does not parse it into descriptor objects. You get the raw bytes.
- There is no command-line program. Everything is used as a library.

## Running the tests

```
pip install -e .[test]
pytest
```