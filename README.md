# modelgen

`modelgen` reads model definitions written in a small `.def` language. From
them it generates Dart model classes, binary codecs for those classes, and
functions that encode and decode messages by model id.

## Installing

```
pip install .
```

## Definition files

Each model has a numeric id, a name and a set of typed fields:

```
// A user record
1 User {
    name: string
    age: int
    score: float
    active: bool
    avatar: bytes
    created: time
    owner: ref
    tags: []string
    counts: [string]int
    address: Address
}

2 Address {
    street: string
}
```

The built-in types are `bool`, `bytes`, `float`, `int`, `ref`, `string` and
`time`. Any other type name refers to another model. `[]T` is a list of `T`,
and `[K]V` is a map from `K` to `V`. The key of a map must be a single type
name. Both `//` line comments and `/* ... */` block comments are allowed, and
block comments may be nested.

A model id is an integer. It may be written in decimal, as `0b…`, `0o…`, `0d…`
or `0x…`, or in octal with a leading `0`. Underscores between digits are
ignored.

## Parsing

```python
from modelgen.parser import parse_text, parse_file, ParseError

models = parse_text("1 Point { x: int y: int }", "point.def")
models = parse_file("defs/user.def")
```

Both functions return a list of `modelgen.defx.Model` objects. Each has an
`id`, a `name` and a list of `Field`s. Each field has a `name` and a
`Type`, whose `kind` is a `TypeKind`. The path given to `parse_text` is used
only in error messages.

A syntax error raises `ParseError`. Its `message`, `path` and `line`
attributes describe the problem, and `excerpt` holds the offending source line
with the bad token marked by `^`. `str(error)` combines them as
`/absolute/path:LINE : message` followed by the excerpt.

The lower layers can be used directly as well. `modelgen.lexer.tokenize(text)`
yields every `Token`, spaces and comments included, and ends with an EOF
token. `modelgen.codewriter.GenWriter` is the indenting line writer that the
generator uses.

## Generating Dart

```python
from modelgen import dart

print(dart.render_models(models))   # models.dart
print(dart.render_codecs(models))   # codecs.dart
print(dart.render_msgs(models))     # msgs.dart

dart.generate("out", models)
```

`dart.generate(path, models)` creates `path/models/` if needed and writes
`models.dart`, `codecs.dart` and `msgs.dart` there. It prints a
`Creating <file>` line for each file and returns the paths written. When a
directory or file cannot be written, it raises `OSError`.
`dart.dart_type_name(type_)` gives the Dart spelling of a field type, for
example `Map<String, List<int>>`.

The generated code imports `package:flutter_model` and `package:flutter_msgs`.
Those packages must be available to the Dart project.

## What this package does not do

- It has no command-line program. Parsing and generation are done by calling
  the functions above from Python. Finding `.def` files in a directory is also
  left to the caller.
- It generates Dart only. There is no Go output.
- String literals in definitions cannot contain escape sequences. A backslash
  inside a string is reported as an error.