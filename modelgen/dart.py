"""Generates Dart model classes, codecs and message dispatch from definitions."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from .codewriter import GenWriter
from .defx import Field, Model, Type, TypeKind

_INDENT = "  "

_SIMPLE_NAMES = {
    TypeKind.BOOL: "bool",
    TypeKind.BYTES: "Uint8List",
    TypeKind.FLOAT: "double",
    TypeKind.INT: "int",
    TypeKind.REF: "ModelRef",
    TypeKind.STRING: "String",
    TypeKind.TIME: "DateTime",
}

_GETTERS = {
    TypeKind.BOOL: "getBool",
    TypeKind.BYTES: "getBytes",
    TypeKind.FLOAT: "getFloat",
    TypeKind.INT: "getInt",
    TypeKind.REF: "getRef",
    TypeKind.STRING: "getString",
    TypeKind.TIME: "getTime",
}

# Booleans travel as integers on the wire.
_PUTTERS = {
    TypeKind.BOOL: "Int",
    TypeKind.BYTES: "Bytes",
    TypeKind.FLOAT: "Float",
    TypeKind.INT: "Int",
    TypeKind.REF: "Ref",
    TypeKind.STRING: "String",
    TypeKind.TIME: "Time",
}

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z0-9]+")


def _camel(name: str) -> str:
    words = [w for part in re.split(r"[^A-Za-z0-9]+", name) for w in _WORD.findall(part)]
    if not words:
        return name
    return words[0].lower() + "".join(w.capitalize() for w in words[1:])


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


@dataclass
class _DartType:
    kind: TypeKind
    name: str
    level: int
    key: _DartType | None = None
    sub: _DartType | None = None

    @classmethod
    def build(cls, t: Type, level: int = 0) -> _DartType:
        if t.kind == TypeKind.ARRAY:
            sub = cls.build(t.sub, level + 1)
            return cls(t.kind, f"List<{sub.name}>", level, sub=sub)
        if t.kind == TypeKind.MAP:
            key = cls.build(t.key, level + 1)
            sub = cls.build(t.sub, level + 1)
            return cls(t.kind, f"Map<{key.name}, {sub.name}>", level, key=key, sub=sub)
        if t.kind == TypeKind.MODEL:
            return cls(t.kind, t.name, level)
        return cls(t.kind, _SIMPLE_NAMES.get(t.kind, ""), level)

    def decode(self, w: GenWriter, source: str, target: str) -> str:
        """Write statements decoding a value into target; return the variable name."""
        if source:
            source = _quote(source)
        if self.level > 0:
            target += str(self.level - 1)
        decoder = "d" if self.level == 0 else f"d{self.level - 1}"
        d = f"d{self.level}"
        i = f"i{self.level}"

        if self.kind == TypeKind.ARRAY:
            w.put(f"final {target} = <{self.sub.name}>[];")
            w.inc("{")
            w.put(f"final {d} = {decoder}.getArray({source});")
            w.inc(f"for (int {i} = 0; {i} < {d}.length; {i}++) {{")
            v = self.sub.decode(w, "", "v")
            w.put(f"{target}.add({v});")
            w.dec("}")
            w.dec("}")
        elif self.kind == TypeKind.MAP:
            w.put(f"final {target} = <{self.key.name},{self.sub.name}>{{}};")
            w.inc("{")
            w.put(f"final {d} = {decoder}.getMap({source});")
            w.inc(f"for (int {i} = 0; {i} < {d}.length; {i}++) {{")
            k = self.key.decode(w, "", "k")
            v = self.sub.decode(w, "", "v")
            w.put(f"{target}[{k}] = {v};")
            w.dec("}")
            w.dec("}")
        elif self.kind == TypeKind.MODEL:
            w.put(f"{self.name} {target};")
            w.inc("{")
            w.put(f"final {d} = {decoder}.getObject({source});")
            w.put(f"{target} = {_camel(self.name)}Codec.decode({d});")
            w.dec("}")
        elif self.kind in _GETTERS:
            w.put(f"final {target} = {decoder}.{_GETTERS[self.kind]}({source});")
        return target

    def encode(self, w: GenWriter, source: str, target: str) -> None:
        """Write statements encoding the expression source under the name target."""
        encoder = "e" if self.level == 0 else f"e{self.level - 1}"
        e = f"e{self.level}"

        def method(kind: str, value: str) -> str:
            if target and value:
                args = f"{_quote(target)}, {value}"
            elif target:
                args = _quote(target)
            else:
                args = value
            return f"put{kind}({args})"

        if self.kind == TypeKind.ARRAY:
            w.inc("{")
            w.put(f"final {e} = {encoder}.{method('Array', f'{source}.length')};")
            v = f"v{self.level}"
            w.inc(f"for (final {v} in {source}) {{")
            self.sub.encode(w, v, "")
            w.dec("}")
            w.dec("}")
        elif self.kind == TypeKind.MAP:
            w.inc("{")
            w.put(f"final {e} = {encoder}.{method('Map', f'{source}.length')};")
            p = f"p{self.level}"
            w.inc(f"for (final {p} in {source}.entries) {{")
            self.key.encode(w, f"{p}.key", "")
            self.sub.encode(w, f"{p}.value", "")
            w.dec("}")
            w.dec("}")
        elif self.kind == TypeKind.MODEL:
            w.inc("{")
            w.put(f"final {e} = {encoder}.{method('Object', '')};")
            w.put(f"{_camel(self.name)}Codec.encode({e}, {source});")
            w.dec("}")
        elif self.kind in _PUTTERS:
            w.put(f"{encoder}.{method(_PUTTERS[self.kind], source)};")


@dataclass
class _DartField:
    name: str
    orig: str
    type: _DartType

    @classmethod
    def build(cls, f: Field) -> _DartField:
        return cls(f.name, f.name, _DartType.build(f.type, 0))


@dataclass
class _DartModel:
    id: int
    name: str
    fields: list[_DartField]

    @classmethod
    def build(cls, m: Model) -> _DartModel:
        return cls(m.id, m.name, [_DartField.build(f) for f in m.fields])

    @property
    def codec(self) -> str:
        return f"{_camel(self.name)}Codec"

    def write_class(self, w: GenWriter) -> None:
        w.inc(f"class {self.name} {{")
        for f in self.fields:
            w.put(f"final {f.type.name} {f.name};")
        w.put("")
        w.inc(f"const {self.name}({{")
        for f in self.fields:
            w.put(f"required this.{f.name},")
        w.dec("});")
        w.put("")
        w.put("@override")
        w.inc("String toString() =>")
        w.inc(f"ObjectWriter('{self.name}')")
        for f in self.fields:
            w.put(f".field('{f.name}', {f.name})")
        w.put(".toString();")
        w.dec("")
        w.dec("")
        w.dec("}")

    def write_codec(self, w: GenWriter) -> None:
        w.inc(f"final {self.codec} = ModelCodec<{self.name}>(")
        w.inc("decode: (d) {")
        for f in self.fields:
            f.type.decode(w, f.orig, f.name)
        w.inc(f"return {self.name}(")
        for f in self.fields:
            w.put(f"{f.name}: {f.name},")
        w.dec(");")
        w.dec("},")
        w.inc("encode: (e, m) {")
        for f in self.fields:
            f.type.encode(w, f"m.{f.name}", f.orig)
        w.dec("},")
        w.dec(");")


def _header(w: GenWriter) -> None:
    w.put("// WARNING!")
    w.put("// This code was generated automatically.")


def dart_type_name(type_: Type) -> str:
    """The Dart spelling of a field type."""
    return _DartType.build(type_).name


def render_models(models: list[Model]) -> str:
    """Render the Dart source declaring a class for each model."""
    w = GenWriter(_INDENT)
    _header(w)
    w.put("import 'package:flutter_model/flutter_model.dart';")
    w.put("")
    w.put("// For convenience")
    w.put("export 'package:flutter_model/flutter_model.dart' show ModelRef;")
    for m in models:
        w.put("")
        _DartModel.build(m).write_class(w)
    return w.code()


def render_codecs(models: list[Model]) -> str:
    """Render the Dart source defining a codec for each model."""
    w = GenWriter(_INDENT)
    _header(w)
    w.put("import 'package:flutter_model/flutter_model.dart';")
    w.put("import 'models.dart';")
    for m in models:
        w.put("")
        _DartModel.build(m).write_codec(w)
    return w.code()


def render_msgs(models: list[Model]) -> str:
    """Render the Dart source that encodes and decodes messages by model id."""
    ms = [_DartModel.build(m) for m in models]
    w = GenWriter(_INDENT)
    _header(w)
    w.put("import 'package:flutter_msgs/flutter_msgs.dart';")
    w.put("import 'codecs.dart';")
    w.put("import 'models.dart';")
    w.put("")
    w.inc("dynamic decodeMsg(Uint8List b) {")
    w.put("final d = MsgDecoder(b);")
    w.inc("return switch (d.id) {")
    for m in ms:
        w.put(f"{m.id} => {m.codec}.decode(d),")
    w.put("_ => throw Exception('unknown model id ${d.id}'),")
    w.dec("};")
    w.dec("}")
    w.put("")
    w.inc("Uint8List encodeMsg(dynamic v) {")
    w.put("final e = MsgEncoder();")
    w.inc("switch (v) {")
    for m in ms:
        w.inc(f"case {m.name}():")
        w.put(f"e.id = {m.id};")
        w.put(f"{m.codec}.encode(e, v);")
        w.dec("")
    w.inc("default:")
    w.put("throw Exception('unknown model ${v.runtimeType}');")
    w.dec("")
    w.dec("}")
    w.put("return e.bytes;")
    w.dec("}")
    return w.code()


def _save(directory: Path, name: str, code: str) -> Path:
    file = directory / name
    print(f"Creating {file}")
    try:
        file.write_text(code, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"can't create {file}: {exc}") from exc
    return file


def generate(path, models: list[Model]) -> list[Path]:
    """Write models.dart, codecs.dart and msgs.dart under path/models."""
    directory = Path(path) / "models"
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"can't create {directory}: {exc}") from exc
    return [
        _save(directory, "models.dart", render_models(models)),
        _save(directory, "codecs.dart", render_codecs(models)),
        _save(directory, "msgs.dart", render_msgs(models)),
    ]