import pytest

from modelgen.dart import (
    dart_type_name,
    generate,
    render_codecs,
    render_models,
    render_msgs,
)
from modelgen.defx import Type, TypeKind
from modelgen.parser import parse_text

SOURCE = """
1 Person {
    name: string
    age: int
    active: bool
    tags: []string
    scores: [string]int
    grid: [][]float
    friend: Other
}
2 Other {
    when: time
    blob: bytes
    link: ref
}
"""


@pytest.fixture
def models():
    return parse_text(SOURCE)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TypeKind.BOOL, "bool"),
        (TypeKind.BYTES, "Uint8List"),
        (TypeKind.FLOAT, "double"),
        (TypeKind.INT, "int"),
        (TypeKind.REF, "ModelRef"),
        (TypeKind.STRING, "String"),
        (TypeKind.TIME, "DateTime"),
    ],
)
def test_simple_type_names(kind, expected):
    assert dart_type_name(Type(kind)) == expected


def test_model_type_name_is_model_name():
    assert dart_type_name(Type(TypeKind.MODEL, name="Widget")) == "Widget"


def test_nested_type_names():
    array = Type(TypeKind.ARRAY, sub=Type(TypeKind.INT))
    mapping = Type(TypeKind.MAP, key=Type(TypeKind.STRING), sub=array)
    assert dart_type_name(array) == "List<int>"
    assert dart_type_name(mapping) == "Map<String, List<int>>"


def test_models_header_and_classes(models):
    code = render_models(models)
    assert code.startswith("// WARNING!\n// This code was generated automatically.\n")
    assert "export 'package:flutter_model/flutter_model.dart' show ModelRef;" in code
    for m in models:
        assert f"class {m.name} {{" in code
        assert f"ObjectWriter('{m.name}')" in code
        for f in m.fields:
            assert f"required this.{f.name}," in code


def test_models_declare_field_types(models):
    code = render_models(models)
    for m in models:
        for f in m.fields:
            assert f"final {dart_type_name(f.type)} {f.name};" in code


@pytest.mark.parametrize("render", [render_models, render_codecs, render_msgs])
def test_rendered_brackets_balance(models, render):
    code = render(models)
    assert code.count("{") == code.count("}")
    assert code.count("(") == code.count(")")
    assert code.endswith("\n")


def test_codecs_bool_travels_as_int(models):
    code = render_codecs(models)
    assert "putBool" not in code
    assert "getBool" in code


def test_codecs_nested_arrays_get_one_decoder_per_level(models):
    code = render_codecs(models)
    # tags has one array level, grid has two.
    assert code.count("getArray(") == 3
    assert code.count("putArray(") == 3
    assert code.count("getMap(") == 1


def test_codecs_reference_every_field(models):
    code = render_codecs(models)
    for m in models:
        for f in m.fields:
            assert f'"{f.name}"' in code
            assert f"{f.name}: {f.name}," in code


def test_codec_names_lower_camel(models):
    code = render_codecs(models)
    assert "final personCodec = ModelCodec<Person>(" in code
    assert "otherCodec.decode(" in code


def test_msgs_dispatch_every_model(models):
    code = render_msgs(models)
    for m in models:
        assert f"e.id = {m.id};" in code
        assert f"case {m.name}():" in code
    assert "_ => throw Exception('unknown model id ${d.id}')," in code
    assert "throw Exception('unknown model ${v.runtimeType}');" in code


def test_msgs_with_no_models_keeps_defaults():
    code = render_msgs([])
    assert "case " not in code
    assert "return e.bytes;" in code


def test_generate_writes_rendered_files(tmp_path, models, capsys):
    written = generate(tmp_path, models)
    directory = tmp_path / "models"
    assert [p.name for p in written] == ["models.dart", "codecs.dart", "msgs.dart"]
    assert (directory / "models.dart").read_text(encoding="utf-8") == render_models(models)
    assert (directory / "codecs.dart").read_text(encoding="utf-8") == render_codecs(models)
    assert (directory / "msgs.dart").read_text(encoding="utf-8") == render_msgs(models)
    out = capsys.readouterr().out
    assert out.count("Creating ") == 3


def test_generate_fails_when_path_is_a_file(tmp_path, models):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        generate(blocker, models)