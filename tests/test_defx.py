from modelgen.defx import Field, Model, Type, TypeKind


def test_simple_type_names():
    assert str(Type(TypeKind.BOOL)) == "bool"
    assert str(Type(TypeKind.BYTES)) == "bytes"
    assert str(Type(TypeKind.FLOAT)) == "float"
    assert str(Type(TypeKind.INT)) == "int"
    assert str(Type(TypeKind.STRING)) == "string"
    assert str(Type(TypeKind.TIME)) == "time"


def test_array_type_string():
    t = Type(TypeKind.ARRAY, sub=Type(TypeKind.INT))
    assert str(t) == "[]int"


def test_map_type_string():
    t = Type(TypeKind.MAP, key=Type(TypeKind.STRING), sub=Type(TypeKind.INT))
    assert str(t) == "[string]int"


def test_model_type_string():
    assert str(Type(TypeKind.MODEL, name="User")) == "model User"


def test_ref_type_has_no_name():
    assert str(Type(TypeKind.REF)).startswith("Unknown (")


def test_field_string():
    f = Field("age", Type(TypeKind.INT))
    assert str(f) == "age: int"


def test_model_string_contains_fields():
    m = Model(3, "Person", [Field("age", Type(TypeKind.INT))])
    text = str(m)
    assert "Person" in text
    assert "age: int" in text


def test_model_defaults_to_no_fields():
    assert Model(1, "Empty").fields == []


def test_type_equality():
    a = Type(TypeKind.ARRAY, sub=Type(TypeKind.STRING))
    b = Type(TypeKind.ARRAY, sub=Type(TypeKind.STRING))
    assert a == b
    assert a != Type(TypeKind.ARRAY, sub=Type(TypeKind.INT))