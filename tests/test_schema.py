from ogen import schema as s
from ogen.schema import Discriminator, Items, NamedSchema, Property, Schema


def _pet_schema() -> NamedSchema:
    return NamedSchema(
        Schema()
        .set_description("A Pet")
        .add_required_properties(
            s.integer().to_property("required_Int"),
            s.int32().to_property("required_Int32"),
            s.int64().to_property("required_Int64"),
            s.float_().to_property("required_Float"),
            s.double().to_property("required_Double"),
            s.string().to_property("required_String"),
            s.bytes_().to_property("required_Bytes"),
            s.binary().to_property("required_Binary"),
            s.boolean().to_property("required_Bool"),
            s.date().to_property("required_Date"),
            s.date_time().to_property("required_DateTime"),
            s.password().to_property("required_Password"),
            s.int32().as_array().to_property("required_array_Int32"),
            s.int32().as_enum("0", "0", "1").to_property("required_enum_Int32"),
            s.int32().as_enum('"off"', '"0"', '"1"').to_property("required_enum_String"),
        )
        .add_optional_properties(
            s.uuid_().to_property("optional_UUID"),
            s.int32().to_property("optional_Int32"),
            s.string().to_property("optional_String"),
        ),
        "Pet",
    )


def test_pet_schema_required_and_types():
    pet = _pet_schema()
    assert pet.name == "Pet"
    sc = pet.schema
    assert sc.type == "object"
    assert sc.description == "A Pet"
    assert len(sc.properties) == 18
    assert len(sc.required) == 15
    assert sc.required[0] == "required_Int"
    assert sc.required[-1] == "required_enum_String"
    assert "optional_UUID" not in sc.required
    by_name = {p.name: p.schema for p in sc.properties}
    assert by_name["required_Int32"] == Schema(type="integer", format="int32")
    assert by_name["required_DateTime"] == Schema(type="string", format="date-time")
    assert by_name["required_Bytes"] == Schema(type="string", format="byte")
    assert by_name["optional_UUID"] == Schema(type="string", format="uuid")
    assert by_name["required_array_Int32"] == Schema(
        type="array", items=Items(item=Schema(type="integer", format="int32"))
    )
    assert by_name["required_enum_Int32"] == Schema(type="integer", default="0", enum=["0", "1"])
    assert by_name["required_enum_String"] == Schema(
        type="integer", default='"off"', enum=['"0"', '"1"']
    )


def test_response_schema_properties():
    sc = Schema().set_description("Success").add_optional_properties(
        s.int32().to_property("prop1"),
        s.string().to_property("prop2"),
    )
    assert sc == Schema(
        type="object",
        description="Success",
        properties=[
            Property(name="prop1", schema=Schema(type="integer", format="int32")),
            Property(name="prop2", schema=Schema(type="string")),
        ],
    )


def test_all_setters():
    expected = Schema(
        ref="ref",
        description="desc",
        type="object",
        format="",
        properties=[Property(name="prop")],
        required=["prop"],
        items=Items(item=s.string()),
        nullable=True,
        all_of=[Schema()],
        one_of=[Schema()],
        any_of=[Schema()],
        discriminator=Discriminator(property_name="prop"),
        enum=["0", "1"],
        multiple_of="1",
        maximum="2",
        exclusive_maximum=True,
        minimum="2",
        exclusive_minimum=True,
        max_length=2,
        min_length=2,
        pattern="",
        max_items=2,
        min_items=2,
        unique_items=True,
        max_properties=2,
        min_properties=2,
        default="0",
    )
    actual = (
        Schema()
        .set_ref("ref")
        .set_description("desc")
        .set_type("string")
        .set_format("")
        .set_properties([Property(name="prop")])
        .set_required(["prop"])
        .set_items(s.string())
        .set_nullable(True)
        .set_all_of([Schema()])
        .set_one_of([Schema()])
        .set_any_of([Schema()])
        .set_discriminator(Discriminator(property_name="prop"))
        .set_enum(["0", "1"])
        .set_multiple_of(1)
        .set_maximum(2)
        .set_exclusive_maximum(True)
        .set_minimum(2)
        .set_exclusive_minimum(True)
        .set_max_length(2)
        .set_min_length(2)
        .set_pattern("")
        .set_max_items(2)
        .set_min_items(2)
        .set_unique_items(True)
        .set_max_properties(2)
        .set_min_properties(2)
        .set_default("0")
    )
    assert actual == expected


def test_none_bounds_leave_schema_unchanged():
    sc = Schema().set_multiple_of(None).set_maximum(None).set_minimum(None)
    assert sc == Schema()


def test_set_properties_none_keeps_existing():
    sc = Schema().add_optional_properties(Property(name="a")).set_properties(None)
    assert sc.type == "object"
    assert sc.properties == [Property(name="a")]


def test_add_properties_skips_none():
    sc = Schema().add_required_properties(None, Property(name="x"), None)
    assert sc.properties == [Property(name="x")]
    assert sc.required == ["x"]


def test_set_required_copies():
    names = ["a"]
    sc = Schema().set_required(names)
    names.append("b")
    assert sc.required == ["a"]


def test_escape_ref():
    assert s.escape_ref("/path/with/{id}") == "~1path~1with~1{id}"
    assert s.escape_ref("a~b/c") == "a~0b~1c"


def test_named_schema_local_ref():
    named = Schema().set_description("A toy of a Pet").to_named("User")
    assert named.as_local_ref() == Schema(ref="#/components/schemas/User")
    assert NamedSchema(Schema(), "/x").as_local_ref().ref == "#/components/schemas/~1x"


def test_property_builders():
    p = Property().set_name("n").set_schema(s.boolean())
    assert p == Property(name="n", schema=Schema(type="boolean"))