import pytest

from canyonsql.entities import (
    CanyonEntity,
    CanyonRegisterEntity,
    CanyonRegisterEntityField,
    EntityError,
    EntityField,
    ForeignKey,
    PrimaryKey,
    parse_annotation,
    register_entity,
    registered_entities,
)


def tournament() -> CanyonEntity:
    return CanyonEntity(
        "Tournament",
        [
            EntityField.from_declaration("id", "i32", [("primary_key", None)]),
            EntityField.from_declaration("ext_id", "i64"),
            EntityField.from_declaration("slug", "String"),
            EntityField.from_declaration("start_date", "NaiveDate"),
            EntityField.from_declaration("end_date", "NaiveDate"),
            EntityField.from_declaration(
                "league", "i32", [("foreign_key", {"table": "league", "column": "id"})]
            ),
        ],
    )


def test_primary_key_as_string():
    assert PrimaryKey(True).as_string() == "Annotation: PrimaryKey, Autoincremental: true"
    assert PrimaryKey(False).as_string().endswith("Autoincremental: false")


def test_foreign_key_as_string():
    assert (
        ForeignKey("league", "id").as_string()
        == "Annotation: ForeignKey, Table: league, Column: id"
    )


def test_bare_primary_key_is_autoincremental():
    assert parse_annotation("primary_key", None) == PrimaryKey(True)


def test_primary_key_with_argument():
    assert parse_annotation("primary_key", {"autoincremental": False}) == PrimaryKey(False)


def test_primary_key_empty_args_requires_autoincremental():
    with pytest.raises(EntityError, match="autoincremental"):
        parse_annotation("primary_key", {})


def test_primary_key_rejects_non_bool():
    with pytest.raises(EntityError, match="Only bool literals"):
        parse_annotation("primary_key", {"autoincremental": "yes"})


def test_foreign_key_parsed():
    assert parse_annotation("foreign_key", {"table": "league", "column": "id"}) == ForeignKey(
        "league", "id"
    )


@pytest.mark.parametrize(
    "args, message",
    [
        ({"column": "id"}, "`table`"),
        ({"table": "league"}, "`column`"),
        (None, "Error generating the Foreign Key"),
        ({"table": 1, "column": "id"}, "Only string literals"),
    ],
)
def test_foreign_key_errors(args, message):
    with pytest.raises(EntityError, match=message):
        parse_annotation("foreign_key", args)


def test_unknown_attribute():
    with pytest.raises(EntityError, match="Unknown attribute `index`"):
        parse_annotation("index", None)


def test_field_from_declaration_parses_attributes():
    league = tournament().fields[-1]
    assert league.name == "league"
    assert league.field_type == "i32"
    assert league.attributes == [ForeignKey("league", "id")]


def test_unnamed_field_rejected():
    with pytest.raises(EntityError, match="unnamed field"):
        EntityField.from_declaration("", "i32")


def test_field_names_in_order():
    assert tournament().field_names() == [
        "id", "ext_id", "slug", "start_date", "end_date", "league",
    ]


def test_field_enum_members_name_fields():
    entity = tournament()
    enum = entity.field_enum()
    assert enum.__name__ == "TournamentField"
    assert [member.as_str() for member in enum] == entity.field_names()
    assert enum["slug"].as_str() == "slug"


def test_field_value_pairs_name_and_value():
    assert tournament().field_value("ext_id", 7).value() == ("ext_id", 7)


def test_field_value_unknown_field():
    with pytest.raises(EntityError):
        tournament().field_value("missing", 1)


def test_field_value_rejects_unsupported_value():
    with pytest.raises(TypeError):
        tournament().field_value("slug", object())


def test_register_field_round_trip():
    registered = tournament().fields[0].to_register_field()
    assert registered.field_name == "id"
    assert registered.annotations == [PrimaryKey(True).as_string()]
    assert registered.is_autoincremental() is True


@pytest.mark.parametrize(
    "field_type, annotations",
    [
        ("i32", [PrimaryKey(False).as_string()]),
        ("String", [PrimaryKey(True).as_string()]),
        ("i64", []),
        ("i32", [ForeignKey("league", "id").as_string()]),
    ],
)
def test_not_autoincremental(field_type, annotations):
    field = CanyonRegisterEntityField("id", field_type, annotations)
    assert field.is_autoincremental() is False


def test_is_nullable():
    assert CanyonRegisterEntityField("image_url", "Option<String>").is_nullable() is True
    assert CanyonRegisterEntityField("role", "String").is_nullable() is False


def test_register_entity_appends_in_order():
    before = registered_entities()
    entity = CanyonRegisterEntity(
        entity_name="League",
        entity_db_table_name="league",
        entity_fields=[CanyonRegisterEntityField("id", "i32")],
    )
    register_entity(entity)
    after = registered_entities()
    assert len(after) == len(before) + 1
    assert after[-1] is entity


def test_registered_entities_returns_copy():
    register_entity(CanyonRegisterEntity(entity_name="Player"))
    snapshot = registered_entities()
    snapshot.clear()
    assert registered_entities()[-1].entity_name == "Player"