from dataclasses import dataclass
from enum import Enum, auto

import pytest

from canyonsql.bounds import (
    Column,
    ColumnType,
    FieldIdentifier,
    FieldValueIdentifier,
    ForeignKeyable,
)
from canyonsql.operators import DatabaseType


class LeagueField(FieldIdentifier, Enum):
    id = auto()
    ext_id = auto()
    slug = auto()
    name = auto()


@dataclass
class League(ForeignKeyable):
    id: int
    slug: str


@pytest.mark.parametrize("member", list(LeagueField))
def test_field_identifier_returns_member_name(member):
    assert FieldIdentifier.as_str(member) == member.name


def test_field_identifier_specific_field():
    assert FieldIdentifier.as_str(LeagueField.ext_id) == "ext_id"


def test_field_value_identifier_round_trip():
    fv = FieldValueIdentifier("slug", "lec")
    assert fv.value() == ("slug", "lec")


def test_field_value_identifier_keeps_none():
    assert FieldValueIdentifier("image_url", None).value() == ("image_url", None)


def test_field_value_identifier_is_immutable():
    fv = FieldValueIdentifier("id", 1)
    with pytest.raises(AttributeError):
        fv.column_name = "other"
    assert fv.value() == ("id", 1)


def test_foreign_keyable_returns_field_value():
    league = League(id=42, slug="lck")
    assert ForeignKeyable.get_fk_column(league, "id") == 42
    assert ForeignKeyable.get_fk_column(league, "slug") == "lck"


def test_foreign_keyable_unknown_column_is_none():
    assert ForeignKeyable.get_fk_column(League(id=1, slug="x"), "missing") is None


def test_foreign_keyable_private_names_are_none():
    assert ForeignKeyable.get_fk_column(League(id=1, slug="x"), "__dict__") is None


def test_column_holds_name_and_type():
    ctype = ColumnType(DatabaseType.POSTGRESQL, "name")
    col = Column("table_name", ctype)
    assert col.name == "table_name"
    assert col.column_type.database_type is DatabaseType.POSTGRESQL
    assert col.column_type == ColumnType(DatabaseType.POSTGRESQL, "name")