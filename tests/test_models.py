"""Unit tests for the column and table models."""

import dataclasses

import pytest

from schemabridge.services.ddl_translation import Column, CompatibilityResult, TableSchema


def test_column_defaults():
    col = Column(name="id", type="int")
    assert col.nullable is True
    assert col.is_primary_key is False
    assert col.length is None
    assert col.comment is None


def test_column_from_camel_case_dict():
    col = Column.from_dict(
        {"name": "id", "type": "bigint", "length": "20", "isPrimaryKey": True, "nullable": False, "defaultValue": 0}
    )
    assert col.length == 20
    assert col.is_primary_key is True
    assert col.nullable is False
    assert col.default_value == "0"


def test_column_from_snake_case_dict_round_trip():
    data = {
        "name": "price",
        "type": "decimal",
        "length": 10,
        "scale": 2,
        "nullable": True,
        "is_primary_key": False,
        "default_value": None,
        "comment": "unit price",
    }
    assert Column.from_dict(data).to_dict() == data


def test_column_ignores_unusable_length():
    assert Column.from_dict({"name": "a", "type": "varchar", "length": "n/a"}).length is None


def test_column_is_immutable():
    col = Column(name="id", type="int")
    with pytest.raises(dataclasses.FrozenInstanceError):
        col.name = "other"


def test_table_schema_from_dict_keeps_column_order():
    table = TableSchema.from_dict(
        {
            "name": "orders",
            "rawDdl": "CREATE TABLE orders (...)",
            "engine": "InnoDB",
            "columns": [
                {"name": "b", "type": "int", "isPrimaryKey": True},
                {"name": "a", "type": "int"},
                {"name": "c", "type": "int", "isPrimaryKey": True},
            ],
        }
    )
    assert [c.name for c in table.columns] == ["b", "a", "c"]
    assert table.primary_keys == ["b", "c"]
    assert table.raw_ddl == "CREATE TABLE orders (...)"
    assert isinstance(table.columns, tuple)


def test_compatibility_result_to_dict():
    assert CompatibilityResult(compatible=True).to_dict() == {"compatible": True}
    assert CompatibilityResult(False, "x").to_dict() == {"compatible": False, "warning": "x"}


@pytest.mark.parametrize(
    "raw, expected",
    [("false", False), ("False", False), ("0", False), (0, False), ("true", True), ("1", True), (1, True)],
)
def test_column_flags_accept_string_and_number_booleans(raw, expected):
    col = Column.from_dict({"name": "a", "type": "int", "nullable": raw, "isPrimaryKey": raw})
    assert col.nullable is expected
    assert col.is_primary_key is expected


def test_column_blank_flags_use_defaults():
    col = Column.from_dict({"name": "a", "type": "int", "nullable": "", "is_primary_key": None})
    assert col.nullable is True
    assert col.is_primary_key is False


def test_column_rejects_unreadable_flag():
    with pytest.raises(ValueError):
        Column.from_dict({"name": "a", "type": "int", "nullable": "maybe"})


def test_column_from_non_mapping_is_rejected():
    with pytest.raises(TypeError):
        Column.from_dict("name type")
    with pytest.raises(TypeError):
        TableSchema.from_dict(["users"])
