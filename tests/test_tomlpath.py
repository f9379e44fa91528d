import tomllib

from bookrender.tomlpath import delete, insert, read


def test_read_simple_table():
    value = tomllib.loads("[table]")
    assert read(value, "table") == {}


def test_read_nested_item():
    value = tomllib.loads("[table]\nnested=true")
    assert read(value, "table.nested") is True


def test_read_missing_returns_none():
    value = tomllib.loads("[table]\nnested=true")
    assert read(value, "table.absent") is None
    assert read(value, "table.nested.deeper") is None


def test_insert_item_at_top_level():
    value = {}
    result = insert(value, "first", True)
    assert result is value
    assert value["first"] is True


def test_insert_nested_item():
    value = {}
    insert(value, "first.second", True)
    assert read(value, "first.second") is True
    assert value == {"first": {"second": True}}


def test_insert_replaces_non_table():
    result = insert(5, "a.b", "x")
    assert result == {"a": {"b": "x"}}


def test_insert_replaces_non_table_intermediate():
    value = {"a": 1}
    insert(value, "a.b", 2)
    assert value == {"a": {"b": 2}}


def test_delete_a_top_level_item():
    value = tomllib.loads("top = true")
    assert delete(value, "top") is True
    assert "top" not in value


def test_delete_a_nested_item():
    value = tomllib.loads("[table]\n nested = true")
    assert delete(value, "table.nested") is True
    assert value == {"table": {}}


def test_delete_missing_returns_none():
    value = {"a": {"b": 1}}
    assert delete(value, "a.c") is None
    assert delete(value, "x.y") is None
    assert value == {"a": {"b": 1}}