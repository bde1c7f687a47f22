import logging

from json2csv.discovery import discover, format_path
from json2csv.schema import TableKind


def test_root_object_and_junction_table():
    reg = discover({"name": "Ann", "tags": ["a", "b"]}, "doc")
    assert [t.name for t in reg] == ["doc", "doc_tags"]
    root, tags = reg["doc"], reg["doc_tags"]
    assert root.kind is TableKind.OBJECT
    assert root.columns == ["id", "name"]
    assert root.shape_signature == "name"
    assert tags.kind is TableKind.ARRAY_OF_SCALARS
    assert tags.columns == ["id", "doc_id", "idx", "value"]
    assert tags.parent_fk_column == "doc_id"
    assert tags.parent is root
    assert reg.table_at(()) is root
    assert reg.table_at(("tags",)) is tags


def test_array_of_objects_gets_child_table():
    reg = discover({"items": [{"x": 1}, {"x": 2}]}, "doc")
    items = reg["doc_items"]
    assert items.kind is TableKind.ARRAY_OF_OBJECTS
    assert items.columns == ["id", "doc_id", "x"]
    assert reg.table_at(("items", 0)) is items
    assert reg.table_at(("items", 1)) is items


def test_same_shape_objects_share_a_table():
    doc = {"home": {"city": "X", "zip": "1"}, "work": {"zip": "2", "city": "Y"}}
    reg = discover(doc, "doc")
    assert [t.name for t in reg] == ["doc", "home"]
    assert reg.table_at(("work",)) is reg["home"]
    assert reg["home"].columns == ["id", "doc_id", "city", "zip"]


def test_array_elements_never_unify_with_object_tables():
    reg = discover({"a": {"x": 1}, "list": [{"x": 2}]}, "doc")
    assert [t.name for t in reg] == ["doc", "a", "doc_list"]
    assert reg.table_at(("list", 0)) is reg["doc_list"]


def test_child_tables_are_shared_across_array_instances():
    doc = {"orders": [{"sku": "A", "tags": ["x"]}, {"sku": "B", "tags": ["y", "z"]}]}
    reg = discover(doc, "doc")
    assert [t.name for t in reg] == ["doc", "doc_orders", "doc_orders_tags"]
    tags = reg["doc_orders_tags"]
    assert tags.parent_fk_column == "doc_orders_id"
    assert reg.table_at(("orders", 0, "tags")) is tags
    assert reg.table_at(("orders", 1, "tags")) is tags


def test_name_collisions_are_suffixed():
    reg = discover({"a": {"x": 1}, "b": {"a": {"y": 2}}}, "doc")
    assert [t.name for t in reg] == ["doc", "a", "a_1"]
    # b has the same empty shape as the root object
    assert reg.table_at(("b",)) is reg["doc"]
    assert reg["a_1"].parent_fk_column == "doc_id"


def test_later_element_keys_are_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        reg = discover({"rows": [{"x": 1}, {"x": 2, "y": 3}, {"y": 4}]}, "doc")
    assert reg["doc_rows"].columns == ["id", "doc_id", "x"]
    assert caplog.text.count("no column for key 'y'") == 1


def test_empty_and_nested_arrays_make_no_tables():
    reg = discover({"a": [], "m": [[1, 2], [3]]}, "doc")
    assert [t.name for t in reg] == ["doc"]
    assert reg.table_at(("a",)) is None
    assert reg.table_at(("m",)) is None


def test_scalar_root_makes_no_tables():
    assert len(discover(42, "doc")) == 0
    assert len(discover(None, "doc")) == 0


def test_root_arrays():
    reg = discover([{"x": 1}, {"x": 2}], "doc")
    assert [t.name for t in reg] == ["doc_items"]
    assert reg["doc_items"].columns == ["id", "x"]
    assert reg["doc_items"].parent_fk_column == ""

    reg = discover(["a", "b"], "doc")
    assert reg["doc_items"].columns == ["id", "doc_items_id", "idx", "value"]


def test_nested_object_under_array_element_links_to_element_table():
    reg = discover({"people": [{"name": "A", "address": {"street": "S"}}]}, "doc")
    address = reg["address"]
    assert address.parent is reg["doc_people"]
    assert address.columns == ["id", "doc_people_id", "street"]


def test_format_path():
    assert format_path(()) == "$"
    assert format_path(("orders", 0, "tags")) == "$.orders[0].tags"
