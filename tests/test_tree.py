import pytest

from json2csv.tree import format_tree


def test_tree_dump():
    expected = "\n".join([
        "OBJECT (3 members):",
        '  "a":',
        "    ARRAY (2 elements):",
        "      [0]:",
        "        NUMBER: 1",
        "      [1]:",
        "        NULL",
        '  "b":',
        "    OBJECT (0 members):",
        "      (empty)",
        '  "c":',
        '    STRING: "hi"',
    ])
    assert format_tree({"a": [1, None], "b": {}, "c": "hi"}) == expected


def test_tree_scalars():
    assert format_tree(True) == "BOOLEAN: true"
    assert format_tree(2.0) == "NUMBER: 2"
    assert format_tree([]) == "ARRAY (0 elements):\n  (empty)"


def test_tree_rejects_foreign_values():
    with pytest.raises(TypeError):
        format_tree({"a": object()})
