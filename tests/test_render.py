from json2csv.render import escape_field, format_header, format_number, render_scalar


def test_strings_are_quoted_only_when_needed():
    assert escape_field("plain") == "plain"
    assert escape_field("a,b") == '"a,b"'
    assert escape_field('a"b') == '"a""b"'
    assert escape_field("line\nbreak") == '"line\nbreak"'
    assert escape_field("cr\rhere") == '"cr\rhere"'


def test_empty_string_differs_from_null():
    assert render_scalar("") == '""'
    assert render_scalar(None) == ""


def test_numbers_use_shortest_form():
    assert format_number(1) == "1"
    assert format_number(-3) == "-3"
    assert format_number(1.0) == "1"
    assert format_number(0.1) == "0.1"
    assert format_number(2.5) == "2.5"
    assert format_number(1e20) == "1e+20"
    assert format_number(12345678901234567890) == "12345678901234567890"


def test_booleans_and_containers():
    assert render_scalar(True) == "true"
    assert render_scalar(False) == "false"
    assert render_scalar({"a": 1}) == ""
    assert render_scalar([1]) == ""


def test_header_uses_field_escaping():
    assert format_header(["id", "a,b", "c"]) == 'id,"a,b",c'
