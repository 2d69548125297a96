import pytest

from ogen.contents import filter_most_specific, parse_media_type


def test_parse_plain():
    assert parse_media_type("application/json") == ("application/json", {})


def test_parse_lowercases_base_and_keys():
    mt, params = parse_media_type("Application/JSON; Charset=utf-8")
    assert mt == "application/json"
    assert params == {"charset": "utf-8"}


def test_parse_quoted_value():
    mt, params = parse_media_type('text/plain; name="a b"')
    assert mt == "text/plain"
    assert params == {"name": "a b"}


def test_parse_trailing_semicolon():
    assert parse_media_type("text/plain;") == ("text/plain", {})


def test_parse_single_star():
    assert parse_media_type("*") == ("*", {})


@pytest.mark.parametrize(
    "value",
    ["", "text/", "text/plain/x", "text/plain; =x", "text/plain; a=1; a=2", 'a/b; x="open'],
)
def test_parse_errors(value):
    with pytest.raises(ValueError):
        parse_media_type(value)


def test_filter_wildcard_replaced():
    contents = {"*/*": 1, "application/json": 2}
    removed = filter_most_specific(contents)
    assert contents == {"application/json": 2}
    assert removed == {"*/*": "application/json"}


def test_filter_subtype_mask_replaced():
    contents = {"application/*": 1, "application/json": 2, "text/plain": 3}
    removed = filter_most_specific(contents)
    assert list(contents) == ["application/json", "text/plain"]
    assert removed == {"application/*": "application/json"}


def test_filter_keeps_unmatched_mask():
    contents = {"application/*": 1, "text/plain": 2}
    assert filter_most_specific(contents) == {}
    assert list(contents) == ["application/*", "text/plain"]


def test_filter_single_star_alone_kept():
    contents = {"*": 1}
    assert filter_most_specific(contents) == {}
    assert contents == {"*": 1}


def test_filter_single_star_removed_with_others():
    contents = {"*": 1, "text/plain": 2}
    filter_most_specific(contents)
    assert contents == {"text/plain": 2}


def test_filter_invalid_key():
    with pytest.raises(ValueError):
        filter_most_specific({"text/": 1})