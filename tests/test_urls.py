from crawlscope.urls import (
    flatten_headers,
    is_url,
    merge_data_maps,
    parse_link_tag,
    parse_refresh_tag,
    parse_srcset_tag,
    replace_all_query_param,
)


def test_parse_link_tag():
    header = (
        '<https://api.github.com/user/58276/repos?page=2>; rel="next",'
        '<https://api.github.com/user/58276/repos?page=10>; rel="last"'
    )
    values = parse_link_tag(header)
    assert sorted(values) == sorted(
        [
            "https://api.github.com/user/58276/repos?page=2",
            "https://api.github.com/user/58276/repos?page=10",
        ]
    )


def test_parse_link_tag_without_targets():
    assert parse_link_tag('rel="next"; title=x') == []


def test_parse_refresh_tag():
    assert parse_refresh_tag("999; url=/test/headers/refresh.found") == "/test/headers/refresh.found"


def test_parse_refresh_tag_trailing_semicolon_and_missing():
    assert parse_refresh_tag("5; url=/next;") == "/next"
    assert parse_refresh_tag("5") == ""
    assert parse_refresh_tag("5; url=") == ""


def test_merge_data_maps():
    first = {"key1": "value1", "key2": "value2"}
    second = {"key3": "value3", "key4": "value4"}
    merge_data_maps(first, second)
    assert first["key1"] == "value1"
    assert first["key2"] == "value2"
    assert first["key3"] == "value3"
    assert first["key4"] == "value4"


def test_merge_data_maps_overwrites_in_place():
    first = {"a": "1", "b": "2"}
    merge_data_maps(first, {"a": "3", "c": "4"})
    assert list(first.items()) == [("a", "3"), ("b", "2"), ("c", "4")]


def test_is_url():
    assert is_url("https://example.com/path") is True
    assert is_url("/relative/path") is False
    assert is_url("http://[::1") is False


def test_parse_srcset_tag():
    assert parse_srcset_tag("image-1x.png 1x, image-2x.png 2x") == ["image-1x.png", "image-2x.png"]
    assert parse_srcset_tag("a.png,b.png 480w") == ["a.png", "b.png"]
    assert parse_srcset_tag("  ") == []


def test_flatten_headers():
    assert flatten_headers({"Accept": ["a", "b"], "X": ["1"]}) == {"Accept": "a;b", "X": "1"}


def test_replace_all_query_param():
    result = replace_all_query_param("https://example.com/p?a=1&b=2&a=3", "x")
    assert result == "https://example.com/p?a=&b="


def test_replace_all_query_param_without_query():
    assert replace_all_query_param("https://example.com/p", "x") == "https://example.com/p"