import pytest

from crawlscope.extensions import Validator, normalize_extension


def test_match_list_accepts_only_listed():
    validator = Validator([".go"], None)
    assert validator.validate_path("main.go") is True
    assert validator.validate_path("main.php") is False


def test_filter_list_denies_extension():
    validator = Validator(None, [".php"])
    assert validator.validate_path("main.php") is False
    assert validator.validate_path("main.go") is True


def test_match_list_bypasses_default_denylist():
    validator = Validator(["png"], None)
    assert validator.validate_path("main.png") is True


def test_default_denylist_applies_to_urls_case_insensitively():
    validator = Validator()
    assert validator.validate_path("https://example.com/images/logo.PNG") is False
    assert validator.validate_path("https://example.com/index.php") is True


def test_no_extension_rejected_when_match_list_present():
    validator = Validator(["js"])
    assert validator.validate_path("https://example.com/api/users") is False


def test_no_extension_allowed_without_match_list():
    assert Validator().validate_path("https://example.com/api/users") is True


def test_query_string_is_ignored_for_extension():
    validator = Validator(["js"])
    assert validator.validate_path("https://example.com/app.js?v=1.png") is True


@pytest.mark.parametrize(
    "raw, expected",
    [("PNG", ".png"), (".Js", ".js"), (".go", ".go")],
)
def test_normalize_extension(raw, expected):
    assert normalize_extension(raw) == expected