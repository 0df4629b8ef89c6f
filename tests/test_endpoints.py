from crawlscope.endpoints import extract_body_endpoints, extract_relative_endpoints


def test_body_endpoint_found_and_deduplicated():
    data = "see /api/users.php and /api/users.php again"
    assert extract_body_endpoints(data) == ["/api/users.php"]


def test_body_absolute_url():
    data = "visit https://example.com/docs/index for details"
    result = extract_body_endpoints(data)
    assert result == ["https://example.com/docs/index"]


def test_body_results_are_unique_substrings():
    data = "./a/b ./a/b /x/y.js ../up/z.css /x/y.js"
    result = extract_body_endpoints(data)
    assert len(result) == len(set(result))
    assert all(item in data for item in result)
    assert result[0] == "./a/b"


def test_body_empty_input():
    assert extract_body_endpoints("") == []


def test_relative_quoted_path():
    data = 'fetch("/api/v1/users").then(go)'
    assert extract_relative_endpoints(data) == ["/api/v1/users"]


def test_relative_absolute_script_url():
    data = "load('https://example.com/static/app.js');"
    assert extract_relative_endpoints(data) == ["https://example.com/static/app.js"]


def test_relative_requires_delimiters():
    assert extract_relative_endpoints("/api/v1/users") == []


def test_relative_results_unique_and_ordered():
    data = '"/api/v1/users" "/api/v1/users" "/api/v2/items"'
    result = extract_relative_endpoints(data)
    assert len(result) == len(set(result))
    assert all(item in data for item in result)
    assert result[0] == "/api/v1/users"