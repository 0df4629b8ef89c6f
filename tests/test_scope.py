import pytest

from crawlscope.scope import ScopeError, ScopeManager


def test_url_rules():
    manager = ScopeManager(["example"], [r"logout\.php"], "dn", False)
    assert manager.validate("https://test.com/index.php/example", "test.com") is True
    assert manager.validate("https://test.com/logout.php", "another.com") is False


def test_host_dn():
    manager = ScopeManager(None, None, "dn", False)
    assert manager.validate("https://testanother.com/index.php", "test.com") is True


def test_host_rdn():
    manager = ScopeManager(None, None, "rdn", False)
    assert manager.validate("https://subdomain.example.com/logout.php", "example.com") is True


def test_host_localhost():
    manager = ScopeManager(None, None, "rdn", False)
    assert manager.validate("http://localhost:8082/logout.php", "localhost") is True


def test_host_fqdn():
    manager = ScopeManager(None, None, "fqdn", False)
    assert manager.validate("https://test.com/index.php", "test.com") is True
    assert manager.validate("https://subdomain.example.com/logout.php", "example.com") is False
    assert manager.validate("https://example.com/logout.php", "another.com") is False


def test_out_of_scope_blocks_in_scope_match():
    manager = ScopeManager(["example"], [r"logout\.php"], "rdn", False)
    assert manager.validate("https://test.com/example/logout.php", "test.com") is False


def test_in_scope_required_when_given():
    manager = ScopeManager(["admin"], None, "rdn", False)
    assert manager.validate("https://test.com/public", "test.com") is False
    assert manager.validate("https://test.com/admin", "test.com") is True


def test_no_scope_accepts_everything():
    manager = ScopeManager(None, None, "fqdn", True)
    assert manager.validate("https://other.org/", "test.com") is True


def test_ip_host_compares_exactly():
    manager = ScopeManager(None, None, "rdn", False)
    assert manager.validate("http://127.0.0.1/x", "127.0.0.1") is True
    assert manager.validate("http://127.0.0.2/x", "127.0.0.1") is False


def test_custom_field_scope_regex():
    manager = ScopeManager(None, None, r"\.internal$", False)
    assert manager.validate("https://api.internal/", "test.com") is True
    assert manager.validate("https://api.test.com/", "test.com") is False


def test_invalid_regex_raises():
    with pytest.raises(ScopeError):
        ScopeManager(["("], None, "rdn", False)
    with pytest.raises(ScopeError):
        ScopeManager(None, None, "[", False)


def test_bad_root_hostname_raises():
    manager = ScopeManager(None, None, "rdn", False)
    with pytest.raises(ScopeError):
        manager.validate("https://test.com/", ".test.com")