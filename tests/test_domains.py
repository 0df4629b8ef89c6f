import pytest

from crawlscope.domains import domain_rdn_and_dn, effective_tld_plus_one, public_suffix


def test_domain_rdn_and_dn():
    rdn, dn = domain_rdn_and_dn("test.projectdiscovery.io")
    assert rdn == "projectdiscovery.io"
    assert dn == "projectdiscovery"


def test_domain_rdn_and_dn_multi_label_suffix():
    assert domain_rdn_and_dn("a.example.co.uk") == ("example.co.uk", "example")


def test_domain_rdn_and_dn_bare_suffix():
    assert domain_rdn_and_dn("localhost") == ("localhost", "")


@pytest.mark.parametrize("domain", [".example.com", "example.com.", "a..example.com"])
def test_domain_rdn_and_dn_empty_label(domain):
    with pytest.raises(ValueError):
        domain_rdn_and_dn(domain)


@pytest.mark.parametrize(
    "domain, suffix",
    [
        ("example.com", "com"),
        ("www.example.co.uk", "co.uk"),
        ("foo.unknowntld", "unknowntld"),
        ("a.b.ck", "b.ck"),
        ("www.ck", "ck"),
        ("localhost", "localhost"),
    ],
)
def test_public_suffix(domain, suffix):
    assert public_suffix(domain) == suffix


def test_effective_tld_plus_one():
    assert effective_tld_plus_one("www.example.co.uk") == "example.co.uk"
    assert effective_tld_plus_one("policies.google.com") == "google.com"


def test_effective_tld_plus_one_of_suffix_raises():
    with pytest.raises(ValueError):
        effective_tld_plus_one("co.uk")