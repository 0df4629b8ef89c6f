"""Crawl scope rules based on host names and URL patterns."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable
from enum import Enum
from urllib.parse import urlsplit

from crawlscope.domains import domain_rdn_and_dn


class ScopeError(ValueError):
    """Raised when scope rules are invalid or a host cannot be checked."""


class _FieldScope(Enum):
    DN = "dn"
    RDN = "rdn"
    FQDN = "fqdn"
    CUSTOM = "custom"


_NAMED_FIELD_SCOPES = {"dn": _FieldScope.DN, "rdn": _FieldScope.RDN, "fqdn": _FieldScope.FQDN}


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ScopeError(f"could not compile regex {pattern}: {exc}") from exc


def _is_ip(hostname: str) -> bool:
    try:
        ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return True


class ScopeManager:
    """Decides whether discovered URLs fall inside the crawl scope."""

    def __init__(
        self,
        in_scope: Iterable[str] | None = None,
        out_of_scope: Iterable[str] | None = None,
        field_scope: str = "rdn",
        no_scope: bool = False,
    ) -> None:
        self.no_scope = no_scope
        self.field_scope_pattern: re.Pattern[str] | None = None
        named = _NAMED_FIELD_SCOPES.get(field_scope)
        if named is None:
            self.field_scope = _FieldScope.CUSTOM
            self.field_scope_pattern = _compile(field_scope)
        else:
            self.field_scope = named
        self.in_scope = [_compile(p) for p in in_scope or ()]
        self.out_of_scope = [_compile(p) for p in out_of_scope or ()]

    def validate(self, url: str, root_hostname: str) -> bool:
        """Return True if ``url`` is in scope for a crawl rooted at ``root_hostname``."""
        if self.no_scope:
            return True
        try:
            hostname = urlsplit(url).hostname or ""
        except ValueError as exc:
            raise ScopeError(f"could not parse url {url}: {exc}") from exc

        dns_validated = self._validate_dns(hostname, root_hostname)
        if self.in_scope or self.out_of_scope:
            return self._validate_url(url) and dns_validated
        return dns_validated

    def _validate_url(self, url: str) -> bool:
        if any(p.search(url) for p in self.out_of_scope):
            return False
        if not self.in_scope:
            return True
        return any(p.search(url) for p in self.in_scope)

    def _validate_dns(self, hostname: str, root_hostname: str) -> bool:
        if (
            self.field_scope is _FieldScope.CUSTOM
            and self.field_scope_pattern is not None
            and self.field_scope_pattern.search(hostname)
        ):
            return True
        if self.field_scope is _FieldScope.FQDN or _is_ip(hostname):
            return hostname.casefold() == root_hostname.casefold()

        try:
            rdn, dn = domain_rdn_and_dn(root_hostname)
        except ValueError as exc:
            raise ScopeError(str(exc)) from exc
        if self.field_scope is _FieldScope.DN:
            return dn in hostname
        if self.field_scope is _FieldScope.RDN:
            return hostname.endswith(rdn)
        return False