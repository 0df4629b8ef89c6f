"""Helpers for URLs found in tags, headers and query strings."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from urllib.parse import parse_qsl, quote_plus, urlsplit

logger = logging.getLogger(__name__)

_WEB_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/113.0.0.0 Safari/537.36"
)

_SRCSET_WHITESPACE = " \t\n\r\f"


def is_url(url: str) -> bool:
    """Return True if ``url`` parses and carries a host name."""
    try:
        parsed = urlsplit(url)
        return bool(parsed.hostname)
    except ValueError as exc:
        logger.debug("IsURL: failed to parse url %s got %s", url, exc)
        return False


def _skip_descriptors(value: str, pos: int) -> int:
    in_parens = False
    while pos < len(value):
        char = value[pos]
        pos += 1
        if char == "(":
            in_parens = True
        elif char == ")":
            in_parens = False
        elif char == "," and not in_parens:
            break
    return pos


def parse_srcset_tag(value: str) -> list[str]:
    """Return the candidate URLs of a ``srcset`` attribute, in order."""
    urls: list[str] = []
    pos = 0
    while True:
        while pos < len(value) and (value[pos] in _SRCSET_WHITESPACE or value[pos] == ","):
            pos += 1
        if pos >= len(value):
            return urls
        start = pos
        while pos < len(value) and value[pos] not in _SRCSET_WHITESPACE:
            pos += 1
        url = value[start:pos]
        if url.endswith(","):
            url = url.rstrip(",")
        else:
            pos = _skip_descriptors(value, pos)
        urls.append(url)


def parse_link_tag(value: str) -> list[str]:
    """Return the ``<...>`` targets of a Link header value."""
    urls = []
    for chunk in value.split(","):
        for piece in chunk.split(";"):
            piece = piece.strip(" ")
            if piece and piece[0] == "<" and piece[-1] == ">":
                urls.append(piece.strip("<>"))
    return urls


def parse_refresh_tag(value: str) -> str:
    """Return the URL of a refresh header or meta value, or '' if there is none."""
    chunks = value.split("url=")
    if len(chunks) < 2:
        return ""
    chunk = chunks[1]
    return chunk[:-1] if chunk.endswith(";") else chunk


def web_user_agent() -> str:
    """Return the desktop Chrome user agent used for requests."""
    return _WEB_USER_AGENT


def flatten_headers(headers: Mapping[str, list[str]]) -> dict[str, str]:
    """Join every header's values with ';'."""
    return {key: ";".join(values) for key, values in headers.items()}


def replace_all_query_param(req_url: str, val: str) -> str:
    """Clear the value of every query parameter in ``req_url``, keeping the keys."""
    try:
        parsed = urlsplit(req_url)
    except ValueError:
        return req_url
    keys = dict.fromkeys(key for key, _ in parse_qsl(parsed.query, keep_blank_values=True))
    query = "&".join(f"{quote_plus(key)}=" for key in keys)
    return parsed._replace(query=query).geturl()


def merge_data_maps(target: MutableMapping[str, str], source: Mapping[str, str]) -> None:
    """Copy every entry of ``source`` into ``target`` in order."""
    for key, value in source.items():
        target[key] = value