"""Regular-expression endpoint extraction from page bodies and scripts."""

from __future__ import annotations

import re

_PAGE_BODY_PATTERN = (
    r"(?:"
    r"("
    r"(?:[\.]{1,2}/[A-Za-z0-9\-_/\\?&@\.?=%]+)"
    r"|(https?://[A-Za-z0-9_\-\.]+([\.]{0,2})?\/[A-Za-z0-9\-_/\\?&@\.?=%]+)"
    r"|(/[A-Za-z0-9\-_/\\?&@\.%]+\.(aspx?|action|cfm|cgi|do|pl|css|x?html?|js(p|on)?|pdf|php5?|py|rss))"
    r"|([A-Za-z0-9\-_?&@\.%]+/[A-Za-z0-9/\\\-_?&@\.%]+\.(aspx?|action|cfm|cgi|do|pl|css|x?html?|js(p|on)?|pdf|php5?|py|rss))"
    r")"
    r")"
)

_RELATIVE_ENDPOINTS_PATTERN = (
    r"(?:\"|'|\s)"
    r"("
    r"((https?://[A-Za-z0-9_\-.]+(?:\:\d{1,5})?)+([\.]{1,2})?/[A-Za-z0-9/\-_\\.%]+(?:[\?|#][^\"']+)?)"
    r"|((\.{1,2}/)?[a-zA-Z0-9\-_/\\%]+\.(aspx?|js(?:on|p)?|html|php5?|action|do)(?:[\?|#][^\"']+)?)"
    r"|((\.{0,2}/)[a-zA-Z0-9\-_/\\%]+(?:/|\\)[a-zA-Z0-9\-_]{3,}(?:[\?|#][^\"']+)?)"
    r"|((\.{0,2})[a-zA-Z0-9\-_/\\%]{3,}/)"
    r")"
    r"(?:\"|'|\s)"
)

_page_body_regex = re.compile(_PAGE_BODY_PATTERN, re.ASCII)
_relative_endpoints_regex = re.compile(_RELATIVE_ENDPOINTS_PATTERN, re.ASCII)


def _unique_first_groups(regex: re.Pattern[str], data: str) -> list[str]:
    return list(dict.fromkeys(match.group(1) or "" for match in regex.finditer(data)))


def extract_body_endpoints(data: str) -> list[str]:
    """Return the distinct endpoints found in a page body, in order of appearance."""
    return _unique_first_groups(_page_body_regex, data)


def extract_relative_endpoints(data: str) -> list[str]:
    """Return the distinct quoted endpoints found in script text, in order."""
    return _unique_first_groups(_relative_endpoints_regex, data)