"""Extraction of HTML forms and their field names."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import SplitResult, urlsplit

from bs4 import BeautifulSoup

_DEFAULT_ENCTYPE = "application/x-www-form-urlencoded"


@dataclass
class Form:
    """A form found in a page: where and how it submits, and its field names."""

    method: str = ""
    action: str = ""
    enctype: str = ""
    parameters: list[str] = field(default_factory=list)


def _replace_path(base: SplitResult, action: str) -> str:
    rel = urlsplit(action)
    return base._replace(path=rel.path, query=rel.query, fragment=rel.fragment).geturl()


def _merge_path(base: SplitResult, action: str) -> str:
    rel = urlsplit(action)
    path = base.path if base.path.endswith("/") else base.path + "/"
    query = "&".join(part for part in (base.query, rel.query) if part)
    return base._replace(path=path + rel.path, query=query, fragment=rel.fragment).geturl()


def _resolve_action(action: str, base_url: str | None) -> str:
    if not action:
        return base_url or ""
    try:
        parsed = urlsplit(action)
    except ValueError:
        return base_url or ""
    if parsed.scheme or action.startswith("//") or action.startswith("\\"):
        return action
    if base_url is None:
        return action
    base = urlsplit(base_url)
    if action.startswith("/"):
        return _replace_path(base, action)
    return _merge_path(base, action)


def parse_form_fields(html: str, base_url: str | None = None) -> list[Form]:
    """Return the forms of an HTML document, with relative actions resolved."""
    document = BeautifulSoup(html, "html.parser")
    forms = []
    for form_elem in document.find_all("form"):
        action = form_elem.get("action") or ""
        method = form_elem.get("method") or "GET"
        enctype = form_elem.get("enctype") or ""
        if not enctype and method != "GET":
            enctype = _DEFAULT_ENCTYPE

        form = Form(
            method=method.upper(),
            action=_resolve_action(action, base_url),
            enctype=enctype,
            parameters=[
                elem["name"]
                for elem in form_elem.find_all(["input", "textarea", "select"])
                if elem.has_attr("name")
            ],
        )
        if any((form.action, form.method, form.enctype)) or form.parameters:
            forms.append(form)
    return forms