"""Output fields derived from crawled URLs, for display and per-host storage."""

from __future__ import annotations

import contextlib
import logging
import os
import posixpath
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import SplitResult, parse_qsl, unquote, urlencode, urlsplit

from crawlscope.domains import effective_tld_plus_one

logger = logging.getLogger(__name__)

FIELD_NAMES: tuple[str, ...] = (
    "url",
    "path",
    "fqdn",
    "rdn",
    "rurl",
    "qurl",
    "qpath",
    "file",
    "ufile",
    "key",
    "value",
    "kv",
    "dir",
    "udir",
)


class FieldError(ValueError):
    """Raised when an unknown output field is requested."""


@dataclass(frozen=True)
class FieldOutput:
    """One formatted output value together with the field it came from."""

    field: str
    value: str


@dataclass(frozen=True)
class _ParsedURL:
    split: SplitResult
    path: str
    host: str
    hostname: str
    query: dict[str, list[str]]

    @property
    def root_url(self) -> str:
        return f"{self.split.scheme}://{self.host}"

    @property
    def rdn(self) -> str:
        try:
            return effective_tld_plus_one(self.hostname)
        except ValueError:
            return ""

    def encoded_query(self, *, sort_keys: bool = False) -> str:
        keys = sorted(self.query) if sort_keys else list(self.query)
        return urlencode([(key, value) for key in keys for value in self.query[key]])


def _parse(url: str) -> _ParsedURL:
    split = urlsplit(url)
    host = split.netloc.rpartition("@")[2]
    if host.startswith("["):
        hostname = host[1:host.find("]")] if "]" in host else host[1:]
    else:
        hostname = host.partition(":")[0]
    query: dict[str, list[str]] = {}
    for key, value in parse_qsl(split.query, keep_blank_values=True):
        query.setdefault(key, []).append(value)
    return _ParsedURL(
        split=split,
        path=unquote(split.path),
        host=host,
        hostname=hostname,
        query=query,
    )


def _base(path: str) -> str:
    stripped = path.rstrip("/")
    return posixpath.basename(stripped) if stripped else "/"


def _file_name(path: str) -> str:
    if path and path != "/":
        base = _base(path)
        if "." in base:
            return base
    return ""


def _directory(path: str) -> str:
    if path and path != "/" and "/" in path[1:]:
        return path[: path[1:].rfind("/") + 2]
    return ""


def validate_field_names(names: str, custom_field_names: Iterable[str] = ()) -> None:
    """Raise FieldError unless every comma-separated name is a known field."""
    known = set(FIELD_NAMES) | set(custom_field_names)
    for part in names.split(","):
        if part not in known:
            raise FieldError(f"invalid field {part} specified: {names}")


def format_field(
    url: str,
    fields: str,
    custom_fields: Mapping[str, Sequence[str]] | None = None,
) -> list[FieldOutput]:
    """Return the values of the comma-separated ``fields`` for ``url``."""
    try:
        parsed = _parse(url)
    except ValueError:
        return []
    custom_fields = custom_fields or {}
    path = parsed.path
    outputs: list[FieldOutput] = []

    for name in (f for f in fields.split(",") if f):
        if name == "url":
            outputs.append(FieldOutput("url", url))
        elif name == "rdn":
            outputs.append(FieldOutput("rdn", parsed.rdn))
        elif name == "path":
            if path:
                outputs.append(FieldOutput("path", path))
        elif name == "fqdn":
            outputs.append(FieldOutput("fqdn", parsed.hostname))
        elif name == "rurl":
            outputs.append(FieldOutput("rurl", parsed.root_url))
        elif name == "qpath":
            if parsed.query:
                outputs.append(FieldOutput("qpath", f"{path}?{parsed.encoded_query()}"))
        elif name == "qurl":
            if parsed.query:
                outputs.append(FieldOutput("qurl", url))
        elif name == "key":
            outputs.extend(FieldOutput("key", key) for key in parsed.query)
        elif name == "kv":
            outputs.extend(
                FieldOutput("kv", f"{key}={value}")
                for key, values in parsed.query.items()
                for value in values
            )
        elif name == "value":
            outputs.extend(
                FieldOutput("value", value)
                for values in parsed.query.values()
                for value in values
            )
        elif name == "file":
            if file_name := _file_name(path):
                outputs.append(FieldOutput("file", file_name))
        elif name == "ufile":
            if _file_name(path):
                outputs.append(FieldOutput("ufile", parsed.split.geturl()))
        elif name == "udir":
            if directory := _directory(path):
                outputs.append(FieldOutput("udir", parsed.root_url + directory))
        elif name == "dir":
            if directory := _directory(path):
                outputs.append(FieldOutput("dir", directory))
        else:
            outputs.extend(FieldOutput(name, value) for value in custom_fields.get(name, ()))
    return outputs


def _value_for_parsed(url: str, parsed: _ParsedURL, field: str) -> str:
    path = parsed.path
    if field == "url":
        return url
    if field == "path":
        return path
    if field == "fqdn":
        return parsed.hostname
    if field == "rdn":
        return parsed.rdn
    if field == "rurl":
        return parsed.root_url
    if field == "ufile":
        return parsed.split.geturl() if _file_name(path) else ""
    if field == "file":
        return _file_name(path)
    if field == "dir":
        return _directory(path)
    if field == "udir":
        directory = _directory(path)
        return parsed.root_url + directory if directory else ""
    if field == "qpath":
        return f"{path}?{parsed.encoded_query(sort_keys=True)}" if parsed.query else ""
    if field == "qurl":
        return parsed.split.geturl() if parsed.query else ""
    if field == "key":
        return "\n".join(parsed.query)
    if field == "value":
        return "\n".join(v for values in parsed.query.values() for v in values)
    if field == "kv":
        return "\n".join(
            f"{key}={value}" for key, values in parsed.query.items() for value in values
        )
    return ""


def value_for_field(url: str, field: str) -> str:
    """Return the value of one built-in field for ``url``, or '' if it has none."""
    return _value_for_parsed(url, _parse(url), field)


def append_to_field_file(directory: str | os.PathLike[str], url: str, field: str, data: str) -> None:
    """Append ``data`` as a line to the per-host file of ``field``; failures are ignored."""
    try:
        parsed = _parse(url)
    except ValueError:
        return
    target = Path(directory) / f"{parsed.split.scheme}_{parsed.hostname}_{field}.txt"
    with contextlib.suppress(OSError), target.open("a", encoding="utf-8") as handle:
        handle.write(data)
        handle.write("\n")


def store_fields(
    url: str,
    fields: Iterable[str],
    custom_fields: Mapping[str, Sequence[str]] | None,
    directory: str | os.PathLike[str],
) -> None:
    """Write the values of ``fields`` for ``url`` into per-host files in ``directory``."""
    try:
        parsed = _parse(url)
    except ValueError as exc:
        logger.warning("storeFields: failed to parse url %s got %s", url, exc)
        return
    custom_fields = custom_fields or {}
    for field in fields:
        if result := _value_for_parsed(url, parsed, field):
            append_to_field_file(directory, url, field, result)
        if field in custom_fields:
            for name, values in custom_fields.items():
                for value in values:
                    append_to_field_file(directory, url, name, value)